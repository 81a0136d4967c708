"""Domain-specific exceptions for transactions services."""


class TransactionsServiceError(Exception):
    """Base exception for transactions services."""
    pass


class StudentNotFoundError(TransactionsServiceError):
    """Raised when no student carries the scanned BB-ID."""
    pass


class OfferNotFoundError(TransactionsServiceError):
    """Raised when the offer does not exist or belongs to another merchant."""
    pass


class RedemptionNotAllowedError(TransactionsServiceError):
    """Raised when the eligibility check fails at the counter."""
    pass


class TransactionNotFoundError(TransactionsServiceError):
    """Raised when a student rates a transaction that is not theirs or not completed."""
    pass


class InvalidRatingError(TransactionsServiceError):
    """Raised when stars fall outside 1-5."""
    pass


class DuplicateRatingError(TransactionsServiceError):
    """Raised when a transaction already carries a rating."""
    pass
