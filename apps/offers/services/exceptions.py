"""Domain-specific exceptions for offers services."""


class OffersServiceError(Exception):
    """Base exception for offers services."""
    pass


class MerchantNotApprovedError(OffersServiceError):
    """Raised when an unapproved merchant tries to publish offers."""
    pass


class InvalidOfferError(OffersServiceError):
    """Raised when offer pricing or validity is inconsistent."""
    pass


class OfferNotFoundError(OffersServiceError):
    """Raised when an offer does not exist or belongs to another merchant."""
    pass
