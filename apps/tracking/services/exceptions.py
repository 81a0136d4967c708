"""Domain-specific exceptions for tracking services."""


class TrackingServiceError(Exception):
    """Base exception for tracking services."""
    pass


class RecordNotFoundError(TrackingServiceError):
    """Raised when a redemption record does not exist."""
    pass


class InvalidRevealError(TrackingServiceError):
    """Raised when a reveal references an unknown offer, brand or student."""
    pass
