"""Domain-specific exceptions for trending services."""


class TrendingServiceError(Exception):
    """Base exception for trending services."""
    pass


class StaleDraftError(TrendingServiceError):
    """Raised when someone else published since the draft was loaded."""
    pass


class InvalidCurationError(TrendingServiceError):
    """Raised for duplicate, unknown, inactive or wrong-kind offers in a draft."""
    pass
