"""Domain-specific exceptions for onboarding services."""


class OnboardingServiceError(Exception):
    """Base exception for onboarding services."""
    pass


class ApplicationExistsError(OnboardingServiceError):
    """Raised when the user already has an active application of this kind."""
    pass


class InvalidStatusTransitionError(OnboardingServiceError):
    """Raised when an approval transition is not allowed from the current status."""
    pass


class UploadError(OnboardingServiceError):
    """Raised when an image cannot be validated or stored."""
    pass


class StudentPassUnavailableError(OnboardingServiceError):
    """Raised when a pass is requested for a student who is not approved."""
    pass
