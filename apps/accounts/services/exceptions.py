"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class InvalidPasscodeFormatError(AccountsServiceError):
    """Raised when a passcode is not exactly six digits."""
    pass


class PasscodeNotSetError(AccountsServiceError):
    """Raised when no passcode exists for the user/device pair."""
    pass


class PasscodeLockedError(AccountsServiceError):
    """Raised when the device is locked after too many failed attempts."""
    pass
