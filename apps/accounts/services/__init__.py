"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidPasscodeFormatError,
    PasscodeNotSetError,
    PasscodeLockedError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .passcode import set_passcode, verify_passcode

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidPasscodeFormatError',
    'PasscodeNotSetError',
    'PasscodeLockedError',
    # Services
    'register_user',
    'authenticate_user',
    'set_passcode',
    'verify_passcode',
]
