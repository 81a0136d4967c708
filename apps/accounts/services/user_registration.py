"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from .exceptions import UserRegistrationError

User = get_user_model()

SELF_SERVICE_ROLES = {
    UserRole.STUDENT,
    UserRole.MERCHANT,
    UserRole.RECRUITER,
}


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = "",
    role: str = UserRole.STUDENT
) -> User:
    """
    Register a new marketplace account.

    Brands and admins are provisioned by staff, so only student, merchant
    and recruiter accounts can sign up on their own.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name
        role: Marketplace role of the new account

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the role is not self-service or the email is taken
    """
    if role not in SELF_SERVICE_ROLES:
        raise UserRegistrationError(f"Role '{role}' cannot self-register")

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("An account with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name,
            role=role,
        )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    return user
