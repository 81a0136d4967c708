"""Email/password sign-in for the student, merchant, recruiter and admin portals."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()


def authenticate_user(*, email: str, password: str, portal: str = None) -> User:
    """
    Check credentials and stamp ``last_login``.

    ``portal`` is the role of the app the user signs in from. A merchant
    cannot sign in to the student app with valid credentials; admins can
    sign in anywhere. The same error is raised for every mismatch so the
    response does not reveal which accounts exist.

    Raises:
        InvalidCredentialsError: Unknown email, wrong password or wrong portal
        InactiveAccountError: If the account is deactivated
    """
    user = User.objects.filter(email__iexact=(email or '').strip()).first()

    if user is None or not user.check_password(password):
        logger.info("Failed sign-in for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if portal and user.role != portal and not user.is_marketplace_admin:
        logger.info("Sign-in for %s rejected on the %s portal", user.email, portal)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    return user
