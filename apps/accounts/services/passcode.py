"""
Device passcode service.

A passcode is a 6-digit PIN bound to one (user, device) pair. It lets a
returning device sign in without the full email/password round trip.
"""

import logging
import re
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import DevicePasscode, User
from .exceptions import (
    InactiveAccountError,
    InvalidCredentialsError,
    InvalidPasscodeFormatError,
    PasscodeLockedError,
    PasscodeNotSetError,
)

logger = logging.getLogger(__name__)

PASSCODE_PATTERN = re.compile(r'^\d{6}$')


def _validate_format(passcode: str) -> None:
    if not isinstance(passcode, str) or not PASSCODE_PATTERN.match(passcode):
        raise InvalidPasscodeFormatError("Passcode must be exactly 6 digits")


@transaction.atomic
def set_passcode(*, user: User, device_id: str, passcode: str) -> DevicePasscode:
    """
    Create or replace the passcode for a device.

    Replacing a passcode also clears any lockout on that device.

    Raises:
        InvalidPasscodeFormatError: If passcode is not 6 digits
    """
    _validate_format(passcode)

    entry, _ = DevicePasscode.objects.select_for_update().get_or_create(
        user=user,
        device_id=device_id,
        defaults={'passcode_hash': make_password(passcode)},
    )
    entry.passcode_hash = make_password(passcode)
    entry.failed_attempts = 0
    entry.locked_until = None
    entry.save(update_fields=['passcode_hash', 'failed_attempts', 'locked_until', 'updated_at'])

    return entry


def verify_passcode(*, email: str, device_id: str, passcode: str) -> User:
    """
    Check a device passcode and return the account it unlocks.

    Failed attempts are persisted before the error is raised, so the
    counter survives the failing request.

    Raises:
        InvalidPasscodeFormatError: If passcode is not 6 digits
        PasscodeNotSetError: If the device has no passcode for this account
        PasscodeLockedError: If the device is locked out
        InvalidCredentialsError: If the passcode does not match
        InactiveAccountError: If the account is deactivated
    """
    _validate_format(passcode)

    with transaction.atomic():
        try:
            entry = (
                DevicePasscode.objects
                .select_for_update()
                .select_related('user')
                .get(user__email__iexact=email, device_id=device_id)
            )
        except DevicePasscode.DoesNotExist:
            raise PasscodeNotSetError("No passcode set up on this device")

        if entry.is_locked():
            raise PasscodeLockedError("Too many attempts. Try again later.")

        matched = check_password(passcode, entry.passcode_hash)
        now = timezone.now()

        if matched:
            entry.failed_attempts = 0
            entry.locked_until = None
            entry.last_used_at = now
        else:
            entry.failed_attempts += 1
            if entry.failed_attempts >= settings.PASSCODE_MAX_ATTEMPTS:
                entry.locked_until = now + timedelta(minutes=settings.PASSCODE_LOCKOUT_MINUTES)
                entry.failed_attempts = 0
                logger.warning("Passcode locked for device %s (user %s)", device_id, entry.user_id)

        entry.save(update_fields=['failed_attempts', 'locked_until', 'last_used_at', 'updated_at'])

    if not matched:
        raise InvalidCredentialsError("Invalid passcode")

    user = entry.user
    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = now
    user.save(update_fields=['last_login'])
    return user
