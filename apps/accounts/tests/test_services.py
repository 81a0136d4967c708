"""
Service layer unit tests for accounts app.
"""

import pytest
from datetime import timedelta
from django.utils import timezone

from apps.accounts.models import DevicePasscode, UserRole
from apps.accounts.services import (
    register_user,
    authenticate_user,
    set_passcode,
    verify_passcode,
)
from apps.accounts.services.exceptions import (
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidPasscodeFormatError,
    PasscodeNotSetError,
    PasscodeLockedError,
)

from .conftest import DEVICE_ID, PASSCODE


@pytest.mark.django_db
class TestRegistrationService:

    def test_register_defaults_to_student(self):
        user = register_user(email='a@example.com', password='SecurePass123!')

        assert user.role == UserRole.STUDENT
        assert user.check_password('SecurePass123!')

    def test_register_rejects_admin_role(self):
        with pytest.raises(UserRegistrationError):
            register_user(email='a@example.com', password='SecurePass123!', role=UserRole.ADMIN)

    def test_register_rejects_duplicate_case_insensitive(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email=user.email.upper(), password='SecurePass123!')


@pytest.mark.django_db
class TestAuthenticationService:

    def test_authenticate_updates_last_login(self, user):
        assert user.last_login is None

        result = authenticate_user(email=user.email, password='TestPass123!')

        assert result == user
        result.refresh_from_db()
        assert result.last_login is not None

    def test_authenticate_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')

    def test_authenticate_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_authenticate_wrong_portal(self, merchant_user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=merchant_user.email, password='TestPass123!', portal='student')

    def test_admin_signs_in_on_any_portal(self, admin_user):
        result = authenticate_user(email=admin_user.email, password='AdminPass123!', portal='merchant')

        assert result == admin_user


@pytest.mark.django_db
class TestPasscodeService:

    def test_set_passcode_replaces_existing_and_clears_lock(self, user_with_passcode):
        entry = DevicePasscode.objects.get(user=user_with_passcode, device_id=DEVICE_ID)
        entry.failed_attempts = 2
        entry.locked_until = timezone.now() + timedelta(minutes=5)
        entry.save()

        set_passcode(user=user_with_passcode, device_id=DEVICE_ID, passcode='111111')

        entry.refresh_from_db()
        assert entry.failed_attempts == 0
        assert entry.locked_until is None
        assert DevicePasscode.objects.filter(user=user_with_passcode).count() == 1
        assert verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode='111111') == user_with_passcode

    def test_set_passcode_invalid_format(self, user):
        with pytest.raises(InvalidPasscodeFormatError):
            set_passcode(user=user, device_id=DEVICE_ID, passcode='12ab56')

    def test_verify_passcode_success_resets_counter(self, user_with_passcode):
        with pytest.raises(InvalidCredentialsError):
            verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode='000000')

        verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode=PASSCODE)

        entry = DevicePasscode.objects.get(user=user_with_passcode, device_id=DEVICE_ID)
        assert entry.failed_attempts == 0
        assert entry.last_used_at is not None

    def test_failed_attempts_are_persisted(self, user_with_passcode):
        with pytest.raises(InvalidCredentialsError):
            verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode='000000')

        entry = DevicePasscode.objects.get(user=user_with_passcode, device_id=DEVICE_ID)
        assert entry.failed_attempts == 1

    def test_lockout_after_max_attempts(self, user_with_passcode, settings):
        settings.PASSCODE_MAX_ATTEMPTS = 2
        for _ in range(2):
            with pytest.raises(InvalidCredentialsError):
                verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode='000000')

        with pytest.raises(PasscodeLockedError):
            verify_passcode(email=user_with_passcode.email, device_id=DEVICE_ID, passcode=PASSCODE)

    def test_verify_unknown_device(self, user_with_passcode):
        with pytest.raises(PasscodeNotSetError):
            verify_passcode(email=user_with_passcode.email, device_id='unknown', passcode=PASSCODE)
