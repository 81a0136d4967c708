import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.accounts.services import set_passcode


DEVICE_ID = 'device-abc-123'
PASSCODE = '482913'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test student account."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
        email_verified=True,
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def admin_user(db):
    """Create and return a marketplace admin."""
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
    )


@pytest.fixture
def merchant_user(db):
    return User.objects.create_user(
        email='merchant@example.com',
        password='TestPass123!',
        role=UserRole.MERCHANT,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def user_with_passcode(user):
    """Student with a passcode configured on DEVICE_ID."""
    set_passcode(user=user, device_id=DEVICE_ID, passcode=PASSCODE)
    return user
