import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.offers.models import OnlineOffer
from apps.onboarding.models import ApprovalStatus, OnlineBrand, Student
from apps.tracking.services import record_reveal


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_client():
    def _make(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client
    return _make


@pytest.fixture
def admin_client(make_client, db):
    return make_client(User.objects.create_superuser(email='admin@example.com', password='AdminPass123!'))


@pytest.fixture
def student_user(db):
    return User.objects.create_user(
        email='student@example.com',
        password='TestPass123!',
        role=UserRole.STUDENT,
    )


@pytest.fixture
def student_client(make_client, student_user):
    return make_client(student_user)


@pytest.fixture
def student(student_user):
    return Student.objects.create(
        user=student_user,
        bb_id='BB-000042',
        full_name='Asha Rao',
        email=student_user.email,
        college='IIT Bombay',
        city='Mumbai',
        state='Maharashtra',
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def brand(db):
    return OnlineBrand.objects.create(name='Zomato', slug='zomato')


@pytest.fixture
def online_offer(brand):
    return OnlineOffer.objects.create(
        brand=brand,
        title='Flat 100 off',
        code='STUDENT100',
        link='https://example.com/deal',
    )


@pytest.fixture
def record(student, online_offer):
    return record_reveal(student_id=student.id, offer_id=online_offer.id)
