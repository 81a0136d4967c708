import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.onboarding.models import ApprovalStatus, Merchant, Recruiter, Student


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_client():
    """Return a factory producing JWT-authenticated clients."""
    def _make(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client
    return _make


@pytest.fixture
def student_user(db):
    return User.objects.create_user(
        email='student@example.com',
        password='TestPass123!',
        display_name='Asha',
        role=UserRole.STUDENT,
    )


@pytest.fixture
def merchant_user(db):
    return User.objects.create_user(
        email='merchant@example.com',
        password='TestPass123!',
        role=UserRole.MERCHANT,
    )


@pytest.fixture
def recruiter_user(db):
    return User.objects.create_user(
        email='recruiter@example.com',
        password='TestPass123!',
        role=UserRole.RECRUITER,
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
    )


@pytest.fixture
def student_client(make_client, student_user):
    return make_client(student_user)


@pytest.fixture
def merchant_client(make_client, merchant_user):
    return make_client(merchant_user)


@pytest.fixture
def admin_client(make_client, admin_user):
    return make_client(admin_user)


@pytest.fixture
def pending_student(student_user):
    return Student.objects.create(
        user=student_user,
        full_name='Asha Rao',
        email=student_user.email,
        college='IIT Bombay',
        city='Mumbai',
        state='Maharashtra',
    )


@pytest.fixture
def pending_merchant(merchant_user):
    return Merchant.objects.create(
        user=merchant_user,
        business_name='Chai Point',
        owner_name='Ravi',
        email=merchant_user.email,
        phone='9999999999',
        category='food',
        address='12 MG Road',
        city='Bengaluru',
        state='Karnataka',
    )


@pytest.fixture
def pending_recruiter(recruiter_user):
    return Recruiter.objects.create(
        user=recruiter_user,
        company_name='Campus Gigs',
        contact_name='Meera',
        email=recruiter_user.email,
    )


@pytest.fixture
def approved_student(pending_student):
    pending_student.status = ApprovalStatus.APPROVED
    pending_student.bb_id = 'BB-000042'
    pending_student.save()
    return pending_student
