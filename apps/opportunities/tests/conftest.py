import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.onboarding.models import ApprovalStatus, Recruiter, Student
from apps.opportunities.models import (
    Opportunity,
    OpportunityCategory,
    OpportunityStatus,
    OpportunityType,
    WorkMode,
)


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
def recruiter_user(db):
    return User.objects.create_user(
        email='hr@example.com',
        password='TestPass123!',
        role=UserRole.RECRUITER,
    )


@pytest.fixture
def recruiter(recruiter_user):
    """Verified recruiter."""
    return Recruiter.objects.create(
        user=recruiter_user,
        bbr_id='BBR-000007',
        company_name='Acme Labs',
        contact_name='Meera',
        email=recruiter_user.email,
        city='Pune',
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def pending_recruiter(db):
    user = User.objects.create_user(
        email='newhr@example.com',
        password='TestPass123!',
        role=UserRole.RECRUITER,
    )
    return Recruiter.objects.create(
        user=user,
        company_name='Fresh Startup',
        contact_name='Kabir',
        email=user.email,
    )


@pytest.fixture
def student_user(db):
    return User.objects.create_user(
        email='student@example.com',
        password='TestPass123!',
        role=UserRole.STUDENT,
    )


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
def admin_user(db):
    return User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')


@pytest.fixture
def recruiter_client(make_client, recruiter, recruiter_user):
    return make_client(recruiter_user)


@pytest.fixture
def student_client(make_client, student, student_user):
    return make_client(student_user)


@pytest.fixture
def admin_client(make_client, admin_user):
    return make_client(admin_user)


@pytest.fixture
def category(db):
    return OpportunityCategory.objects.create(name='Design', display_order=1)


@pytest.fixture
def opportunity(recruiter, category):
    """Live in-app listing in Pune."""
    return Opportunity.objects.create(
        recruiter=recruiter,
        category=category,
        title='UI design intern',
        description='Figma work for a product team',
        type=OpportunityType.INTERNSHIP,
        work_mode=WorkMode.HYBRID,
        compensation='10000/month',
        city='Pune',
        status=OpportunityStatus.ACTIVE,
    )


@pytest.fixture
def listing_fields(category):
    return {
        'category': category,
        'title': 'Content writer',
        'description': 'Blog posts on campus life',
        'type': OpportunityType.FREELANCE,
        'work_mode': WorkMode.REMOTE,
        'is_pan_india': True,
    }
