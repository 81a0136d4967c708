import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.offers.models import Offer, OfferType
from apps.onboarding.models import ApprovalStatus, Merchant, Student
from apps.transactions.services import record_transaction


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
def merchant_user(db):
    return User.objects.create_user(
        email='merchant@example.com',
        password='TestPass123!',
        role=UserRole.MERCHANT,
    )


@pytest.fixture
def student_user(db):
    return User.objects.create_user(
        email='student@example.com',
        password='TestPass123!',
        role=UserRole.STUDENT,
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')


@pytest.fixture
def merchant_client(make_client, merchant_user):
    return make_client(merchant_user)


@pytest.fixture
def student_client(make_client, student_user):
    return make_client(student_user)


@pytest.fixture
def admin_client(make_client, admin_user):
    return make_client(admin_user)


@pytest.fixture
def merchant(merchant_user):
    return Merchant.objects.create(
        user=merchant_user,
        bbm_id='BBM-000007',
        business_name='Chai Point',
        owner_name='Ravi',
        email=merchant_user.email,
        phone='9999999999',
        category='Food & Beverages',
        address='12 MG Road',
        city='Bengaluru',
        state='Karnataka',
        status=ApprovalStatus.APPROVED,
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
def pending_student(db):
    user = User.objects.create_user(email='pending@example.com', password='TestPass123!')
    return Student.objects.create(
        user=user,
        bb_id='BB-000099',
        full_name='Dev Shah',
        email=user.email,
        college='NIT Trichy',
        city='Trichy',
        state='Tamil Nadu',
    )


@pytest.fixture
def offer(merchant):
    """20% off, capped at 50, twice per student."""
    return Offer.objects.create(
        merchant=merchant,
        title='20% off on all drinks',
        type=OfferType.PERCENTAGE,
        original_price=Decimal('200.00'),
        discount_value=Decimal('20.00'),
        discount_amount=Decimal('40.00'),
        final_price=Decimal('160.00'),
        max_discount=Decimal('50.00'),
        max_uses_per_student=2,
    )


@pytest.fixture
def flat_offer(merchant):
    return Offer.objects.create(
        merchant=merchant,
        title='Flat 100 off above 500',
        type=OfferType.FLAT,
        original_price=Decimal('500.00'),
        discount_value=Decimal('100.00'),
        discount_amount=Decimal('100.00'),
        final_price=Decimal('400.00'),
        min_order_value=Decimal('500.00'),
    )


@pytest.fixture
def completed_transaction(merchant, student, offer):
    return record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
