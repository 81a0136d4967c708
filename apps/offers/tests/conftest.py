import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.offers.models import LocationScope, Offer, OfferType, OnlineOffer
from apps.onboarding.models import ApprovalStatus, Merchant, OnlineBrand, Student


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
def admin_user(db):
    return User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')


@pytest.fixture
def merchant_client(make_client, merchant_user):
    return make_client(merchant_user)


@pytest.fixture
def admin_client(make_client, admin_user):
    return make_client(admin_user)


@pytest.fixture
def merchant(merchant_user):
    """Approved in-store merchant."""
    return Merchant.objects.create(
        user=merchant_user,
        bbm_id='BBM-000001',
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
def pending_merchant(db):
    user = User.objects.create_user(
        email='pending@example.com',
        password='TestPass123!',
        role=UserRole.MERCHANT,
    )
    return Merchant.objects.create(
        user=user,
        business_name='Dosa Corner',
        owner_name='Lakshmi',
        email=user.email,
        phone='8888888888',
        category='Food',
        address='4 Park Street',
        city='Kolkata',
        state='West Bengal',
    )


@pytest.fixture
def offer(merchant):
    return Offer.objects.create(
        merchant=merchant,
        title='20% off on all drinks',
        type=OfferType.PERCENTAGE,
        original_price=Decimal('200.00'),
        discount_value=Decimal('20.00'),
        discount_amount=Decimal('40.00'),
        final_price=Decimal('160.00'),
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
def city_offer(brand):
    return OnlineOffer.objects.create(
        brand=brand,
        title='Pune only',
        code='PUNE50',
        location_scope=LocationScope.CITY,
        location_values=['Pune', ' Mumbai '],
    )


@pytest.fixture
def state_offer(brand):
    return OnlineOffer.objects.create(
        brand=brand,
        title='Karnataka only',
        code='KA50',
        location_scope=LocationScope.STATE,
        location_values=['Karnataka'],
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
def student_client(make_client, student, student_user):
    return make_client(student_user)
