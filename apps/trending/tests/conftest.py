import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.offers.models import LocationScope, Offer, OfferType, OnlineOffer
from apps.onboarding.models import ApprovalStatus, Merchant, OnlineBrand


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
def admin_user(db):
    return User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')


@pytest.fixture
def admin_client(make_client, admin_user):
    return make_client(admin_user)


@pytest.fixture
def student_client(make_client, db):
    user = User.objects.create_user(email='student@example.com', password='TestPass123!', role=UserRole.STUDENT)
    return make_client(user)


@pytest.fixture
def make_merchant(db):
    def _make(name, city='Bengaluru', **kwargs):
        slug = name.lower().replace(' ', '')
        user = User.objects.create_user(email=f'{slug}@example.com', password='x', role=UserRole.MERCHANT)
        return Merchant.objects.create(
            user=user,
            bbm_id=kwargs.pop('bbm_id', None),
            business_name=name,
            owner_name='Owner',
            email=user.email,
            phone='9999999999',
            category='Food',
            address='1 Main Road',
            city=city,
            state='Karnataka',
            status=kwargs.pop('status', ApprovalStatus.APPROVED),
            **kwargs
        )
    return _make


@pytest.fixture
def make_offer():
    def _make(merchant, title):
        return Offer.objects.create(
            merchant=merchant,
            title=title,
            type=OfferType.FLAT,
            original_price=Decimal('200.00'),
            discount_value=Decimal('50.00'),
            discount_amount=Decimal('50.00'),
            final_price=Decimal('150.00'),
        )
    return _make


@pytest.fixture
def offline_offers(make_merchant, make_offer):
    """Three active in-store offers at different merchants."""
    return [
        make_offer(make_merchant('Chai Point'), 'Chai combo'),
        make_offer(make_merchant('Dosa Corner'), 'Free dosa'),
        make_offer(make_merchant('Book Nook', city='Pune'), '10% off books'),
    ]


@pytest.fixture
def brand(db):
    return OnlineBrand.objects.create(name='Zomato', slug='zomato')


@pytest.fixture
def online_offers(brand):
    return [
        OnlineOffer.objects.create(brand=brand, title='Flat 100 off', code='STUDENT100'),
        OnlineOffer.objects.create(brand=brand, title='Free delivery', code='FREEDEL'),
        OnlineOffer.objects.create(
            brand=brand,
            title='Pune special',
            code='PUNE50',
            location_scope=LocationScope.CITY,
            location_values=['Pune'],
        ),
    ]
