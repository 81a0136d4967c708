"""
Read-side catalog queries.

These back the student browse screens and the curator's offer picker.
"""

from django.db.models import Q
from django.utils import timezone

from apps.offers.models import LocationScope, Offer, OfferStatus, OnlineOffer
from apps.onboarding.models import ApprovalStatus

# Older rows used the plural spelling
STATE_SCOPES = {LocationScope.STATE, 'STATES'}
CITY_SCOPES = {LocationScope.CITY, 'CITIES'}


def _currently_valid(now=None):
    now = now or timezone.now()
    return Q(valid_until__isnull=True) | Q(valid_until__gte=now)


def list_active_offers(*, search: str = '', city: str = '', category: str = ''):
    """
    Active in-store offers of approved merchants.

    ``search`` matches the offer title, the merchant name or its BBM-ID.
    """
    queryset = (
        Offer.objects
        .filter(status=OfferStatus.ACTIVE, merchant__status=ApprovalStatus.APPROVED)
        .filter(_currently_valid())
        .select_related('merchant')
    )

    search = (search or '').strip()
    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(merchant__business_name__icontains=search) |
            Q(merchant__bbm_id__iexact=search)
        )

    if city:
        queryset = queryset.filter(merchant__city__iexact=city.strip())

    if category:
        queryset = queryset.filter(merchant__category__icontains=category.strip())

    return queryset


def list_active_online_offers(*, search: str = ''):
    """Active online offers of active brands, newest first."""
    queryset = (
        OnlineOffer.objects
        .filter(is_active=True, brand__is_active=True)
        .filter(_currently_valid())
        .select_related('brand')
        .order_by('-created_at')
    )

    search = (search or '').strip()
    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(brand__name__icontains=search)
        )

    return queryset


def is_visible_for_location(online_offer: OnlineOffer, city: str = '', state: str = '') -> bool:
    """
    Whether a student in ``city`` / ``state`` may see the offer.

    PAN_INDIA offers are shown everywhere. Without any student location
    every offer is shown. STATE and CITY scopes match case-insensitively
    against ``location_values``.
    """
    scope = (online_offer.location_scope or LocationScope.PAN_INDIA).upper()
    if scope == LocationScope.PAN_INDIA:
        return True

    city = (city or '').strip().lower()
    state = (state or '').strip().lower()
    if not city and not state:
        return True

    values = {str(v).strip().lower() for v in (online_offer.location_values or [])}

    if scope in STATE_SCOPES and state:
        return state in values
    if scope in CITY_SCOPES and city:
        return city in values
    return False


def filter_visible(online_offers, *, city: str = '', state: str = '') -> list:
    return [
        offer for offer in online_offers
        if is_visible_for_location(offer, city=city, state=state)
    ]
