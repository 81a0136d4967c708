"""Merchant-side offer management."""

import logging
from decimal import Decimal

from django.db import transaction

from apps.offers.models import Offer, OfferStatus, OfferType
from apps.onboarding.models import Merchant
from .exceptions import InvalidOfferError, MerchantNotApprovedError, OfferNotFoundError
from .pricing import compute_discount

logger = logging.getLogger(__name__)

PRICING_FIELDS = {'type', 'original_price', 'discount_value', 'max_discount'}


def _apply_pricing(offer: Offer) -> None:
    offer.discount_amount, offer.final_price = compute_discount(
        offer_type=offer.type,
        amount=offer.original_price,
        discount_value=offer.discount_value,
        max_discount=offer.max_discount,
    )


def _validate(offer: Offer) -> None:
    if offer.valid_until and offer.valid_from and offer.valid_until <= offer.valid_from:
        raise InvalidOfferError("valid_until must be after valid_from")
    if offer.type == OfferType.PERCENTAGE and offer.discount_value > Decimal('100'):
        raise InvalidOfferError("Percentage discount cannot exceed 100")


@transaction.atomic
def create_offer(*, merchant: Merchant, **fields) -> Offer:
    """
    Create an offer for an approved merchant.

    ``discount_amount`` and ``final_price`` are always derived from the
    pricing fields.

    Raises:
        MerchantNotApprovedError: If the merchant is not approved
        InvalidOfferError: If validity or pricing is inconsistent
    """
    if not merchant.is_approved:
        raise MerchantNotApprovedError("Only approved merchants can publish offers")

    offer = Offer(merchant=merchant, **fields)
    _validate(offer)
    _apply_pricing(offer)
    offer.save()

    logger.info("Merchant %s created offer %s", merchant.bbm_id, offer.pk)
    return offer


def get_merchant_offer(*, merchant: Merchant, offer_id) -> Offer:
    try:
        return Offer.objects.get(pk=offer_id, merchant=merchant)
    except Offer.DoesNotExist:
        raise OfferNotFoundError("Offer not found")


@transaction.atomic
def update_offer(*, offer: Offer, **changes) -> Offer:
    """Update offer fields, re-deriving prices when pricing changes."""
    offer = Offer.objects.select_for_update().get(pk=offer.pk)

    for field, value in changes.items():
        setattr(offer, field, value)

    _validate(offer)
    if PRICING_FIELDS & set(changes):
        _apply_pricing(offer)
    offer.save()
    return offer


@transaction.atomic
def set_offer_status(*, offer: Offer, status: str) -> Offer:
    if status not in OfferStatus.values:
        raise InvalidOfferError(f"Unknown status '{status}'")

    offer = Offer.objects.select_for_update().get(pk=offer.pk)
    offer.status = status
    offer.save(update_fields=['status', 'updated_at'])
    return offer
