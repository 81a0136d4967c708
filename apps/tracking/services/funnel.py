"""
Coupon funnel events: reveal, copy, click-through and self-reported redemption.

Every reveal opens a new record. Later events only write a stage timestamp
the first time it is reported and move the status forward, never back.
"""

import logging

from django.db import transaction
from django.utils import timezone

from apps.offers.models import OnlineOffer
from apps.onboarding.models import OnlineBrand, Student
from apps.tracking.models import DeviceType, FUNNEL_ORDER, RedemptionRecord, RedemptionStatus
from .exceptions import InvalidRevealError, RecordNotFoundError

logger = logging.getLogger(__name__)


def record_reveal(
    *,
    offer_id,
    student_id=None,
    brand_id=None,
    code: str = None,
    device_type: str = DeviceType.MOBILE,
    source: str = 'APP',
) -> RedemptionRecord:
    """
    Open a funnel record when a student reveals a coupon code.

    ``brand_id`` and ``code`` fall back to the offer's own brand and code.

    Raises:
        InvalidRevealError: If the offer, brand or student does not exist
    """
    try:
        offer = OnlineOffer.objects.get(pk=offer_id)
    except OnlineOffer.DoesNotExist:
        raise InvalidRevealError("Offer not found")

    brand_id = brand_id or offer.brand_id
    if not OnlineBrand.objects.filter(pk=brand_id).exists():
        raise InvalidRevealError("Brand not found")

    if student_id is not None and not Student.objects.filter(pk=student_id).exists():
        raise InvalidRevealError("Student not found")

    record = RedemptionRecord.objects.create(
        student_id=student_id,
        offer=offer,
        brand_id=brand_id,
        code=offer.code if code is None else code,
        device_type=device_type,
        source=source or 'APP',
    )

    logger.info("Coupon revealed: offer=%s student=%s record=%s", offer.pk, student_id, record.pk)
    return record


@transaction.atomic
def _advance(record_id, target: str, timestamp_field: str) -> RedemptionRecord:
    try:
        record = RedemptionRecord.objects.select_for_update().get(pk=record_id)
    except RedemptionRecord.DoesNotExist:
        raise RecordNotFoundError(f"Redemption record {record_id} not found")

    update_fields = []

    if getattr(record, timestamp_field) is None:
        setattr(record, timestamp_field, timezone.now())
        update_fields.append(timestamp_field)

    if FUNNEL_ORDER.index(record.status) < FUNNEL_ORDER.index(target):
        record.status = target
        update_fields.append('status')

    if update_fields:
        record.save(update_fields=update_fields)
        logger.info("Redemption record %s -> %s", record.pk, record.status)

    return record


def record_copy(*, record_id) -> RedemptionRecord:
    return _advance(record_id, RedemptionStatus.COPIED, 'copied_at')


def record_click(*, record_id) -> RedemptionRecord:
    return _advance(record_id, RedemptionStatus.CLICKED, 'clicked_through_at')


def record_self_reported_redemption(*, record_id) -> RedemptionRecord:
    """Student says they used the code. Stays unverified."""
    return _advance(record_id, RedemptionStatus.REDEEMED, 'redeemed_at')
