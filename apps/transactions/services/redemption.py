"""
Counter redemption: the merchant scans a student pass (or types the BB-ID),
picks one of its offers and confirms the bill amount.
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.offers.models import Offer, OfferStatus
from apps.offers.services import compute_discount
from apps.onboarding.models import Merchant, Student
from apps.transactions.models import PaymentMethod, Transaction, TransactionStatus
from .exceptions import OfferNotFoundError, RedemptionNotAllowedError, StudentNotFoundError
from .types import RedemptionEligibility

logger = logging.getLogger(__name__)


def find_student_by_bb_id(bb_id: str) -> Student:
    """
    Look up a student by BB-ID, ignoring case and surrounding spaces.

    Raises:
        StudentNotFoundError: If no student has this BB-ID
    """
    bb_id = (bb_id or '').strip()
    if not bb_id:
        raise StudentNotFoundError("BB-ID is required")

    try:
        return Student.objects.select_related('user').get(bb_id__iexact=bb_id)
    except Student.DoesNotExist:
        raise StudentNotFoundError(f"No student found with ID {bb_id.upper()}")


def completed_uses(*, student: Student, offer: Offer) -> int:
    return Transaction.objects.filter(
        student=student,
        offer=offer,
        status=TransactionStatus.COMPLETED,
    ).count()


def can_redeem(*, student: Student, offer: Offer, at=None) -> RedemptionEligibility:
    """
    Check whether ``student`` may redeem ``offer`` right now.

    ``remaining_uses`` is None when the offer has no per-student limit.
    """
    if not student.is_approved:
        return RedemptionEligibility(False, "Student is not verified")

    if offer.status != OfferStatus.ACTIVE:
        return RedemptionEligibility(False, "Offer is not active")

    if not offer.is_within_validity(at or timezone.now()):
        return RedemptionEligibility(False, "Offer is outside its validity period")

    if not offer.merchant.is_approved:
        return RedemptionEligibility(False, "Merchant is not approved")

    if offer.max_uses_per_student is None:
        return RedemptionEligibility(True)

    remaining = offer.max_uses_per_student - completed_uses(student=student, offer=offer)
    if remaining <= 0:
        return RedemptionEligibility(False, "Usage limit reached for this offer", 0)

    return RedemptionEligibility(True, remaining_uses=remaining)


@transaction.atomic
def record_transaction(
    *,
    merchant: Merchant,
    student_bb_id: str,
    offer_id,
    original_amount: Decimal = None,
    payment_method: str = PaymentMethod.CASH,
    scanned_by=None,
) -> Transaction:
    """
    Record a confirmed redemption and update the running totals.

    The offer row is locked so two scans of the same student cannot both
    pass the usage-limit check.

    Args:
        merchant: Merchant confirming the redemption
        student_bb_id: Scanned or typed BB-ID
        offer_id: One of the merchant's offers
        original_amount: Bill amount; defaults to the offer's listed price
        payment_method: How the student paid the final amount
        scanned_by: Staff account that confirmed the scan

    Raises:
        OfferNotFoundError: If the offer does not belong to the merchant
        StudentNotFoundError: If the BB-ID is unknown
        RedemptionNotAllowedError: If eligibility fails
    """
    try:
        offer = (
            Offer.objects
            .select_for_update()
            .select_related('merchant')
            .get(pk=offer_id, merchant=merchant)
        )
    except Offer.DoesNotExist:
        raise OfferNotFoundError("Offer not found for this merchant")

    student = find_student_by_bb_id(student_bb_id)

    eligibility = can_redeem(student=student, offer=offer)
    if not eligibility.allowed:
        raise RedemptionNotAllowedError(eligibility.reason)

    amount = Decimal(original_amount) if original_amount is not None else offer.original_price
    if offer.min_order_value and amount < offer.min_order_value:
        raise RedemptionNotAllowedError(
            f"Minimum order value is {offer.min_order_value}"
        )

    discount, final = compute_discount(
        offer_type=offer.type,
        amount=amount,
        discount_value=offer.discount_value,
        max_discount=offer.max_discount,
    )

    txn = Transaction.objects.create(
        student=student,
        merchant=merchant,
        offer=offer,
        student_bb_id=student.bb_id,
        student_name=student.full_name,
        merchant_bbm_id=merchant.bbm_id or '',
        merchant_name=merchant.business_name,
        offer_title=offer.title,
        original_amount=amount,
        discount_amount=discount,
        final_amount=final,
        payment_method=payment_method,
        scanned_by=scanned_by,
    )

    Offer.objects.filter(pk=offer.pk).update(total_redemptions=F('total_redemptions') + 1)
    Student.objects.filter(pk=student.pk).update(
        total_redemptions=F('total_redemptions') + 1,
        total_savings=F('total_savings') + discount,
    )

    logger.info(
        "Transaction %s: %s redeemed '%s' at %s (saved %s)",
        txn.pk, student.bb_id, offer.title, merchant.bbm_id, discount,
    )
    return txn
