"""Star ratings students leave after a completed redemption."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count

from apps.onboarding.models import Merchant, Student
from apps.transactions.models import Rating, Transaction, TransactionStatus
from .exceptions import DuplicateRatingError, InvalidRatingError, TransactionNotFoundError

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal('0.1')


@transaction.atomic
def update_merchant_rating(*, merchant_id: UUID) -> Merchant:
    """
    Recompute ``average_rating`` and ``total_ratings`` from the ratings table.

    The merchant row is locked so two ratings landing together cannot
    overwrite each other's totals.
    """
    merchant = Merchant.objects.select_for_update().get(id=merchant_id)

    aggregates = merchant.ratings.aggregate(avg=Avg('stars'), count=Count('id'))
    average = Decimal(str(aggregates['avg'] or 0))

    merchant.average_rating = average.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    merchant.total_ratings = aggregates['count']
    merchant.save(update_fields=['average_rating', 'total_ratings', 'updated_at'])
    return merchant


@transaction.atomic
def submit_rating(*, student: Student, transaction_id: UUID, stars: int, review_text: str = '') -> Rating:
    """
    Rate the merchant of one of the student's completed transactions.

    Raises:
        InvalidRatingError: If stars is not between 1 and 5
        TransactionNotFoundError: If the transaction is not the student's,
            was not completed or its merchant is gone
        DuplicateRatingError: If the transaction was already rated
    """
    if not (1 <= stars <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5 stars")

    try:
        txn = (
            Transaction.objects
            .select_for_update()
            .get(id=transaction_id, student=student, status=TransactionStatus.COMPLETED)
        )
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")

    if txn.merchant_id is None:
        raise TransactionNotFoundError("The merchant for this transaction no longer exists")

    if Rating.objects.filter(transaction=txn).exists():
        raise DuplicateRatingError("You have already rated this transaction")

    try:
        with transaction.atomic():
            rating = Rating.objects.create(
                transaction=txn,
                student=student,
                merchant_id=txn.merchant_id,
                stars=stars,
                review_text=(review_text or '').strip(),
            )
    except IntegrityError:
        raise DuplicateRatingError("You have already rated this transaction")

    merchant = update_merchant_rating(merchant_id=txn.merchant_id)
    logger.info(
        "Student %s rated %s %s stars (now %s over %s)",
        student.bb_id, merchant.business_name, stars, merchant.average_rating, merchant.total_ratings,
    )
    return rating


def list_merchant_ratings(*, merchant_id: UUID, limit: int = 20):
    """Newest ratings for a merchant."""
    return (
        Rating.objects
        .filter(merchant_id=merchant_id)
        .select_related('student')
        .order_by('-created_at')[:limit]
    )
