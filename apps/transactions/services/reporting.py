"""Merchant dashboard figures."""

from decimal import Decimal

from django.db.models import Count, Sum
from django.utils import timezone

from apps.onboarding.models import Merchant
from apps.transactions.models import Transaction, TransactionStatus
from .types import MerchantSummary


def merchant_summary(merchant: Merchant) -> MerchantSummary:
    completed = Transaction.objects.filter(merchant=merchant, status=TransactionStatus.COMPLETED)

    totals = completed.aggregate(
        count=Count('id'),
        students=Count('student', distinct=True),
        discount=Sum('discount_amount'),
        revenue=Sum('final_amount'),
    )
    today = timezone.localdate()

    return MerchantSummary(
        total_transactions=totals['count'],
        unique_students=totals['students'],
        total_discount_given=totals['discount'] or Decimal('0.00'),
        total_revenue=totals['revenue'] or Decimal('0.00'),
        today_transactions=completed.filter(scanned_at__date=today).count(),
    )
