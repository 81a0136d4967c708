"""Trending-by-volume: score merchants on recent confirmed redemptions."""

import logging
from datetime import timedelta

from django.conf import settings
from django.db.models import Count, IntegerField, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.onboarding.models import Merchant
from apps.transactions.models import Transaction, TransactionStatus

logger = logging.getLogger(__name__)


def refresh_trending_scores(*, window_hours: int = None) -> int:
    """
    Set each merchant's ``trending_score`` to its completed transactions in
    the last ``window_hours``. Returns the number of merchants updated.
    """
    if window_hours is None:
        window_hours = settings.TRENDING_WINDOW_HOURS
    cutoff = timezone.now() - timedelta(hours=window_hours)

    recent = (
        Transaction.objects
        .filter(merchant=OuterRef('pk'), status=TransactionStatus.COMPLETED, scanned_at__gte=cutoff)
        .order_by()
        .values('merchant')
        .annotate(count=Count('id'))
        .values('count')
    )

    updated = Merchant.objects.update(
        trending_score=Coalesce(Subquery(recent, output_field=IntegerField()), Value(0))
    )

    logger.info("Trending scores refreshed for %s merchants (window %sh)", updated, window_hours)
    return updated
