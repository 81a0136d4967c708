"""Admin live feed and aggregate funnel stats. Always computed fresh."""

from django.conf import settings
from django.db.models import Count, Q

from apps.tracking.models import FUNNEL_ORDER, RedemptionRecord, RedemptionStatus
from .types import FunnelStats


def _reached(stage):
    return Q(status__in=FUNNEL_ORDER[FUNNEL_ORDER.index(stage):])


def conversion_rate(redeemed: int, revealed: int) -> float:
    if revealed == 0:
        return 0
    return round(redeemed / revealed * 100, 1)


def get_stats() -> FunnelStats:
    totals = RedemptionRecord.objects.aggregate(
        total=Count('id'),
        copied=Count('id', filter=_reached(RedemptionStatus.COPIED)),
        clicked=Count('id', filter=_reached(RedemptionStatus.CLICKED)),
        redeemed=Count('id', filter=_reached(RedemptionStatus.REDEEMED)),
    )

    by_status = {choice: 0 for choice in RedemptionStatus.values}
    for row in RedemptionRecord.objects.values('status').annotate(count=Count('id')):
        by_status[row['status']] = row['count']

    # Every record starts revealed.
    revealed = totals['total']

    return FunnelStats(
        total=totals['total'],
        revealed=revealed,
        copied=totals['copied'],
        clicked=totals['clicked'],
        redeemed=totals['redeemed'],
        by_status=by_status,
        conversion_rate=conversion_rate(totals['redeemed'], revealed),
    )


def list_recent(*, status=None, offer_id=None, brand_id=None, limit=None):
    """Newest reveals first, optionally filtered. ``limit`` is clamped."""
    if limit is None:
        limit = settings.TRACKING_FEED_DEFAULT_LIMIT
    limit = max(1, min(int(limit), settings.TRACKING_FEED_MAX_LIMIT))

    queryset = RedemptionRecord.objects.select_related('offer', 'brand', 'student')
    if status:
        queryset = queryset.filter(status=status)
    if offer_id:
        queryset = queryset.filter(offer_id=offer_id)
    if brand_id:
        queryset = queryset.filter(brand_id=brand_id)

    return list(queryset.order_by('-revealed_at')[:limit])
