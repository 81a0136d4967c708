"""Services for redemption funnel tracking."""

from .exceptions import (
    TrackingServiceError,
    RecordNotFoundError,
    InvalidRevealError,
)
from .types import FunnelStats
from .funnel import (
    record_reveal,
    record_copy,
    record_click,
    record_self_reported_redemption,
)
from .feed import (
    conversion_rate,
    get_stats,
    list_recent,
)

__all__ = [
    # Exceptions
    'TrackingServiceError',
    'RecordNotFoundError',
    'InvalidRevealError',
    # Value objects
    'FunnelStats',
    # Funnel events
    'record_reveal',
    'record_copy',
    'record_click',
    'record_self_reported_redemption',
    # Feed
    'conversion_rate',
    'get_stats',
    'list_recent',
]
