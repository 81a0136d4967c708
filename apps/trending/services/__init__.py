"""Services for trending curation and scoring."""

from .exceptions import (
    TrendingServiceError,
    StaleDraftError,
    InvalidCurationError,
)
from .types import CuratedOffer, DraftSession
from .curation import (
    load_current,
    publish,
    publish_draft,
)
from .scores import refresh_trending_scores
from .home import get_home_trending

__all__ = [
    # Exceptions
    'TrendingServiceError',
    'StaleDraftError',
    'InvalidCurationError',
    # Value objects
    'CuratedOffer',
    'DraftSession',
    # Curation
    'load_current',
    'publish',
    'publish_draft',
    # Scoring
    'refresh_trending_scores',
    'get_home_trending',
]
