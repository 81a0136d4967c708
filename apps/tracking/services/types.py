from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class FunnelStats:
    """
    Funnel counts are "reached at least this stage", so each count is bounded
    by the one before it. ``by_status`` counts current statuses.
    """

    total: int
    revealed: int
    copied: int
    clicked: int
    redeemed: int
    by_status: dict = field(default_factory=dict)
    conversion_rate: float = 0
