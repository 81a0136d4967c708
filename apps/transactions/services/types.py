from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class RedemptionEligibility:
    allowed: bool
    reason: str = ''
    remaining_uses: int | None = None


@dataclass(slots=True, frozen=True)
class MerchantSummary:
    total_transactions: int
    unique_students: int
    total_discount_given: Decimal
    total_revenue: Decimal
    today_transactions: int
