"""
Value objects for trending curation.

A ``DraftSession`` is the admin's working copy of both sections. It is never
stored; every edit returns a new draft and only ``publish`` touches the
database.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from dataclasses import dataclass, replace

from apps.offers.models import Offer, OnlineOffer
from apps.trending.models import TrendingSection
from .exceptions import InvalidCurationError


@dataclass(slots=True, frozen=True)
class CuratedOffer:
    offer_id: uuid.UUID
    section: str
    title: str
    partner_name: str
    logo_url: str = ''
    city: str = ''
    code: str = ''
    link: str = ''
    is_admin_pick: bool = True
    average_rating: Decimal | None = None
    total_ratings: int = 0

    @classmethod
    def from_offer(cls, offer: Offer, *, is_admin_pick: bool = True) -> CuratedOffer:
        merchant = offer.merchant
        return cls(
            offer_id=offer.pk,
            section=TrendingSection.OFFLINE,
            title=offer.title,
            partner_name=merchant.business_name,
            logo_url=merchant.logo_url,
            city=merchant.city,
            average_rating=merchant.average_rating,
            total_ratings=merchant.total_ratings,
            is_admin_pick=is_admin_pick,
        )

    @classmethod
    def from_online_offer(cls, online_offer: OnlineOffer, *, is_admin_pick: bool = True) -> CuratedOffer:
        brand = online_offer.brand
        return cls(
            offer_id=online_offer.pk,
            section=TrendingSection.ONLINE,
            title=online_offer.title,
            partner_name=brand.name,
            logo_url=brand.logo_url,
            code=online_offer.code,
            link=online_offer.link,
            is_admin_pick=is_admin_pick,
        )


def _check_section(section: str):
    if section not in TrendingSection.values:
        raise InvalidCurationError(f"Unknown section '{section}'")


@dataclass(slots=True, frozen=True)
class DraftSession:
    online: tuple = ()
    offline: tuple = ()
    base_version: int = 0

    def items(self, section: str) -> tuple:
        _check_section(section)
        return self.online if section == TrendingSection.ONLINE else self.offline

    def _with(self, section: str, items) -> DraftSession:
        return replace(self, **{str(section): tuple(items)})

    def ids(self, section: str) -> list:
        return [item.offer_id for item in self.items(section)]

    def reorder(self, section: str, from_index: int, to_index: int) -> DraftSession:
        items = list(self.items(section))
        if not (0 <= from_index < len(items) and 0 <= to_index < len(items)):
            raise InvalidCurationError("Position out of range")

        item = items.pop(from_index)
        items.insert(to_index, item)
        return self._with(section, items)

    def add(self, section: str, offer: CuratedOffer) -> DraftSession:
        """Append ``offer`` unless it is already in the section."""
        items = self.items(section)
        if offer.section != section:
            raise InvalidCurationError(f"A {offer.section} offer cannot go in the {section} section")
        if any(item.offer_id == offer.offer_id for item in items):
            return self
        return self._with(section, items + (offer,))

    def remove(self, section: str, offer_id) -> DraftSession:
        try:
            offer_id = uuid.UUID(str(offer_id))
        except ValueError:
            raise InvalidCurationError(f"Invalid offer id '{offer_id}'")
        return self._with(section, [item for item in self.items(section) if item.offer_id != offer_id])
