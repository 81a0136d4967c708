"""
Home-screen trending list.

Curated picks come first in their published order. Remaining slots are
filled algorithmically: in-store offers by override flag and volume score,
online offers newest first. Both respect the student's location.
"""

from django.conf import settings

from apps.offers.services import filter_visible, is_visible_for_location, list_active_offers, list_active_online_offers
from apps.trending.models import TrendingEntry, TrendingSection
from .exceptions import InvalidCurationError
from .types import CuratedOffer


def _curated_offline(city):
    entries = (
        TrendingEntry.objects
        .filter(section=TrendingSection.OFFLINE)
        .select_related('offer__merchant')
        .order_by('position')
    )
    active_ids = set(list_active_offers(city=city).values_list('pk', flat=True))
    return [entry.offer for entry in entries if entry.offer_id in active_ids]


def _curated_online(city, state):
    entries = (
        TrendingEntry.objects
        .filter(section=TrendingSection.ONLINE)
        .select_related('online_offer__brand')
        .order_by('position')
    )
    active_ids = set(list_active_online_offers().values_list('pk', flat=True))
    return [
        entry.online_offer for entry in entries
        if entry.online_offer_id in active_ids
        and is_visible_for_location(entry.online_offer, city=city, state=state)
    ]


def get_home_trending(*, section: str, limit: int = None, city: str = '', state: str = '') -> list:
    if section not in TrendingSection.values:
        raise InvalidCurationError(f"Unknown section '{section}'")
    if limit is None:
        limit = settings.HOME_TRENDING_LIMIT

    if section == TrendingSection.OFFLINE:
        picks = [CuratedOffer.from_offer(offer) for offer in _curated_offline(city)]
        fill_source = (
            list_active_offers(city=city)
            .filter(merchant__is_online_store=False)
            .order_by('-merchant__is_trending_override', '-merchant__trending_score', '-created_at')
        )
        build = CuratedOffer.from_offer
    else:
        picks = [CuratedOffer.from_online_offer(offer) for offer in _curated_online(city, state)]
        fill_source = filter_visible(list_active_online_offers(), city=city, state=state)
        build = CuratedOffer.from_online_offer

    results = picks[:limit]
    seen = {item.offer_id for item in results}

    for offer in fill_source:
        if len(results) >= limit:
            break
        if offer.pk in seen:
            continue
        seen.add(offer.pk)
        results.append(build(offer, is_admin_pick=False))

    return results
