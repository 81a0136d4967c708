"""
Loading and publishing the curated trending lists.

Publishing is optimistic: the draft remembers the version it was loaded at
and the publish fails if another admin published in between.
"""

import logging
import uuid

from django.db import transaction
from django.utils import timezone

from apps.offers.services import list_active_offers, list_active_online_offers
from apps.trending.models import CurationState, TrendingEntry, TrendingSection
from .exceptions import InvalidCurationError, StaleDraftError
from .types import CuratedOffer, DraftSession

logger = logging.getLogger(__name__)


def load_current() -> DraftSession:
    """
    Return the published lists as a fresh draft.

    Picks whose offer is no longer active are left out, so the draft can
    always be published back as loaded.
    """
    state = CurationState.load()
    entries = (
        TrendingEntry.objects
        .select_related('offer__merchant', 'online_offer__brand')
        .order_by('position')
    )
    active_offline = set(list_active_offers().values_list('pk', flat=True))
    active_online = set(list_active_online_offers().values_list('pk', flat=True))

    online, offline = [], []
    for entry in entries:
        if entry.section == TrendingSection.OFFLINE:
            if entry.offer_id in active_offline:
                offline.append(CuratedOffer.from_offer(entry.offer))
        elif entry.online_offer_id in active_online:
            online.append(CuratedOffer.from_online_offer(entry.online_offer))

    return DraftSession(online=tuple(online), offline=tuple(offline), base_version=state.version)


def _normalize_ids(ids, section) -> list:
    try:
        normalized = [uuid.UUID(str(value)) for value in ids]
    except ValueError:
        raise InvalidCurationError(f"Invalid offer id in {section} list")

    if len(set(normalized)) != len(normalized):
        raise InvalidCurationError(f"Duplicate offers in {section} list")
    return normalized


def _publishable(section, ids):
    if section == TrendingSection.OFFLINE:
        queryset = list_active_offers()
    else:
        queryset = list_active_online_offers()

    found = set(queryset.filter(pk__in=ids).values_list('pk', flat=True))
    missing = [str(pk) for pk in ids if pk not in found]
    if missing:
        raise InvalidCurationError(
            f"Not active {section} offers: {', '.join(missing)}"
        )


def _replace_section(section, ids):
    TrendingEntry.objects.filter(section=section).delete()

    field = 'offer_id' if section == TrendingSection.OFFLINE else 'online_offer_id'
    TrendingEntry.objects.bulk_create([
        TrendingEntry(section=section, position=index, **{field: pk})
        for index, pk in enumerate(ids)
    ])


@transaction.atomic
def publish(*, online=None, offline=None, base_version: int, published_by=None) -> DraftSession:
    """
    Replace the stored lists in one transaction.

    A section passed as ``None`` keeps its current entries.

    Raises:
        StaleDraftError: If ``base_version`` is not the current version
        InvalidCurationError: If a list has duplicates or inactive offers
    """
    state, _ = CurationState.objects.select_for_update().get_or_create(pk=CurationState.SINGLETON_ID)
    if state.version != base_version:
        raise StaleDraftError(
            f"Trending lists changed since this draft was loaded "
            f"(draft v{base_version}, current v{state.version})"
        )

    sections = {}
    for section, ids in ((TrendingSection.ONLINE, online), (TrendingSection.OFFLINE, offline)):
        if ids is None:
            continue
        ids = _normalize_ids(ids, section)
        _publishable(section, ids)
        sections[section] = ids

    for section, ids in sections.items():
        _replace_section(section, ids)

    state.version += 1
    state.published_at = timezone.now()
    state.published_by = published_by
    state.save()

    logger.info(
        "Trending v%s published by %s (%s)",
        state.version,
        getattr(published_by, 'email', None),
        ', '.join(f"{section}: {len(ids)}" for section, ids in sections.items()) or 'no sections',
    )
    return load_current()


def publish_draft(draft: DraftSession, *, published_by=None) -> DraftSession:
    return publish(
        online=draft.ids(TrendingSection.ONLINE),
        offline=draft.ids(TrendingSection.OFFLINE),
        base_version=draft.base_version,
        published_by=published_by,
    )
