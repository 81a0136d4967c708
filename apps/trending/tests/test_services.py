import uuid
import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone

from apps.offers.models import OfferStatus
from apps.onboarding.models import ApprovalStatus
from apps.transactions.models import Transaction, TransactionStatus
from apps.trending.models import CurationState, TrendingEntry, TrendingSection
from apps.trending.services import (
    CuratedOffer,
    DraftSession,
    get_home_trending,
    load_current,
    publish,
    publish_draft,
    refresh_trending_scores,
    InvalidCurationError,
    StaleDraftError,
)

ONLINE = TrendingSection.ONLINE
OFFLINE = TrendingSection.OFFLINE


def _ids(items):
    return [item.offer_id for item in items]


@pytest.mark.django_db
class TestDraftSession:

    def test_add_appends(self, offline_offers):
        draft = DraftSession()
        for offer in offline_offers:
            draft = draft.add(OFFLINE, CuratedOffer.from_offer(offer))

        assert _ids(draft.offline) == [o.pk for o in offline_offers]
        assert draft.online == ()

    def test_duplicate_add_is_noop(self, offline_offers):
        item = CuratedOffer.from_offer(offline_offers[0])
        draft = DraftSession().add(OFFLINE, item)

        again = draft.add(OFFLINE, item)

        assert again == draft
        assert len(again.offline) == 1

    def test_add_wrong_kind_rejected(self, online_offers):
        with pytest.raises(InvalidCurationError):
            DraftSession().add(OFFLINE, CuratedOffer.from_online_offer(online_offers[0]))

    def test_reorder_moves_item(self, offline_offers):
        draft = DraftSession(offline=tuple(CuratedOffer.from_offer(o) for o in offline_offers))

        moved = draft.reorder(OFFLINE, 2, 0)

        assert _ids(moved.offline) == [offline_offers[2].pk, offline_offers[0].pk, offline_offers[1].pk]
        # The original draft is unchanged.
        assert _ids(draft.offline) == [o.pk for o in offline_offers]

    def test_reorder_out_of_range(self, offline_offers):
        draft = DraftSession(offline=(CuratedOffer.from_offer(offline_offers[0]),))

        with pytest.raises(InvalidCurationError):
            draft.reorder(OFFLINE, 0, 3)

    def test_remove(self, offline_offers):
        draft = DraftSession(offline=tuple(CuratedOffer.from_offer(o) for o in offline_offers))

        draft = draft.remove(OFFLINE, str(offline_offers[1].pk))

        assert _ids(draft.offline) == [offline_offers[0].pk, offline_offers[2].pk]

    def test_remove_malformed_id(self, offline_offers):
        draft = DraftSession(offline=(CuratedOffer.from_offer(offline_offers[0]),))

        with pytest.raises(InvalidCurationError):
            draft.remove(OFFLINE, 'not-a-uuid')


@pytest.mark.django_db
class TestPublish:

    def test_round_trip_with_contiguous_positions(self, offline_offers, online_offers, admin_user):
        offline_ids = [offline_offers[2].pk, offline_offers[0].pk]
        online_ids = [online_offers[1].pk]

        result = publish(online=online_ids, offline=offline_ids, base_version=0, published_by=admin_user)

        assert _ids(result.offline) == offline_ids
        assert _ids(result.online) == online_ids
        assert result.base_version == 1
        positions = list(
            TrendingEntry.objects.filter(section=OFFLINE).order_by('position').values_list('position', flat=True)
        )
        assert positions == [0, 1]
        assert _ids(load_current().offline) == offline_ids
        assert CurationState.load().published_by == admin_user

    def test_stale_version_rejected(self, offline_offers):
        publish(offline=[offline_offers[0].pk], base_version=0)

        with pytest.raises(StaleDraftError):
            publish(offline=[offline_offers[1].pk], base_version=0)

        assert _ids(load_current().offline) == [offline_offers[0].pk]

    def test_none_section_left_untouched(self, offline_offers, online_offers):
        publish(online=[online_offers[0].pk], offline=[o.pk for o in offline_offers], base_version=0)

        draft = load_current().reorder(OFFLINE, 0, 2)
        publish(offline=draft.ids(OFFLINE), base_version=draft.base_version)

        current = load_current()
        assert _ids(current.offline) == [offline_offers[1].pk, offline_offers[2].pk, offline_offers[0].pk]
        assert _ids(current.online) == [online_offers[0].pk]

    def test_reorder_online_keeps_offline_rows(self, offline_offers, online_offers):
        a, b = online_offers[0], online_offers[1]
        c = offline_offers[0]
        publish(online=[a.pk, b.pk], offline=[c.pk], base_version=0)
        offline_row = TrendingEntry.objects.get(section=OFFLINE)

        publish(online=[b.pk, a.pk], base_version=1)

        rows = list(TrendingEntry.objects.order_by('section', 'position').values_list(
            'section', 'position', 'offer_id', 'online_offer_id'
        ))
        assert rows == [
            (OFFLINE, 0, c.pk, None),
            (ONLINE, 0, None, b.pk),
            (ONLINE, 1, None, a.pk),
        ]
        assert TrendingEntry.objects.get(section=OFFLINE).pk == offline_row.pk

    def test_paused_pick_dropped_from_loaded_draft(self, offline_offers, online_offers):
        a, b, c = offline_offers
        publish(online=[online_offers[0].pk], offline=[a.pk, b.pk, c.pk], base_version=0)
        b.status = OfferStatus.PAUSED
        b.save()

        draft = load_current()
        result = publish_draft(draft.reorder(ONLINE, 0, 0))

        assert _ids(draft.offline) == [a.pk, c.pk]
        assert _ids(result.offline) == [a.pk, c.pk]
        assert _ids(result.online) == [online_offers[0].pk]
        assert not TrendingEntry.objects.filter(offer=b).exists()

    def test_empty_list_clears_section(self, offline_offers):
        publish(offline=[offline_offers[0].pk], base_version=0)

        publish(offline=[], base_version=1)

        assert load_current().offline == ()

    def test_duplicates_rejected(self, offline_offers):
        with pytest.raises(InvalidCurationError):
            publish(offline=[offline_offers[0].pk, offline_offers[0].pk], base_version=0)

    def test_inactive_offer_rejected(self, offline_offers):
        offline_offers[0].status = OfferStatus.PAUSED
        offline_offers[0].save()

        with pytest.raises(InvalidCurationError):
            publish(offline=[offline_offers[0].pk], base_version=0)

    def test_wrong_kind_rejected(self, online_offers):
        with pytest.raises(InvalidCurationError):
            publish(offline=[online_offers[0].pk], base_version=0)

    def test_unknown_id_rolls_back_other_section(self, offline_offers, online_offers):
        with pytest.raises(InvalidCurationError):
            publish(online=[online_offers[0].pk], offline=[uuid.uuid4()], base_version=0)

        assert TrendingEntry.objects.count() == 0
        assert CurationState.load().version == 0

    def test_publish_draft(self, offline_offers, online_offers):
        draft = (
            load_current()
            .add(OFFLINE, CuratedOffer.from_offer(offline_offers[1]))
            .add(ONLINE, CuratedOffer.from_online_offer(online_offers[2]))
        )

        result = publish_draft(draft)

        assert _ids(result.offline) == [offline_offers[1].pk]
        assert _ids(result.online) == [online_offers[2].pk]


@pytest.mark.django_db
class TestRefreshTrendingScores:

    def _transaction(self, merchant, *, hours_ago=1, status=TransactionStatus.COMPLETED):
        return Transaction.objects.create(
            merchant=merchant,
            student_bb_id='BB-000001',
            student_name='Asha',
            merchant_bbm_id='',
            merchant_name=merchant.business_name,
            offer_title='Offer',
            original_amount=Decimal('100.00'),
            discount_amount=Decimal('10.00'),
            final_amount=Decimal('90.00'),
            status=status,
            scanned_at=timezone.now() - timedelta(hours=hours_ago),
        )

    def test_counts_recent_completed_only(self, make_merchant):
        busy = make_merchant('Busy Cafe')
        quiet = make_merchant('Quiet Cafe', trending_score=7)
        self._transaction(busy)
        self._transaction(busy, hours_ago=5)
        self._transaction(busy, hours_ago=30)
        self._transaction(busy, status=TransactionStatus.CANCELLED)

        updated = refresh_trending_scores(window_hours=24)

        busy.refresh_from_db()
        quiet.refresh_from_db()
        assert updated == 2
        assert busy.trending_score == 2
        assert quiet.trending_score == 0


@pytest.mark.django_db
class TestHomeTrending:

    def test_curated_first_then_fill(self, offline_offers):
        publish(offline=[offline_offers[1].pk], base_version=0)

        results = get_home_trending(section=OFFLINE, limit=3)

        assert results[0].offer_id == offline_offers[1].pk
        assert results[0].is_admin_pick is True
        assert all(not item.is_admin_pick for item in results[1:])
        assert len({item.offer_id for item in results}) == len(results) == 3

    def test_fill_ordered_by_override_and_score(self, offline_offers):
        first, second, _ = (o.merchant for o in offline_offers)
        first.is_trending_override = True
        first.save()
        second.trending_score = 5
        second.save()

        results = get_home_trending(section=OFFLINE, limit=3)

        assert _ids(results) == [offline_offers[0].pk, offline_offers[1].pk, offline_offers[2].pk]

    def test_offline_filtered_by_city(self, offline_offers):
        results = get_home_trending(section=OFFLINE, city='pune')

        assert _ids(results) == [offline_offers[2].pk]

    def test_online_respects_location(self, online_offers):
        publish(online=[online_offers[2].pk], base_version=0)

        in_mumbai = get_home_trending(section=ONLINE, city='Mumbai', state='Maharashtra')
        in_pune = get_home_trending(section=ONLINE, city='Pune')

        assert online_offers[2].pk not in _ids(in_mumbai)
        assert _ids(in_pune)[0] == online_offers[2].pk

    def test_suspended_merchant_dropped(self, offline_offers):
        publish(offline=[offline_offers[0].pk], base_version=0)
        merchant = offline_offers[0].merchant
        merchant.status = ApprovalStatus.SUSPENDED
        merchant.save()

        results = get_home_trending(section=OFFLINE)

        assert offline_offers[0].pk not in _ids(results)

    def test_limit(self, offline_offers):
        assert len(get_home_trending(section=OFFLINE, limit=1)) == 1

    def test_unknown_section(self, db):
        with pytest.raises(InvalidCurationError):
            get_home_trending(section='everywhere')
