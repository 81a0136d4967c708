import uuid
import pytest
from datetime import timedelta
from django.utils import timezone

from apps.tracking.models import RedemptionRecord, RedemptionStatus
from apps.tracking.services import (
    conversion_rate,
    get_stats,
    list_recent,
    record_click,
    record_copy,
    record_reveal,
    record_self_reported_redemption,
    InvalidRevealError,
    RecordNotFoundError,
)


@pytest.mark.django_db
class TestRecordReveal:

    def test_reveal_defaults(self, student, online_offer, brand):
        record = record_reveal(student_id=student.id, offer_id=online_offer.id)

        assert record.status == RedemptionStatus.REVEALED
        assert record.revealed_at is not None
        assert record.brand == brand
        assert record.code == 'STUDENT100'
        assert record.device_type == 'MOBILE'
        assert record.source == 'APP'
        assert record.verified is False

    def test_repeat_reveals_create_new_records(self, student, online_offer):
        first = record_reveal(student_id=student.id, offer_id=online_offer.id)
        second = record_reveal(student_id=student.id, offer_id=online_offer.id)

        assert first.pk != second.pk
        assert RedemptionRecord.objects.count() == 2

    def test_anonymous_reveal(self, online_offer):
        record = record_reveal(offer_id=online_offer.id)

        assert record.student is None

    def test_unknown_offer(self, db):
        with pytest.raises(InvalidRevealError):
            record_reveal(offer_id=uuid.uuid4())


@pytest.mark.django_db
class TestStageEvents:

    def test_full_funnel(self, record):
        revealed_at = record.revealed_at

        record_copy(record_id=record.id)
        record_click(record_id=record.id)
        record = record_self_reported_redemption(record_id=record.id)

        assert record.status == RedemptionStatus.REDEEMED
        assert record.revealed_at == revealed_at
        assert record.revealed_at <= record.copied_at <= record.clicked_through_at <= record.redeemed_at
        assert record.verified is False

        stats = get_stats()
        assert stats.total == 1
        assert stats.revealed == stats.copied == stats.clicked == stats.redeemed == 1
        assert stats.conversion_rate == 100.0

    def test_status_never_regresses(self, record):
        record_self_reported_redemption(record_id=record.id)
        record = record_copy(record_id=record.id)

        assert record.status == RedemptionStatus.REDEEMED
        # Late copy still fills its own timestamp.
        assert record.copied_at is not None

    def test_timestamp_written_once(self, record):
        first = record_copy(record_id=record.id).copied_at
        second = record_copy(record_id=record.id).copied_at

        assert first == second

    def test_redeem_straight_after_reveal(self, record):
        record = record_self_reported_redemption(record_id=record.id)

        assert record.status == RedemptionStatus.REDEEMED
        assert record.copied_at is None
        assert record.clicked_through_at is None
        assert record.redeemed_at is not None

    def test_unknown_record(self, db):
        with pytest.raises(RecordNotFoundError):
            record_click(record_id=uuid.uuid4())


@pytest.mark.django_db
class TestStats:

    def test_empty(self, db):
        stats = get_stats()

        assert stats.total == 0
        assert stats.conversion_rate == 0
        assert stats.by_status == {'REVEALED': 0, 'COPIED': 0, 'CLICKED': 0, 'REDEEMED': 0}

    def test_counts_reached_at_least(self, student, online_offer):
        records = [record_reveal(student_id=student.id, offer_id=online_offer.id) for _ in range(3)]
        record_copy(record_id=records[0].id)
        record_self_reported_redemption(record_id=records[1].id)

        stats = get_stats()

        assert stats.revealed == 3
        assert stats.copied == 2
        assert stats.clicked == 1
        assert stats.redeemed == 1
        assert stats.redeemed <= stats.revealed
        assert stats.by_status['REVEALED'] == 1
        assert stats.by_status['COPIED'] == 1
        assert stats.by_status['REDEEMED'] == 1
        assert stats.conversion_rate == 33.3

    @pytest.mark.parametrize('redeemed, revealed, expected', [
        (0, 0, 0),
        (1, 3, 33.3),
        (2, 3, 66.7),
        (1, 8, 12.5),
    ])
    def test_conversion_rate_rounding(self, redeemed, revealed, expected):
        assert conversion_rate(redeemed, revealed) == expected


@pytest.mark.django_db
class TestListRecent:

    def test_newest_first_and_filtered(self, student, online_offer):
        older = record_reveal(student_id=student.id, offer_id=online_offer.id)
        RedemptionRecord.objects.filter(pk=older.pk).update(revealed_at=timezone.now() - timedelta(minutes=5))
        older.refresh_from_db()
        newer = record_reveal(student_id=student.id, offer_id=online_offer.id)
        record_copy(record_id=newer.id)

        assert list_recent() == [newer, older]
        assert list_recent(status=RedemptionStatus.COPIED) == [newer]
        assert list_recent(offer_id=online_offer.id, limit=1) == [newer]

    def test_limit_clamped(self, student, online_offer):
        record_reveal(student_id=student.id, offer_id=online_offer.id)

        assert len(list_recent(limit=0)) == 1
        assert len(list_recent(limit=10_000)) == 1
