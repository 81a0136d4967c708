import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone

from apps.offers.models import OfferStatus
from apps.onboarding.models import ApprovalStatus
from apps.transactions.models import Transaction, TransactionStatus
from apps.transactions.services import (
    can_redeem,
    find_student_by_bb_id,
    merchant_summary,
    record_transaction,
    OfferNotFoundError,
    RedemptionNotAllowedError,
    StudentNotFoundError,
)


@pytest.mark.django_db
class TestFindStudent:

    def test_lookup_ignores_case_and_spaces(self, student):
        assert find_student_by_bb_id('  bb-000042 ') == student

    def test_unknown_id(self, student):
        with pytest.raises(StudentNotFoundError):
            find_student_by_bb_id('BB-999999')

    def test_blank_id(self, db):
        with pytest.raises(StudentNotFoundError):
            find_student_by_bb_id('   ')


@pytest.mark.django_db
class TestCanRedeem:

    def test_allowed_with_remaining_uses(self, student, offer):
        result = can_redeem(student=student, offer=offer)

        assert result.allowed is True
        assert result.remaining_uses == 2

    def test_unlimited_offer(self, student, flat_offer):
        result = can_redeem(student=student, offer=flat_offer)

        assert result.allowed is True
        assert result.remaining_uses is None

    def test_unverified_student(self, pending_student, offer):
        result = can_redeem(student=pending_student, offer=offer)

        assert result.allowed is False
        assert 'not verified' in result.reason

    def test_paused_offer(self, student, offer):
        offer.status = OfferStatus.PAUSED
        offer.save()

        assert can_redeem(student=student, offer=offer).allowed is False

    def test_expired_offer(self, student, offer):
        offer.valid_until = timezone.now() - timedelta(days=1)
        offer.save()

        result = can_redeem(student=student, offer=offer)

        assert result.allowed is False
        assert 'validity' in result.reason

    def test_suspended_merchant(self, student, offer, merchant):
        merchant.status = ApprovalStatus.SUSPENDED
        merchant.save()

        assert can_redeem(student=student, offer=offer).allowed is False

    def test_limit_reached(self, student, offer, merchant):
        for _ in range(2):
            record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        result = can_redeem(student=student, offer=offer)

        assert result.allowed is False
        assert result.remaining_uses == 0


@pytest.mark.django_db
class TestRecordTransaction:

    def test_snapshot_and_amounts(self, student, offer, merchant, merchant_user):
        txn = record_transaction(
            merchant=merchant,
            student_bb_id='bb-000042',
            offer_id=offer.id,
            scanned_by=merchant_user,
        )

        assert txn.student_bb_id == 'BB-000042'
        assert txn.student_name == 'Asha Rao'
        assert txn.merchant_bbm_id == 'BBM-000007'
        assert txn.merchant_name == 'Chai Point'
        assert txn.offer_title == '20% off on all drinks'
        assert txn.original_amount == Decimal('200.00')
        assert txn.discount_amount == Decimal('40.00')
        assert txn.final_amount == Decimal('160.00')
        assert txn.status == TransactionStatus.COMPLETED
        assert txn.scanned_by == merchant_user

    def test_discount_capped_on_large_bill(self, student, offer, merchant):
        txn = record_transaction(
            merchant=merchant,
            student_bb_id=student.bb_id,
            offer_id=offer.id,
            original_amount=Decimal('1000.00'),
        )

        assert txn.discount_amount == Decimal('50.00')
        assert txn.final_amount == Decimal('950.00')

    def test_counters_incremented(self, student, offer, merchant):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        student.refresh_from_db()
        offer.refresh_from_db()
        assert student.total_redemptions == 1
        assert student.total_savings == Decimal('40.00')
        assert offer.total_redemptions == 1

    def test_usage_limit_enforced(self, student, offer, merchant):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        with pytest.raises(RedemptionNotAllowedError):
            record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        assert Transaction.objects.count() == 2

    def test_cancelled_transactions_do_not_count(self, student, offer, merchant):
        first = record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        first.status = TransactionStatus.CANCELLED
        first.save()

        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        assert Transaction.objects.filter(status=TransactionStatus.COMPLETED).count() == 2

    def test_min_order_value(self, student, flat_offer, merchant):
        with pytest.raises(RedemptionNotAllowedError):
            record_transaction(
                merchant=merchant,
                student_bb_id=student.bb_id,
                offer_id=flat_offer.id,
                original_amount=Decimal('300.00'),
            )

        student.refresh_from_db()
        assert student.total_redemptions == 0

    def test_offer_of_another_merchant(self, student, offer, db):
        from apps.accounts.models import User
        from apps.onboarding.models import Merchant

        other = Merchant.objects.create(
            user=User.objects.create_user(email='other@example.com', password='x'),
            business_name='Other',
            owner_name='O',
            email='other@example.com',
            phone='1',
            category='food',
            address='a',
            city='Pune',
            state='Maharashtra',
            status=ApprovalStatus.APPROVED,
        )

        with pytest.raises(OfferNotFoundError):
            record_transaction(merchant=other, student_bb_id=student.bb_id, offer_id=offer.id)

    def test_unverified_student_rejected(self, pending_student, offer, merchant):
        with pytest.raises(RedemptionNotAllowedError):
            record_transaction(merchant=merchant, student_bb_id=pending_student.bb_id, offer_id=offer.id)


@pytest.mark.django_db
class TestMerchantSummary:

    def test_empty(self, merchant):
        summary = merchant_summary(merchant)

        assert summary.total_transactions == 0
        assert summary.total_revenue == Decimal('0.00')

    def test_totals(self, student, offer, flat_offer, merchant):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        record_transaction(
            merchant=merchant,
            student_bb_id=student.bb_id,
            offer_id=flat_offer.id,
            original_amount=Decimal('600.00'),
        )

        summary = merchant_summary(merchant)

        assert summary.total_transactions == 2
        assert summary.unique_students == 1
        assert summary.total_discount_given == Decimal('140.00')
        assert summary.total_revenue == Decimal('660.00')
        assert summary.today_transactions == 2
