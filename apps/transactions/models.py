from django.db import models
from django.core.validators import MaxValueValidator, MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class PaymentMethod(models.TextChoices):
    CASH = 'cash', 'Cash'
    ONLINE = 'online', 'Online'


class TransactionStatus(models.TextChoices):
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'
    FAILED = 'failed', 'Failed'


class Transaction(models.Model):
    """
    Merchant-confirmed in-store redemption.

    Names and identifiers are copied at scan time so the history stays
    readable after a student, merchant or offer is deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    student = models.ForeignKey(
        'onboarding.Student',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )
    merchant = models.ForeignKey(
        'onboarding.Merchant',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )
    offer = models.ForeignKey(
        'offers.Offer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )

    # Snapshot at scan time
    student_bb_id = models.CharField(max_length=20)
    student_name = models.CharField(max_length=150)
    merchant_bbm_id = models.CharField(max_length=20)
    merchant_name = models.CharField(max_length=200)
    offer_title = models.CharField(max_length=200)

    # Amounts
    original_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    discount_amount = models.DecimalField(max_digits=10, decimal_places=2)
    final_amount = models.DecimalField(max_digits=10, decimal_places=2)

    payment_method = models.CharField(
        max_length=10,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH,
    )
    status = models.CharField(
        max_length=20,
        choices=TransactionStatus.choices,
        default=TransactionStatus.COMPLETED,
    )

    scanned_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='scanned_transactions'
    )
    scanned_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['merchant', 'scanned_at'], name='transaction_merchan_51a0c2_idx'),
            models.Index(fields=['student', 'scanned_at'], name='transaction_student_0e7b94_idx'),
            models.Index(fields=['student', 'offer', 'status'], name='transaction_student_c3d815_idx'),
        ]
        ordering = ['-scanned_at']

    def __str__(self):
        return f"{self.student_bb_id} @ {self.merchant_name}: {self.offer_title}"


class Rating(models.Model):
    """A student's star rating of the merchant behind one transaction."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    transaction = models.OneToOneField(
        Transaction,
        on_delete=models.CASCADE,
        related_name='rating'
    )
    student = models.ForeignKey(
        'onboarding.Student',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ratings'
    )
    merchant = models.ForeignKey(
        'onboarding.Merchant',
        on_delete=models.CASCADE,
        related_name='ratings'
    )
    stars = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review_text = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ratings'
        indexes = [
            models.Index(fields=['merchant', 'created_at'], name='ratings_merchan_4d7e21_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.merchant.business_name}: {self.stars}★"
