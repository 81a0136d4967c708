from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class OfferType(models.TextChoices):
    PERCENTAGE = 'percentage', 'Percentage'
    FLAT = 'flat', 'Flat'
    BOGO = 'bogo', 'Buy 1 Get 1'
    FREEBIE = 'freebie', 'Freebie'
    CUSTOM = 'custom', 'Custom'


class OfferStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    PAUSED = 'paused', 'Paused'
    EXPIRED = 'expired', 'Expired'


class LocationScope(models.TextChoices):
    PAN_INDIA = 'PAN_INDIA', 'Pan India'
    STATE = 'STATE', 'Selected states'
    CITY = 'CITY', 'Selected cities'


class Offer(models.Model):
    """In-store discount redeemed by showing the student pass at a merchant."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    merchant = models.ForeignKey(
        'onboarding.Merchant',
        on_delete=models.CASCADE,
        related_name='offers'
    )

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=20, choices=OfferType.choices)

    # Pricing
    original_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    discount_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    discount_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    final_price = models.DecimalField(max_digits=10, decimal_places=2)
    max_discount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    min_order_value = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    free_item_name = models.CharField(max_length=200, blank=True)
    terms = models.JSONField(default=list, blank=True)

    # Limits and validity
    max_uses_per_student = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text='Leave empty for unlimited uses.'
    )
    valid_from = models.DateTimeField(default=timezone.now)
    valid_until = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=OfferStatus.choices,
        default=OfferStatus.ACTIVE,
        db_index=True,
    )
    total_redemptions = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'offers'
        indexes = [
            models.Index(fields=['merchant', 'status'], name='offers_merchan_2c41d8_idx'),
            models.Index(fields=['status', 'created_at'], name='offers_status_8f1e07_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} @ {self.merchant.business_name}"

    def is_within_validity(self, at=None):
        at = at or timezone.now()
        if self.valid_from and at < self.valid_from:
            return False
        if self.valid_until and at > self.valid_until:
            return False
        return True


class OnlineOffer(models.Model):
    """Coupon code and link published for an online brand."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey(
        'onboarding.OnlineBrand',
        on_delete=models.CASCADE,
        related_name='offers'
    )

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    code = models.CharField(max_length=100, blank=True)
    link = models.URLField(max_length=500, blank=True)
    valid_until = models.DateTimeField(null=True, blank=True)

    # Where the offer is shown
    location_scope = models.CharField(
        max_length=20,
        choices=LocationScope.choices,
        default=LocationScope.PAN_INDIA,
    )
    location_values = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'online_offers'
        indexes = [
            models.Index(fields=['brand', 'is_active'], name='online_offe_brand_i_7b3a52_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.brand.name})"


class Favorite(models.Model):
    """In-store offer a student saved for later."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey(
        'onboarding.Student',
        on_delete=models.CASCADE,
        related_name='favorites'
    )
    offer = models.ForeignKey(
        Offer,
        on_delete=models.CASCADE,
        related_name='favorited_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'favorites'
        unique_together = [['student', 'offer']]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.student} ♥ {self.offer.title}"
