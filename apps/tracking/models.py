from django.db import models
from django.utils import timezone
import uuid


class RedemptionStatus(models.TextChoices):
    REVEALED = 'REVEALED', 'Revealed'
    COPIED = 'COPIED', 'Copied'
    CLICKED = 'CLICKED', 'Clicked through'
    REDEEMED = 'REDEEMED', 'Redeemed'


# Funnel order; a record only ever moves forward through it.
FUNNEL_ORDER = [
    RedemptionStatus.REVEALED,
    RedemptionStatus.COPIED,
    RedemptionStatus.CLICKED,
    RedemptionStatus.REDEEMED,
]


class DeviceType(models.TextChoices):
    MOBILE = 'MOBILE', 'Mobile'
    DESKTOP = 'DESKTOP', 'Desktop'
    TABLET = 'TABLET', 'Tablet'


class RedemptionRecord(models.Model):
    """
    One student's journey with one online coupon.

    Each reveal creates a new row; later events only fill in timestamps and
    move ``status`` forward.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    student = models.ForeignKey(
        'onboarding.Student',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='redemption_records'
    )
    offer = models.ForeignKey(
        'offers.OnlineOffer',
        on_delete=models.CASCADE,
        related_name='redemption_records'
    )
    brand = models.ForeignKey(
        'onboarding.OnlineBrand',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='redemption_records'
    )
    code = models.CharField(max_length=100, blank=True)

    revealed_at = models.DateTimeField(default=timezone.now, db_index=True)
    copied_at = models.DateTimeField(null=True, blank=True)
    clicked_through_at = models.DateTimeField(null=True, blank=True)
    redeemed_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=10,
        choices=RedemptionStatus.choices,
        default=RedemptionStatus.REVEALED,
        db_index=True,
    )
    device_type = models.CharField(
        max_length=10,
        choices=DeviceType.choices,
        default=DeviceType.MOBILE,
    )
    source = models.CharField(max_length=50, default='APP')

    # Self-reported redemptions are never verified; confirmed ones are Transactions.
    verified = models.BooleanField(default=False)

    class Meta:
        db_table = 'redemption_records'
        indexes = [
            models.Index(fields=['offer', 'revealed_at'], name='redemption__offer_i_8e2f14_idx'),
            models.Index(fields=['brand', 'revealed_at'], name='redemption__brand_i_3c9a60_idx'),
        ]
        ordering = ['-revealed_at']

    def __str__(self):
        return f"{self.offer_id} [{self.status}]"
