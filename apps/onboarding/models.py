from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ApprovalStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'
    SUSPENDED = 'suspended', 'Suspended'


class ApplicationProfile(models.Model):
    """
    Shared fields for profiles that go through admin approval.

    Subclasses declare ``identifier_field`` and ``identifier_prefix``; the
    identifier is assigned once, on first approval.
    """

    identifier_field = None
    identifier_prefix = None

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    status = models.CharField(
        max_length=20,
        choices=ApprovalStatus.choices,
        default=ApprovalStatus.PENDING,
        db_index=True,
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    @property
    def identifier(self):
        return getattr(self, self.identifier_field)

    @property
    def is_approved(self):
        return self.status == ApprovalStatus.APPROVED


class Student(ApplicationProfile):
    """Verified student; the BB-ID is what merchants scan at the counter."""

    identifier_field = 'bb_id'
    identifier_prefix = 'BB'

    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='student_profile'
    )
    bb_id = models.CharField(max_length=20, unique=True, null=True, blank=True)

    full_name = models.CharField(max_length=150)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=20, blank=True)
    college = models.CharField(max_length=200)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    profile_image_url = models.URLField(max_length=500, blank=True)

    # Running totals maintained by the transactions app
    total_savings = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    total_redemptions = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'students'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='students_status_9d2e41_idx'),
            models.Index(fields=['city'], name='students_city_5a7c10_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name} ({self.bb_id or self.status})"


class Merchant(ApplicationProfile):
    """In-store (or hybrid) business offering student discounts."""

    identifier_field = 'bbm_id'
    identifier_prefix = 'BBM'

    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='merchant_profile'
    )
    bbm_id = models.CharField(max_length=20, unique=True, null=True, blank=True)

    business_name = models.CharField(max_length=200)
    owner_name = models.CharField(max_length=150)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=20)
    category = models.CharField(max_length=50, db_index=True)
    description = models.TextField(blank=True)

    # Location
    address = models.CharField(max_length=300)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    pin_code = models.CharField(max_length=10, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    # Media
    logo_url = models.URLField(max_length=500, blank=True)
    cover_photo_url = models.URLField(max_length=500, blank=True)

    is_online_store = models.BooleanField(default=False)

    # Trending-by-volume
    trending_score = models.PositiveIntegerField(default=0)
    is_trending_override = models.BooleanField(default=False)

    # Maintained from transaction ratings
    average_rating = models.DecimalField(max_digits=2, decimal_places=1, default=Decimal('0.0'))
    total_ratings = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'merchants'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='merchants_status_1b8f33_idx'),
            models.Index(fields=['city', 'category'], name='merchants_city_6c0d72_idx'),
            models.Index(fields=['trending_score'], name='merchants_trendin_e4a915_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.business_name} ({self.bbm_id or self.status})"


class Recruiter(ApplicationProfile):
    """Company posting jobs and gigs for students."""

    identifier_field = 'bbr_id'
    identifier_prefix = 'BBR'

    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='recruiter_profile'
    )
    bbr_id = models.CharField(max_length=20, unique=True, null=True, blank=True)

    company_name = models.CharField(max_length=200)
    contact_name = models.CharField(max_length=150)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=20, blank=True)
    website = models.URLField(max_length=300, blank=True)
    city = models.CharField(max_length=100, blank=True)

    class Meta:
        db_table = 'recruiters'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.company_name} ({self.bbr_id or self.status})"


class OnlineBrand(models.Model):
    """Online brand whose coupon codes are revealed to students."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='brand_profile'
    )

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    website = models.URLField(max_length=300, blank=True)
    logo_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'online_brands'
        ordering = ['name']

    def __str__(self):
        return self.name


class IdentifierSequence(models.Model):
    """Last issued number per identifier prefix (BB, BBM, BBR)."""

    prefix = models.CharField(max_length=10, primary_key=True)
    last_value = models.PositiveIntegerField(
        default=0,
        validators=[MinValueValidator(0)]
    )

    class Meta:
        db_table = 'identifier_sequences'

    def __str__(self):
        return f"{self.prefix}: {self.last_value}"
