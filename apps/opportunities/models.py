from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
import uuid


class OpportunityType(models.TextChoices):
    FREELANCE = 'freelance', 'Freelance'
    INTERNSHIP = 'internship', 'Internship'
    PART_TIME = 'part_time', 'Part-time'
    FULL_TIME = 'full_time', 'Full-time'
    CONTRACT = 'contract', 'Contract'


class WorkMode(models.TextChoices):
    REMOTE = 'remote', 'Remote'
    ONSITE = 'onsite', 'On-site'
    HYBRID = 'hybrid', 'Hybrid'


class ExperienceLevel(models.TextChoices):
    BEGINNER = 'beginner', 'Beginner'
    INTERMEDIATE = 'intermediate', 'Intermediate'
    EXPERT = 'expert', 'Expert'
    ANY = 'any', 'Any'


class CompensationType(models.TextChoices):
    PAID = 'paid', 'Paid'
    UNPAID = 'unpaid', 'Unpaid'
    STIPEND = 'stipend', 'Stipend'
    COMMISSION = 'commission', 'Commission'


class ApplyMethod(models.TextChoices):
    IN_APP = 'in_app', 'In app'
    WHATSAPP = 'whatsapp', 'WhatsApp'
    EMAIL = 'email', 'Email'
    EXTERNAL = 'external', 'External link'


class OpportunityStatus(models.TextChoices):
    PENDING_REVIEW = 'pending_review', 'Pending review'
    ACTIVE = 'active', 'Active'
    PAUSED = 'paused', 'Paused'
    CLOSED = 'closed', 'Closed'
    REJECTED = 'rejected', 'Rejected'


class ApplicationStatus(models.TextChoices):
    APPLIED = 'applied', 'Applied'
    VIEWED = 'viewed', 'Viewed'
    SHORTLISTED = 'shortlisted', 'Shortlisted'
    HIRED = 'hired', 'Hired'
    REJECTED = 'rejected', 'Rejected'


class OpportunityCategory(models.Model):
    """Admin-managed grouping shown as filter chips on the job board."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    icon = models.CharField(max_length=50, blank=True)
    description = models.CharField(max_length=300, blank=True)
    display_order = models.PositiveSmallIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'opportunity_categories'
        ordering = ['display_order', 'name']
        verbose_name_plural = 'opportunity categories'

    def __str__(self):
        return self.name


class Opportunity(models.Model):
    """
    Job or gig posted by a recruiter.

    New listings wait in ``pending_review`` until an admin approves them.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recruiter = models.ForeignKey(
        'onboarding.Recruiter',
        on_delete=models.CASCADE,
        related_name='opportunities'
    )
    category = models.ForeignKey(
        OpportunityCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='opportunities'
    )

    title = models.CharField(max_length=200)
    description = models.TextField()
    type = models.CharField(max_length=20, choices=OpportunityType.choices)
    work_mode = models.CharField(max_length=20, choices=WorkMode.choices)
    experience_level = models.CharField(
        max_length=20,
        choices=ExperienceLevel.choices,
        default=ExperienceLevel.ANY,
    )
    compensation = models.CharField(max_length=100, blank=True)
    compensation_type = models.CharField(
        max_length=20,
        choices=CompensationType.choices,
        default=CompensationType.PAID,
    )
    skills_required = models.JSONField(default=list, blank=True)
    vacancies = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    duration = models.CharField(max_length=100, blank=True)
    terms = models.TextField(blank=True)

    # Location
    city = models.CharField(max_length=100, blank=True)
    is_pan_india = models.BooleanField(default=False)

    # How students apply
    apply_method = models.CharField(
        max_length=20,
        choices=ApplyMethod.choices,
        default=ApplyMethod.IN_APP,
    )
    apply_link = models.CharField(max_length=500, blank=True)

    status = models.CharField(
        max_length=20,
        choices=OpportunityStatus.choices,
        default=OpportunityStatus.PENDING_REVIEW,
        db_index=True,
    )
    rejection_reason = models.TextField(blank=True)
    total_applications = models.PositiveIntegerField(default=0)
    expires_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'opportunities'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='opportuniti_status_2f9c18_idx'),
            models.Index(fields=['recruiter', 'status'], name='opportuniti_recruit_7a4e05_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'opportunities'

    def __str__(self):
        return f"{self.title} ({self.recruiter.company_name})"

    def is_open(self, at=None):
        at = at or timezone.now()
        if self.status != OpportunityStatus.ACTIVE:
            return False
        return self.expires_at is None or self.expires_at > at


class OpportunityApplication(models.Model):
    """A student's application to one opportunity."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    opportunity = models.ForeignKey(
        Opportunity,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    student = models.ForeignKey(
        'onboarding.Student',
        on_delete=models.CASCADE,
        related_name='opportunity_applications'
    )
    cover_note = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.APPLIED,
    )
    recruiter_notes = models.TextField(blank=True)

    applied_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'opportunity_applications'
        unique_together = [['opportunity', 'student']]
        indexes = [
            models.Index(fields=['opportunity', 'status'], name='opportunity_opportu_5b1d63_idx'),
        ]
        ordering = ['-applied_at']

    def __str__(self):
        return f"{self.student} -> {self.opportunity.title}"
