"""
Recruiter listings and the student job board.

Listing status flow:

    pending_review -> active, rejected      (admin review)
    active         -> paused, closed        (recruiter)
    paused         -> active, closed        (recruiter)
    rejected       -> pending_review        (recruiter edits and resubmits)
"""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from apps.onboarding.models import Recruiter
from apps.opportunities.models import ApplyMethod, Opportunity, OpportunityStatus
from .exceptions import (
    InvalidOpportunityError,
    InvalidStatusTransitionError,
    OpportunityNotFoundError,
    RecruiterNotApprovedError,
)
from .types import RecruiterDashboard

logger = logging.getLogger(__name__)

RECRUITER_TRANSITIONS = {
    OpportunityStatus.ACTIVE: {OpportunityStatus.PAUSED, OpportunityStatus.CLOSED},
    OpportunityStatus.PAUSED: {OpportunityStatus.ACTIVE, OpportunityStatus.CLOSED},
}

# Fields a recruiter may set; status and counters are managed here
EDITABLE_FIELDS = {
    'category', 'title', 'description', 'type', 'work_mode', 'experience_level',
    'compensation', 'compensation_type', 'skills_required', 'vacancies', 'duration',
    'terms', 'city', 'is_pan_india', 'apply_method', 'apply_link', 'expires_at',
}


def list_open_opportunities(
    *,
    category_id: UUID = None,
    type: str = '',
    work_mode: str = '',
    experience_level: str = '',
    city: str = '',
    search: str = '',
):
    """
    Active, unexpired listings, newest first.

    A ``city`` filter also keeps pan-India listings.
    """
    now = timezone.now()
    queryset = (
        Opportunity.objects
        .filter(status=OpportunityStatus.ACTIVE)
        .filter(Q(expires_at__isnull=True) | Q(expires_at__gt=now))
        .select_related('recruiter', 'category')
        .order_by('-created_at')
    )

    if category_id:
        queryset = queryset.filter(category_id=category_id)
    if type:
        queryset = queryset.filter(type=type)
    if work_mode:
        queryset = queryset.filter(work_mode=work_mode)
    if experience_level:
        queryset = queryset.filter(experience_level=experience_level)

    city = (city or '').strip()
    if city:
        queryset = queryset.filter(Q(city__icontains=city) | Q(is_pan_india=True))

    search = (search or '').strip()
    if search:
        queryset = queryset.filter(Q(title__icontains=search) | Q(description__icontains=search))

    return queryset


def _validate(fields):
    method = fields.get('apply_method', ApplyMethod.IN_APP)
    if method != ApplyMethod.IN_APP and not (fields.get('apply_link') or '').strip():
        raise InvalidOpportunityError(f"An apply link is required when students apply via {method}")

    if not fields.get('is_pan_india') and not (fields.get('city') or '').strip():
        raise InvalidOpportunityError("Set a city or mark the listing pan-India")


@transaction.atomic
def post_opportunity(*, recruiter: Recruiter, **fields) -> Opportunity:
    """
    Create a listing in ``pending_review``.

    Raises:
        RecruiterNotApprovedError: If the recruiter is not verified
        InvalidOpportunityError: If apply or location fields are inconsistent
    """
    if not recruiter.is_approved:
        raise RecruiterNotApprovedError("Your recruiter account is not verified yet")

    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise InvalidOpportunityError(f"Unknown fields: {', '.join(sorted(unknown))}")
    _validate(fields)

    opportunity = Opportunity.objects.create(
        recruiter=recruiter,
        status=OpportunityStatus.PENDING_REVIEW,
        **fields
    )
    logger.info("Recruiter %s posted opportunity %s for review", recruiter.bbr_id, opportunity.pk)
    return opportunity


@transaction.atomic
def update_opportunity(*, opportunity: Opportunity, **fields) -> Opportunity:
    """
    Edit a listing.

    A rejected listing goes back into review once edited.
    """
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise InvalidOpportunityError(f"Unknown fields: {', '.join(sorted(unknown))}")

    opportunity = Opportunity.objects.select_for_update().get(pk=opportunity.pk)
    merged = {field: getattr(opportunity, field) for field in ('apply_method', 'apply_link', 'city', 'is_pan_india')}
    merged.update(fields)
    _validate(merged)

    for field, value in fields.items():
        setattr(opportunity, field, value)
    if opportunity.status == OpportunityStatus.REJECTED:
        opportunity.status = OpportunityStatus.PENDING_REVIEW
        opportunity.rejection_reason = ''
    opportunity.save()
    return opportunity


def delete_opportunity(*, opportunity: Opportunity) -> None:
    logger.info("Opportunity %s deleted by recruiter %s", opportunity.pk, opportunity.recruiter_id)
    opportunity.delete()


@transaction.atomic
def set_opportunity_status(*, opportunity: Opportunity, status: str) -> Opportunity:
    """
    Pause, resume or close a live listing.

    Raises:
        InvalidStatusTransitionError: If the listing is not active or paused
    """
    opportunity = Opportunity.objects.select_for_update().get(pk=opportunity.pk)
    if status not in RECRUITER_TRANSITIONS.get(opportunity.status, set()):
        raise InvalidStatusTransitionError(
            f"Cannot change status from '{opportunity.status}' to '{status}'"
        )

    opportunity.status = status
    opportunity.save(update_fields=['status', 'updated_at'])
    return opportunity


@transaction.atomic
def review_opportunity(*, opportunity_id: UUID, approve: bool, reason: str = '') -> Opportunity:
    """
    Admin decision on a listing waiting for review.

    Raises:
        OpportunityNotFoundError: If the listing does not exist
        InvalidStatusTransitionError: If the listing is not pending review
    """
    try:
        opportunity = Opportunity.objects.select_for_update().get(id=opportunity_id)
    except Opportunity.DoesNotExist:
        raise OpportunityNotFoundError("Opportunity not found")

    if opportunity.status != OpportunityStatus.PENDING_REVIEW:
        raise InvalidStatusTransitionError("Only listings pending review can be approved or rejected")

    if approve:
        opportunity.status = OpportunityStatus.ACTIVE
        opportunity.rejection_reason = ''
    else:
        opportunity.status = OpportunityStatus.REJECTED
        opportunity.rejection_reason = reason
    opportunity.save(update_fields=['status', 'rejection_reason', 'updated_at'])

    logger.info("Opportunity %s reviewed: %s", opportunity.pk, opportunity.status)
    return opportunity


def recruiter_dashboard(*, recruiter: Recruiter) -> RecruiterDashboard:
    totals = Opportunity.objects.filter(recruiter=recruiter).aggregate(
        total=Count('id'),
        active=Count('id', filter=Q(status=OpportunityStatus.ACTIVE)),
        pending=Count('id', filter=Q(status=OpportunityStatus.PENDING_REVIEW)),
        applications=Sum('total_applications'),
    )
    return RecruiterDashboard(
        total_listings=totals['total'],
        active_listings=totals['active'],
        pending_listings=totals['pending'],
        total_applications=totals['applications'] or 0,
    )
