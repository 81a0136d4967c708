"""Student applications and the recruiter's applicant pipeline."""

import logging
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import F

from apps.onboarding.models import Recruiter, Student
from apps.opportunities.models import (
    ApplicationStatus,
    ApplyMethod,
    Opportunity,
    OpportunityApplication,
)
from .exceptions import (
    ApplicationNotAllowedError,
    ApplicationNotFoundError,
    DuplicateApplicationError,
    OpportunityNotFoundError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def apply_to_opportunity(*, student: Student, opportunity_id: UUID, cover_note: str = '') -> OpportunityApplication:
    """
    Apply in-app to an open listing.

    Raises:
        OpportunityNotFoundError: If the listing does not exist
        ApplicationNotAllowedError: If the student is not verified, the
            listing is not open or it takes applications outside the app
        DuplicateApplicationError: If the student already applied
    """
    if not student.is_approved:
        raise ApplicationNotAllowedError("Only verified students can apply")

    try:
        opportunity = Opportunity.objects.select_for_update().get(id=opportunity_id)
    except Opportunity.DoesNotExist:
        raise OpportunityNotFoundError("Opportunity not found")

    if not opportunity.is_open():
        raise ApplicationNotAllowedError("This opportunity is not accepting applications")
    if opportunity.apply_method != ApplyMethod.IN_APP:
        raise ApplicationNotAllowedError(
            f"Apply for this opportunity via {opportunity.get_apply_method_display()}"
        )

    if OpportunityApplication.objects.filter(opportunity=opportunity, student=student).exists():
        raise DuplicateApplicationError("You have already applied to this opportunity")

    try:
        with transaction.atomic():
            application = OpportunityApplication.objects.create(
                opportunity=opportunity,
                student=student,
                cover_note=(cover_note or '').strip(),
            )
    except IntegrityError:
        raise DuplicateApplicationError("You have already applied to this opportunity")

    Opportunity.objects.filter(pk=opportunity.pk).update(total_applications=F('total_applications') + 1)
    logger.info("Student %s applied to opportunity %s", student.bb_id, opportunity.pk)
    return application


def has_applied(*, student: Student, opportunity_id: UUID) -> bool:
    return OpportunityApplication.objects.filter(opportunity_id=opportunity_id, student=student).exists()


def list_student_applications(*, student: Student):
    return (
        OpportunityApplication.objects
        .filter(student=student)
        .select_related('opportunity__recruiter')
        .order_by('-applied_at')
    )


def list_applicants(*, recruiter: Recruiter, opportunity_id: UUID = None):
    """Applications to the recruiter's listings, optionally for one listing."""
    queryset = (
        OpportunityApplication.objects
        .filter(opportunity__recruiter=recruiter)
        .select_related('student', 'opportunity')
        .order_by('-applied_at')
    )
    if opportunity_id:
        queryset = queryset.filter(opportunity_id=opportunity_id)
    return queryset


@transaction.atomic
def update_application_status(
    *,
    recruiter: Recruiter,
    application_id: UUID,
    status: str,
    notes: str = None,
) -> OpportunityApplication:
    """
    Move an applicant through the pipeline.

    ``notes`` replaces the recruiter's private notes when given.

    Raises:
        ApplicationNotFoundError: If the application is not for one of the recruiter's listings
        ApplicationNotAllowedError: If ``status`` is 'applied'
    """
    if status == ApplicationStatus.APPLIED:
        raise ApplicationNotAllowedError("An application cannot be moved back to 'applied'")

    try:
        application = (
            OpportunityApplication.objects
            .select_for_update()
            .get(id=application_id, opportunity__recruiter=recruiter)
        )
    except OpportunityApplication.DoesNotExist:
        raise ApplicationNotFoundError("Application not found")

    application.status = status
    update_fields = ['status', 'updated_at']
    if notes is not None:
        application.recruiter_notes = notes
        update_fields.append('recruiter_notes')
    application.save(update_fields=update_fields)
    return application
