"""
Approval workflow shared by students, merchants and recruiters.

Allowed transitions:

    pending   -> approved, rejected
    approved  -> suspended
    suspended -> approved   (reinstate)
    rejected  -> pending    (resubmission)

Approving assigns the profile's identifier the first time only, so a
suspended and reinstated merchant keeps its BBM-ID.
"""

import logging

from django.db import transaction
from django.utils import timezone

from apps.onboarding.models import ApprovalStatus
from .exceptions import InvalidStatusTransitionError
from .identifiers import next_identifier

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    ApprovalStatus.PENDING: {ApprovalStatus.APPROVED, ApprovalStatus.REJECTED},
    ApprovalStatus.APPROVED: {ApprovalStatus.SUSPENDED},
    ApprovalStatus.SUSPENDED: {ApprovalStatus.APPROVED},
    ApprovalStatus.REJECTED: {ApprovalStatus.PENDING},
}


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


def _lock(profile):
    return type(profile).objects.select_for_update().get(pk=profile.pk)


def _transition(profile, target, **changes):
    locked = _lock(profile)

    if not can_transition(locked.status, target):
        raise InvalidStatusTransitionError(
            f"Cannot change status from '{locked.status}' to '{target}'"
        )

    previous = locked.status
    locked.status = target
    for field, value in changes.items():
        setattr(locked, field, value)
    locked.save()

    logger.info(
        "%s %s status %s -> %s",
        type(locked).__name__, locked.pk, previous, target,
    )
    return locked


@transaction.atomic
def approve(profile):
    """
    Approve a pending or suspended profile.

    Raises:
        InvalidStatusTransitionError: If the profile is rejected or already approved
    """
    current = _lock(profile)
    changes = {'approved_at': timezone.now(), 'rejection_reason': ''}
    if not current.identifier:
        changes[current.identifier_field] = next_identifier(current.identifier_prefix)
    return _transition(current, ApprovalStatus.APPROVED, **changes)


@transaction.atomic
def reject(profile, reason: str = ''):
    """Reject a pending profile, storing the reason shown to the applicant."""
    return _transition(profile, ApprovalStatus.REJECTED, rejection_reason=reason)


@transaction.atomic
def suspend(profile):
    return _transition(profile, ApprovalStatus.SUSPENDED)


@transaction.atomic
def reinstate(profile):
    """Bring a suspended profile back; the identifier is kept."""
    if profile.status != ApprovalStatus.SUSPENDED:
        raise InvalidStatusTransitionError("Only suspended profiles can be reinstated")
    return _transition(profile, ApprovalStatus.APPROVED)


@transaction.atomic
def resubmit(profile):
    """Move a rejected application back into the review queue."""
    return _transition(profile, ApprovalStatus.PENDING, rejection_reason='')
