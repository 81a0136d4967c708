"""
Application submission for students, merchants and recruiters.

A user holds at most one profile of each kind. A rejected applicant
submits again through the same call; the profile is updated in place and
goes back to pending.
"""

import logging

from django.db import transaction, IntegrityError

from apps.onboarding.models import ApprovalStatus, Merchant, Recruiter, Student
from .approval import resubmit
from .exceptions import ApplicationExistsError
from .uploads import upload_image

logger = logging.getLogger(__name__)


def _submit(model, *, user, fields, images=None):
    """
    Create or resubmit a profile of ``model`` for ``user``.

    ``images`` maps a URL field name to ``(kind, file)``. Uploads happen
    inside the caller's transaction, so a storage failure leaves no
    half-created profile behind.
    """
    existing = model.objects.select_for_update().filter(user=user).first()

    if existing is not None and existing.status != ApprovalStatus.REJECTED:
        raise ApplicationExistsError(
            f"You already have a {model._meta.verbose_name} application"
        )

    for field, (kind, file) in (images or {}).items():
        if file is not None:
            fields[field] = upload_image(kind=kind, file=file)

    if existing is not None:
        for field, value in fields.items():
            setattr(existing, field, value)
        existing.save()
        return resubmit(existing)

    try:
        profile = model.objects.create(user=user, **fields)
    except IntegrityError:
        raise ApplicationExistsError(
            f"You already have a {model._meta.verbose_name} application"
        )

    logger.info("New %s application %s", model._meta.verbose_name, profile.pk)
    return profile


@transaction.atomic
def submit_student_application(
    *,
    user,
    full_name: str,
    college: str,
    city: str,
    state: str,
    phone: str = '',
    profile_image=None,
) -> Student:
    """
    Submit (or resubmit) student verification.

    Raises:
        ApplicationExistsError: If a non-rejected application exists
        UploadError: If the profile image cannot be stored
    """
    return _submit(
        Student,
        user=user,
        fields={
            'full_name': full_name,
            'email': user.email,
            'phone': phone,
            'college': college,
            'city': city,
            'state': state,
        },
        images={'profile_image_url': ('profiles', profile_image)},
    )


@transaction.atomic
def submit_merchant_application(
    *,
    user,
    business_name: str,
    owner_name: str,
    phone: str,
    category: str,
    address: str,
    city: str,
    state: str,
    pin_code: str = '',
    description: str = '',
    latitude=None,
    longitude=None,
    is_online_store: bool = False,
    logo=None,
    cover_photo=None,
) -> Merchant:
    """
    Submit (or resubmit) a merchant application.

    Raises:
        ApplicationExistsError: If a non-rejected application exists
        UploadError: If the logo or cover photo cannot be stored
    """
    return _submit(
        Merchant,
        user=user,
        fields={
            'business_name': business_name,
            'owner_name': owner_name,
            'email': user.email,
            'phone': phone,
            'category': category,
            'description': description,
            'address': address,
            'city': city,
            'state': state,
            'pin_code': pin_code,
            'latitude': latitude,
            'longitude': longitude,
            'is_online_store': is_online_store,
        },
        images={
            'logo_url': ('logos', logo),
            'cover_photo_url': ('covers', cover_photo),
        },
    )


@transaction.atomic
def submit_recruiter_application(
    *,
    user,
    company_name: str,
    contact_name: str,
    phone: str = '',
    website: str = '',
    city: str = '',
) -> Recruiter:
    return _submit(
        Recruiter,
        user=user,
        fields={
            'company_name': company_name,
            'contact_name': contact_name,
            'email': user.email,
            'phone': phone,
            'website': website,
            'city': city,
        },
    )
