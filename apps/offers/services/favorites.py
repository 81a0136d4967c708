"""Saved offers for students."""

from django.db import IntegrityError, transaction
from uuid import UUID

from apps.offers.models import Favorite, Offer
from apps.onboarding.models import Student
from .exceptions import OfferNotFoundError


@transaction.atomic
def add_favorite(*, student: Student, offer_id: UUID) -> tuple[Favorite, bool]:
    """
    Save an offer for the student.

    Saving an offer twice returns the existing entry with ``created=False``.

    Raises:
        OfferNotFoundError: If the offer does not exist
    """
    try:
        offer = Offer.objects.get(id=offer_id)
    except Offer.DoesNotExist:
        raise OfferNotFoundError("Offer not found")

    try:
        with transaction.atomic():
            favorite, created = Favorite.objects.get_or_create(student=student, offer=offer)
    except IntegrityError:
        # Saved concurrently from another device
        favorite, created = Favorite.objects.get(student=student, offer=offer), False

    return favorite, created


def remove_favorite(*, student: Student, offer_id: UUID) -> bool:
    """Returns whether anything was removed."""
    deleted, _ = Favorite.objects.filter(student=student, offer_id=offer_id).delete()
    return deleted > 0


@transaction.atomic
def toggle_favorite(*, student: Student, offer_id: UUID) -> bool:
    """Flip the saved state and return the new one."""
    if remove_favorite(student=student, offer_id=offer_id):
        return False
    add_favorite(student=student, offer_id=offer_id)
    return True


def list_favorites(*, student: Student):
    return (
        Favorite.objects
        .filter(student=student)
        .select_related('offer__merchant')
        .order_by('-created_at')
    )


def favorite_offer_ids(*, student: Student) -> list:
    return list(Favorite.objects.filter(student=student).values_list('offer_id', flat=True))
