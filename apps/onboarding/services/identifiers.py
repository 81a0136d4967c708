"""Sequential human-readable identifiers (BB-000001, BBM-000001, BBR-000001)."""

from django.db import transaction

from apps.onboarding.models import IdentifierSequence

IDENTIFIER_DIGITS = 6


def format_identifier(prefix: str, value: int) -> str:
    return f"{prefix}-{value:0{IDENTIFIER_DIGITS}d}"


@transaction.atomic
def next_identifier(prefix: str) -> str:
    """
    Issue the next identifier for a prefix.

    The sequence row is locked for the duration of the surrounding
    transaction, so concurrent approvals never receive the same number.
    """
    sequence, _ = (
        IdentifierSequence.objects
        .select_for_update()
        .get_or_create(prefix=prefix)
    )
    sequence.last_value += 1
    sequence.save(update_fields=['last_value'])

    return format_identifier(prefix, sequence.last_value)
