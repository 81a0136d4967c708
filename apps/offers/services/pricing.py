"""Discount arithmetic shared by offer creation and counter redemption."""

from decimal import Decimal, ROUND_HALF_UP

from apps.offers.models import OfferType

TWO_PLACES = Decimal('0.01')


def compute_discount(
    *,
    offer_type: str,
    amount: Decimal,
    discount_value: Decimal,
    max_discount: Decimal = None,
) -> tuple:
    """
    Return ``(discount_amount, final_price)`` for a bill of ``amount``.

    percentage / custom: ``discount_value`` percent, capped by ``max_discount``
    flat:                ``discount_value`` off
    bogo:                the item is free
    freebie:             a free item on the side, price unchanged

    The final price never drops below zero.
    """
    amount = Decimal(amount)
    discount_value = Decimal(discount_value or 0)

    if amount <= 0:
        return Decimal('0.00'), Decimal('0.00')

    if offer_type in (OfferType.PERCENTAGE, OfferType.CUSTOM):
        discount = amount * discount_value / Decimal('100')
        if max_discount is not None and discount > max_discount:
            discount = Decimal(max_discount)
    elif offer_type == OfferType.FLAT:
        discount = discount_value
    elif offer_type == OfferType.BOGO:
        discount = amount
    else:
        discount = Decimal('0')

    discount = min(discount, amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    final = (amount - discount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return discount, final
