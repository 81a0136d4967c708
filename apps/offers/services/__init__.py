"""Services for offers business logic."""

from .exceptions import (
    OffersServiceError,
    MerchantNotApprovedError,
    InvalidOfferError,
    OfferNotFoundError,
)
from .pricing import compute_discount
from .catalog import (
    list_active_offers,
    list_active_online_offers,
    is_visible_for_location,
    filter_visible,
)
from .offer_management import (
    create_offer,
    get_merchant_offer,
    update_offer,
    set_offer_status,
)
from .favorites import (
    add_favorite,
    remove_favorite,
    toggle_favorite,
    list_favorites,
    favorite_offer_ids,
)

__all__ = [
    # Exceptions
    'OffersServiceError',
    'MerchantNotApprovedError',
    'InvalidOfferError',
    'OfferNotFoundError',
    # Pricing
    'compute_discount',
    # Catalog
    'list_active_offers',
    'list_active_online_offers',
    'is_visible_for_location',
    'filter_visible',
    # Merchant offers
    'create_offer',
    'get_merchant_offer',
    'update_offer',
    'set_offer_status',
    # Favorites
    'add_favorite',
    'remove_favorite',
    'toggle_favorite',
    'list_favorites',
    'favorite_offer_ids',
]
