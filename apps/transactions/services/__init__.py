"""Services for transactions business logic."""

from .exceptions import (
    TransactionsServiceError,
    StudentNotFoundError,
    OfferNotFoundError,
    RedemptionNotAllowedError,
    TransactionNotFoundError,
    InvalidRatingError,
    DuplicateRatingError,
)
from .types import RedemptionEligibility, MerchantSummary
from .redemption import (
    find_student_by_bb_id,
    completed_uses,
    can_redeem,
    record_transaction,
)
from .reporting import merchant_summary
from .ratings import (
    update_merchant_rating,
    submit_rating,
    list_merchant_ratings,
)

__all__ = [
    # Exceptions
    'TransactionsServiceError',
    'StudentNotFoundError',
    'OfferNotFoundError',
    'RedemptionNotAllowedError',
    'TransactionNotFoundError',
    'InvalidRatingError',
    'DuplicateRatingError',
    # Value objects
    'RedemptionEligibility',
    'MerchantSummary',
    # Redemption
    'find_student_by_bb_id',
    'completed_uses',
    'can_redeem',
    'record_transaction',
    # Reporting
    'merchant_summary',
    # Ratings
    'update_merchant_rating',
    'submit_rating',
    'list_merchant_ratings',
]
