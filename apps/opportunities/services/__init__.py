"""Services for the student job and gig board."""

from .exceptions import (
    OpportunitiesServiceError,
    RecruiterNotApprovedError,
    InvalidOpportunityError,
    OpportunityNotFoundError,
    InvalidStatusTransitionError,
    ApplicationNotAllowedError,
    DuplicateApplicationError,
    ApplicationNotFoundError,
)
from .types import RecruiterDashboard
from .listings import (
    list_open_opportunities,
    post_opportunity,
    update_opportunity,
    delete_opportunity,
    set_opportunity_status,
    review_opportunity,
    recruiter_dashboard,
)
from .applications import (
    apply_to_opportunity,
    has_applied,
    list_student_applications,
    list_applicants,
    update_application_status,
)

__all__ = [
    # Exceptions
    'OpportunitiesServiceError',
    'RecruiterNotApprovedError',
    'InvalidOpportunityError',
    'OpportunityNotFoundError',
    'InvalidStatusTransitionError',
    'ApplicationNotAllowedError',
    'DuplicateApplicationError',
    'ApplicationNotFoundError',
    # Value objects
    'RecruiterDashboard',
    # Listings
    'list_open_opportunities',
    'post_opportunity',
    'update_opportunity',
    'delete_opportunity',
    'set_opportunity_status',
    'review_opportunity',
    'recruiter_dashboard',
    # Applications
    'apply_to_opportunity',
    'has_applied',
    'list_student_applications',
    'list_applicants',
    'update_application_status',
]
