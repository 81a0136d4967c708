"""Domain-specific exceptions for opportunities services."""


class OpportunitiesServiceError(Exception):
    """Base exception for opportunities services."""
    pass


class RecruiterNotApprovedError(OpportunitiesServiceError):
    """Raised when an unverified recruiter tries to post."""
    pass


class InvalidOpportunityError(OpportunitiesServiceError):
    """Raised when listing fields are inconsistent."""
    pass


class OpportunityNotFoundError(OpportunitiesServiceError):
    """Raised when a listing does not exist or is not visible to the caller."""
    pass


class InvalidStatusTransitionError(OpportunitiesServiceError):
    """Raised when a listing status change is not allowed."""
    pass


class ApplicationNotAllowedError(OpportunitiesServiceError):
    """Raised when a student cannot apply (not verified, listing closed, external apply)."""
    pass


class DuplicateApplicationError(OpportunitiesServiceError):
    """Raised when the student already applied to the listing."""
    pass


class ApplicationNotFoundError(OpportunitiesServiceError):
    """Raised when an application does not exist or belongs to another recruiter."""
    pass
