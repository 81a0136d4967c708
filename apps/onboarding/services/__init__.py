"""Services for onboarding business logic."""

from .exceptions import (
    OnboardingServiceError,
    ApplicationExistsError,
    InvalidStatusTransitionError,
    UploadError,
    StudentPassUnavailableError,
)
from .identifiers import next_identifier, format_identifier
from .approval import (
    ALLOWED_TRANSITIONS,
    can_transition,
    approve,
    reject,
    suspend,
    reinstate,
    resubmit,
)
from .uploads import upload_image
from .applications import (
    submit_student_application,
    submit_merchant_application,
    submit_recruiter_application,
)
from .student_pass import generate_student_pass_qr

__all__ = [
    # Exceptions
    'OnboardingServiceError',
    'ApplicationExistsError',
    'InvalidStatusTransitionError',
    'UploadError',
    'StudentPassUnavailableError',
    # Identifiers
    'next_identifier',
    'format_identifier',
    # Approval workflow
    'ALLOWED_TRANSITIONS',
    'can_transition',
    'approve',
    'reject',
    'suspend',
    'reinstate',
    'resubmit',
    # Submission
    'upload_image',
    'submit_student_application',
    'submit_merchant_application',
    'submit_recruiter_application',
    # Student pass
    'generate_student_pass_qr',
]
