"""Student pass QR code shown at the merchant counter."""

from io import BytesIO

import qrcode

from apps.onboarding.models import Student
from .exceptions import StudentPassUnavailableError


def generate_student_pass_qr(student: Student) -> bytes:
    """
    Render the student's BB-ID as a PNG QR code.

    Merchants scan this code to look the student up before confirming a
    redemption, so only approved students get a pass.

    Raises:
        StudentPassUnavailableError: If the student is not approved yet
    """
    if not student.is_approved or not student.bb_id:
        raise StudentPassUnavailableError("Student pass is available after approval")

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(student.bb_id)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
