"""Image uploads for profile photos, logos and cover photos."""

import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from .exceptions import UploadError

logger = logging.getLogger(__name__)

UPLOAD_KINDS = {'profiles', 'logos', 'covers', 'store-photos'}


def upload_image(*, kind: str, file) -> str:
    """
    Store an uploaded image and return its public URL.

    Files are written as ``<kind>/<uuid>.<ext>`` through the configured
    default storage.

    Args:
        kind: Upload bucket, one of UPLOAD_KINDS
        file: Django UploadedFile

    Returns:
        URL of the stored file

    Raises:
        UploadError: If the file is not an image, is too large, or storage fails
    """
    if kind not in UPLOAD_KINDS:
        raise UploadError(f"Unknown upload kind '{kind}'")

    content_type = getattr(file, 'content_type', '') or ''
    if not content_type.startswith('image/'):
        raise UploadError("Only image files can be uploaded")

    if file.size > settings.MAX_UPLOAD_BYTES:
        raise UploadError(
            f"File too large (max {settings.MAX_UPLOAD_BYTES // (1024 * 1024)} MB)"
        )

    ext = os.path.splitext(file.name)[1].lower().lstrip('.') or 'bin'
    path = f"{kind}/{uuid.uuid4().hex}.{ext}"

    try:
        stored_name = default_storage.save(path, file)
    except Exception as e:
        logger.exception("Failed to store %s upload %s", kind, path)
        raise UploadError("Could not store the uploaded file") from e

    return default_storage.url(stored_name)
