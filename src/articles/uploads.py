"""Upload policy for article images: extension and size checks, then storage.

Only the file name is inspected; image contents are never decoded.
"""

import logging
import os
import time

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile
from rest_framework.exceptions import UnsupportedMediaType

from core.exceptions import PayloadTooLarge, StorageError

logger = logging.getLogger(__name__)


def image_extension(filename: str) -> str:
    """Return the lowercased extension of ``filename``, including the dot."""
    return os.path.splitext(filename or "")[1].lower()


def validate_image(upload: UploadedFile) -> str:
    """Enforce the allowed extensions and the size cap; return the extension."""
    ext = image_extension(upload.name)
    allowed = settings.ALLOWED_IMAGE_EXTENSIONS
    if ext not in allowed:
        logger.info("Rejected upload %r: extension not allowed", upload.name)
        raise UnsupportedMediaType(
            ext or "unknown",
            detail=f"Only images are allowed ({', '.join(allowed)})",
        )

    if upload.size is not None and upload.size > settings.MAX_UPLOAD_SIZE:
        logger.info("Rejected upload %r: %d bytes over limit", upload.name, upload.size)
        raise PayloadTooLarge(
            f"Image exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit"
        )
    return ext


def storage_name(ext: str) -> str:
    """Millisecond timestamp plus extension; storage resolves any collision."""
    return f"{int(time.time() * 1000)}{ext}"


def store_image(upload: UploadedFile) -> str:
    """Validate ``upload`` and persist it, returning the relative storage name."""
    ext = validate_image(upload)
    try:
        name = default_storage.save(storage_name(ext), upload)
    except OSError as exc:
        logger.error("Failed to store upload %r: %s", upload.name, exc)
        raise StorageError() from exc
    logger.debug("Stored upload %r as %s", upload.name, name)
    return name


def discard_image(name: str) -> None:
    """Remove a stored image left behind by a failed insert."""
    if not name:
        return
    try:
        default_storage.delete(name)
    except OSError:
        logger.exception("Failed to remove orphaned upload %s", name)


def public_image_url(name: str, request=None) -> str:
    """Build an absolute, publicly fetchable URL for a stored image."""
    path = default_storage.url(os.path.basename(name))
    base_url = getattr(settings, "PUBLIC_BASE_URL", "")
    if base_url:
        return f"{base_url}{path}"
    if request is not None:
        return request.build_absolute_uri(path)
    return path


__all__ = [
    "discard_image",
    "image_extension",
    "public_image_url",
    "store_image",
    "validate_image",
]
