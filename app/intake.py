"""Image intake: validate uploads and load the bundled default image."""
import logging
from typing import Optional

from app import config
from app.errors import (
    DEFAULT_IMAGE_MESSAGE,
    INVALID_TYPE_MESSAGE,
    READ_FAILED_MESSAGE,
    TOO_LARGE_MESSAGE,
    ReadError,
    ValidationError,
)
from app.schemas import ImagePayload
from app.utils import is_decodable_image, sniff_media_type

logger = logging.getLogger(__name__)


def validate_upload(media_type: Optional[str], size: int, max_bytes: int = config.MAX_IMAGE_BYTES) -> None:
    """Reject non-image media types and files over the size limit (the limit itself is allowed)."""
    if not media_type or not media_type.startswith("image/"):
        raise ValidationError(INVALID_TYPE_MESSAGE)
    if size > max_bytes:
        raise ValidationError(TOO_LARGE_MESSAGE)


def read_upload(data: bytes, media_type: str) -> ImagePayload:
    if not is_decodable_image(data):
        raise ReadError(READ_FAILED_MESSAGE)
    return ImagePayload(data=data, media_type=media_type)


def accept_upload(data: bytes, media_type: Optional[str]) -> ImagePayload:
    """Validate and read an uploaded file into an image payload."""
    try:
        validate_upload(media_type, len(data))
        return read_upload(data, media_type)
    except (ValidationError, ReadError) as e:
        logger.warning("Rejected upload (%s, %d bytes): %s", media_type, len(data), e.message)
        raise


def load_default(path: str = config.DEFAULT_IMAGE_PATH) -> ImagePayload:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error("Error loading default image %s: %s", path, e)
        raise ReadError(DEFAULT_IMAGE_MESSAGE) from e

    media_type = sniff_media_type(data)
    if media_type is None or not is_decodable_image(data):
        logger.error("Default image %s is not a readable image", path)
        raise ReadError(DEFAULT_IMAGE_MESSAGE)
    return ImagePayload(data=data, media_type=media_type)


async def read_upload_file(file) -> ImagePayload:
    """
    Validate an uploaded form file from its declared type and size, then read it.

    The body is read only after the declared metadata passes, and at most
    one byte past the size limit.
    """
    declared_size = file.size if file.size is not None else 0
    try:
        validate_upload(file.content_type, declared_size)
    except ValidationError as e:
        logger.warning("Rejected upload (%s, %d bytes declared): %s", file.content_type, declared_size, e.message)
        raise
    data = await file.read(config.MAX_IMAGE_BYTES + 1)
    return accept_upload(data, file.content_type)
