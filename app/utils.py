# app/utils.py
from io import BytesIO
import base64
from typing import Optional
from PIL import Image, UnidentifiedImageError


def encode_image_to_base64(image_bytes: bytes) -> str:
    """Bare base64 string, as expected by inline_data parts."""
    return base64.b64encode(image_bytes).decode("utf-8")


def encode_image_to_data_url(image_bytes: bytes, mime: str = "image/png") -> str:
    """
    Return a data URL (base64) string for embedding in JSON or HTML.
    Example: data:image/png;base64,AAA...
    """
    b64 = encode_image_to_base64(image_bytes)
    return f"data:{mime};base64,{b64}"


def sniff_media_type(image_bytes: bytes) -> Optional[str]:
    """
    Identify the image format from its content and return the matching MIME type.

    Returns None when Pillow does not recognise the bytes as an image.
    """
    try:
        with BytesIO(image_bytes) as bio:
            img = Image.open(bio)
            fmt = img.format
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError):
        return None
    if not fmt:
        return None
    return Image.MIME.get(fmt, f"image/{fmt.lower()}")


def is_decodable_image(image_bytes: bytes) -> bool:
    """Check that the bytes hold a complete, readable image of a sane pixel count."""
    try:
        with BytesIO(image_bytes) as bio:
            img = Image.open(bio)
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError):
        return False
    return True
