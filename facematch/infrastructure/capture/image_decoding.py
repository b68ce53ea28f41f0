"""Decoding helpers for images arriving as bytes or base64 text."""
import base64
import binascii
import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from ...domain.constants import PIL_FORMAT_MAP
from ...domain.errors import InvalidImageError

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = "data:"


def decode_base64_image(text: str) -> bytes:
    """
    Decode plain base64 or a ``data:image/...;base64,`` URL.

    Browsers produce the data-URL form from ``canvas.toDataURL()``.

    Raises:
        InvalidImageError: empty or malformed input
    """
    if not text or not text.strip():
        raise InvalidImageError("Image payload is empty")
    payload = text.strip()
    if payload.startswith(_DATA_URL_PREFIX):
        header, _, payload = payload.partition(",")
        if ";base64" not in header:
            raise InvalidImageError("Only base64 data URLs are supported")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Image payload is not valid base64: {e}") from e
    if not data:
        raise InvalidImageError("Image payload is empty")
    return data


def identify_image_format(data: bytes) -> str:
    """
    Return the format tag ("jpeg", "png", "webp") of an encoded image.

    Raises:
        InvalidImageError: Pillow cannot identify the bytes, or the format is unsupported
    """
    try:
        with Image.open(BytesIO(data)) as image:
            pil_format = image.format
            image.verify()
    except Image.DecompressionBombError as e:
        raise InvalidImageError(f"Image dimensions are too large: {e}") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidImageError(f"Could not decode image: {e}") from e

    image_format = PIL_FORMAT_MAP.get(pil_format or "")
    if image_format is None:
        raise InvalidImageError(f"Unsupported image format: {pil_format}")
    logger.debug(f"Identified {len(data)} byte image as {image_format}")
    return image_format


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
