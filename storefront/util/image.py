"""Data URL helpers for product images.

Clients upload images as ``data:<mime>;base64,<payload>`` strings and get the
same format back when listing products.
"""

import base64
import binascii
import re

_DATA_URL = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?"  # optional media type
    r"(?:;[^,;]+)*;base64,"
    r"(?P<data>.*)$",
    re.S,
)

DEFAULT_CONTENT_TYPE = "image/jpeg"


class InvalidImageError(ValueError):
    """Raised when an uploaded image is not a base64 data URL."""

    pass


def decode_data_url(value: str) -> tuple[bytes, str]:
    """Decode a base64 data URL.

    Args:
        value: Data URL string

    Returns:
        Tuple of (raw bytes, content type)

    Raises:
        InvalidImageError: If the value is not a valid base64 data URL
    """
    match = _DATA_URL.match(value.strip())
    if not match:
        raise InvalidImageError("Invalid image format")

    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImageError("Invalid image format")

    if not data:
        raise InvalidImageError("Invalid image format")

    return data, match.group("mime") or DEFAULT_CONTENT_TYPE


def encode_data_url(data: bytes, content_type: str = DEFAULT_CONTENT_TYPE) -> str:
    """Encode raw bytes as a base64 data URL."""
    return f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"
