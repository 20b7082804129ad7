from __future__ import annotations

import base64
import logging
import re

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:[^;,]+;base64,")

# Leading base64 characters of common image headers.
_MAGIC_PREFIXES = (
    ("/9j/", "image/jpeg"),
    ("iVBORw0K", "image/png"),
    ("UklGR", "image/webp"),
    ("R0lGOD", "image/gif"),
)


def strip_data_url(value: str) -> str:
    """Return the bare base64 payload of a data URL (or the value unchanged)."""
    if "base64," in value:
        return value.split("base64,", 1)[1]
    return _DATA_URL_PREFIX.sub("", value)


def detect_mime_type(b64: str) -> str:
    for prefix, mime in _MAGIC_PREFIXES:
        if b64.startswith(prefix):
            return mime
    logger.warning("Could not detect image type, defaulting to JPEG")
    return "image/jpeg"


def to_data_url(data: bytes | str, mime: str = "image/png") -> str:
    if isinstance(data, bytes):
        data = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{data}"


def decode_data_url(value: str) -> bytes:
    return base64.b64decode(strip_data_url(value))
