"""
Base64 encoding of image files for transmission.
"""
import asyncio
import base64
import logging
import re

from .exceptions import EncodeError
from .intake.image_file import ImageFile

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:[^,]*?;base64,", re.IGNORECASE)


def strip_data_url_prefix(text: str) -> str:
    """Return only the payload part of a base64 data URL (no-op for bare payloads)."""
    return _DATA_URL_PREFIX.sub("", text, count=1)


def to_data_url(payload: str, mime_type: str) -> str:
    """Build a data URL from a bare base64 payload."""
    return f"data:{mime_type};base64,{payload}"


def encode_bytes(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


async def encode_image(image: ImageFile) -> str:
    """
    Read the whole file and return its base64 payload.

    The read runs in a worker thread so the event loop keeps serving the UI.
    Empty files encode to an empty string.

    :param image: ImageFile to encode
    :return: Bare base64 payload (never a data URL)
    :raises EncodeError: If the file cannot be read
    """
    try:
        data = await asyncio.to_thread(image.path.read_bytes)
    except OSError as e:
        raise EncodeError(f"Could not read image '{image.name}': {e}") from e

    logger.debug(f"Encoded {image.name} ({len(data)} bytes)")
    return encode_bytes(data)
