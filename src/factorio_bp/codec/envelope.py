"""
Exchange string envelope: version marker + base64 + zlib around JSON text.
"""
import base64
import binascii
import logging
import zlib
from typing import Optional

from ..config import settings
from ..errors import FormatError

logger = logging.getLogger(__name__)


def decode(text: str, strict_marker: Optional[bool] = None) -> str:
    """
    Unwrap an exchange string into its JSON text.

    Args:
        text: Exchange string; embedded CR/LF characters are ignored
        strict_marker: Reject unknown version markers (default from config)

    Returns:
        The decompressed JSON text, unchanged

    Raises:
        FormatError: If the marker, base64 payload, zlib stream or UTF-8
            text is invalid
    """
    if strict_marker is None:
        strict_marker = settings.STRICT_MARKER

    cleaned = text.replace("\r", "").replace("\n", "")
    if not cleaned:
        raise FormatError("marker", "exchange string is empty")

    marker, payload = cleaned[0], cleaned[1:]
    if marker not in settings.KNOWN_MARKERS:
        message = f"unknown version marker {marker!r} (known: {', '.join(settings.KNOWN_MARKERS)})"
        if strict_marker:
            raise FormatError("marker", message)
        logger.warning(f"[Envelope] {message}")

    try:
        compressed = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError("base64", f"invalid base64 payload: {e}") from e

    try:
        raw = zlib.decompress(compressed)
    except zlib.error as e:
        raise FormatError("zlib", f"invalid zlib stream: {e}") from e

    try:
        json_text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError("utf-8", f"payload is not valid UTF-8: {e}") from e

    logger.debug(
        f"[Envelope] Decoded {len(cleaned)} chars -> {len(compressed)} compressed bytes "
        f"-> {len(json_text)} chars of JSON"
    )
    return json_text


def encode(
    raw_json: str,
    marker: Optional[str] = None,
    line_width: Optional[int] = None,
    level: Optional[int] = None,
) -> str:
    """
    Wrap JSON text into an exchange string.

    Args:
        raw_json: JSON document text
        marker: Version marker character (default from config)
        line_width: Wrap output at this many characters, 0 for a single line
            (default from config)
        level: zlib compression level (default from config)

    Returns:
        Exchange string accepted by decode()
    """
    if marker is None:
        marker = settings.VERSION_MARKER
    if line_width is None:
        line_width = settings.LINE_WIDTH
    if level is None:
        level = settings.COMPRESSION_LEVEL

    if len(marker) != 1:
        raise FormatError("marker", f"version marker must be a single character, got {marker!r}")

    compressed = zlib.compress(raw_json.encode("utf-8"), level)
    text = marker + base64.b64encode(compressed).decode("ascii")

    if line_width > 0:
        text = "\n".join(text[i:i + line_width] for i in range(0, len(text), line_width))

    logger.debug(f"[Envelope] Encoded {len(raw_json)} chars of JSON -> {len(text)} chars")
    return text
