"""
Output rendering: turn a decoded exchange string into the requested text.

Every format parses the document first, so JSON that is neither a
blueprint nor a blueprint book is rejected before any output exists.
"""
import json
from enum import Enum
from typing import Optional

from ..codec import parse_document
from ..domain import Document


class OutputFormat(str, Enum):
    """Output targets for a decoded document."""
    JSON = "json"
    DEBUG = "debug"


def render_json(raw_json: str, pretty: bool = False) -> str:
    """
    JSON output: the decompressed text itself, or an indented copy of it.

    Args:
        raw_json: Decompressed JSON text
        pretty: Re-serialize with indentation (same JSON value)
    """
    if not pretty:
        return raw_json
    return json.dumps(json.loads(raw_json), indent=2, ensure_ascii=False) + "\n"


def render_debug(doc: Document) -> str:
    """Debug output: the typed document's repr."""
    return f"{doc!r}\n"


def render_output(
    raw_json: str,
    fmt: OutputFormat,
    pretty: bool = False,
    validate: Optional[bool] = None,
) -> str:
    """
    Render decoded JSON text in the requested format.

    Args:
        raw_json: Decompressed JSON text
        fmt: Output format
        pretty: Indent JSON output
        validate: Run the validation pass (default from config)

    Returns:
        Complete output text

    Raises:
        FormatError, SchemaError, DataError: From parsing / validation
    """
    fmt = OutputFormat(fmt)
    doc = parse_document(raw_json, validate=validate)

    if fmt is OutputFormat.JSON:
        return render_json(raw_json, pretty=pretty)
    return render_debug(doc)
