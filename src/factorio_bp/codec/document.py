"""
Document mapping: raw JSON text <-> typed Blueprint / BlueprintBook.

The wire names, enum cases and optionality live on the model fields
themselves, so parsing (model_validate) and rendering (model_dump with
by_alias) read the same declarations. Wire text is matched by alias only:
a key spelled like a Python field name (io_type, neighbors) is an unknown
field and is carried through as an extra.
"""
import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..config import settings
from ..domain import DOCUMENT_KEY, Blueprint, BlueprintBook, Document
from ..errors import DOCUMENT_KEYS, DataError, FormatError, SchemaError
from ..validate import ensure_valid
from . import envelope

logger = logging.getLogger(__name__)

MODEL_BY_KEY = {key: model for model, key in DOCUMENT_KEY.items()}

# Keep the error message readable for badly broken documents
MAX_REPORTED_ERRORS = 10


def _schema_error(key: str, exc: ValidationError) -> SchemaError:
    locations = []
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in (key, *err["loc"]))
        locations.append(loc)
        details.append(f"  - {loc}: {err['msg']}")

    shown = details[:MAX_REPORTED_ERRORS]
    if len(details) > MAX_REPORTED_ERRORS:
        shown.append(f"  ... and {len(details) - MAX_REPORTED_ERRORS} more")

    message = f"'{key}' does not match the schema ({len(details)} errors):\n" + "\n".join(shown)
    return SchemaError(message, locations)


def select_document(data: Any) -> tuple[str, Any]:
    """
    Pick the document key and payload out of a decoded JSON root.

    Raises:
        DataError: If the root is not an object holding exactly one of
            "blueprint" / "blueprint_book"
    """
    expected = " or ".join(f"'{k}'" for k in DOCUMENT_KEYS)

    if not isinstance(data, dict):
        raise DataError(
            f"Document root must be a JSON object with {expected}, got {type(data).__name__}"
        )

    present = [key for key in DOCUMENT_KEYS if key in data]
    if not present:
        raise DataError(f"Given data is not a blueprint or blueprint book (expected {expected})")
    if len(present) > 1:
        raise DataError("Document holds both 'blueprint' and 'blueprint_book'; exactly one is allowed")

    key = present[0]
    extra_keys = sorted(k for k in data if k != key)
    if extra_keys:
        logger.warning(f"[Document] Ignoring top-level keys next to '{key}': {extra_keys}")

    return key, data[key]


def load_document(data: Any, validate: Optional[bool] = None) -> Document:
    """
    Build the typed document from an already decoded JSON value.

    Raises:
        DataError: If the root is neither document variant, or validation fails
        SchemaError: If the payload does not match the schema
    """
    if validate is None:
        validate = settings.VALIDATE

    key, payload = select_document(data)
    model = MODEL_BY_KEY[key]

    try:
        doc = model.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as e:
        raise _schema_error(key, e) from e

    logger.debug(f"[Document] Parsed {model.__name__} (version {doc.version})")

    if validate:
        ensure_valid(doc)

    return doc


def parse_document(raw_json: str, validate: Optional[bool] = None) -> Document:
    """
    Parse raw JSON text into a Blueprint or BlueprintBook.

    Args:
        raw_json: Decompressed JSON text
        validate: Run the validation pass after parsing (default from config)

    Raises:
        FormatError: If the text is not JSON
        DataError: If the JSON is neither document variant, or validation fails
        SchemaError: If the document does not match the schema
    """
    try:
        data = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise FormatError("json", f"payload is not valid JSON: {e}") from e

    return load_document(data, validate=validate)


def dump_document(doc: Document) -> dict[str, Any]:
    """Wire-shaped dict for a document, wrapped in its document key."""
    if not isinstance(doc, (Blueprint, BlueprintBook)):
        raise TypeError(f"Expected Blueprint or BlueprintBook, got {type(doc).__name__}")

    payload = doc.model_dump(mode="json", by_alias=True)
    return {DOCUMENT_KEY[type(doc)]: payload}


def render_document(doc: Document) -> str:
    """Compact JSON text for a document; parse_document() accepts it back."""
    return json.dumps(dump_document(doc), separators=(",", ":"), ensure_ascii=False)


# ============================================================================
# EXCHANGE STRING SHORTCUTS
# ============================================================================

def decode_document(text: str, validate: Optional[bool] = None) -> Document:
    """Exchange string -> typed document."""
    return parse_document(envelope.decode(text), validate=validate)


def encode_document(doc: Document, **kwargs) -> str:
    """Typed document -> exchange string. Keyword args go to envelope.encode()."""
    return envelope.encode(render_document(doc), **kwargs)
