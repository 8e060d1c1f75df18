"""
Error taxonomy for the blueprint decode/encode pipeline.

Every stage raises one of these and never recovers locally:
- FormatError: malformed envelope (marker, base64, zlib, UTF-8, JSON syntax)
- SchemaError: JSON is well-formed but violates the typed schema
- DataError: JSON is neither a blueprint nor a blueprint book, or fails validation

File access errors are plain OSError and reach the caller unmodified.
"""
from typing import Optional

# File read/write failures propagate as the builtin OSError family.
IoError = OSError

DOCUMENT_KEYS = ("blueprint", "blueprint_book")


class BlueprintError(Exception):
    """Base class for all pipeline failures."""


class FormatError(BlueprintError):
    """Exchange string envelope could not be unwrapped."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"[{stage}] {message}")


class SchemaError(BlueprintError, ValueError):
    """JSON does not match the typed blueprint schema.

    Also a ValueError so that pydantic validators raising it report the
    failing field location.
    """

    def __init__(self, message: str, locations: Optional[list[str]] = None):
        self.locations = locations or []
        super().__init__(message)


class DataError(BlueprintError):
    """JSON is not a recognized document, or failed the validation pass."""
