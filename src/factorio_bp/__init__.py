"""
Factorio blueprint exchange string codec.

Decodes exchange strings into typed Blueprint / BlueprintBook models and
encodes them back.
"""
from .codec import (
    decode,
    encode,
    parse_document,
    render_document,
    decode_document,
    encode_document,
)
from .domain import Blueprint, BlueprintBook, Version, pack_version, unpack_version
from .errors import BlueprintError, FormatError, SchemaError, DataError, IoError
from .validate import ValidationResult, validate_document

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "parse_document",
    "render_document",
    "decode_document",
    "encode_document",
    "Blueprint",
    "BlueprintBook",
    "Version",
    "pack_version",
    "unpack_version",
    "BlueprintError",
    "FormatError",
    "SchemaError",
    "DataError",
    "IoError",
    "ValidationResult",
    "validate_document",
]
