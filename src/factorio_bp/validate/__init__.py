"""
Validation package for cross-field document checks.
"""
from .checks import (
    ValidationResult,
    describe_document,
    ensure_valid,
    format_validation,
    validate_document,
)

__all__ = [
    "ValidationResult",
    "validate_document",
    "describe_document",
    "format_validation",
    "ensure_valid",
]
