"""
Document validation layered on top of schema parsing.

Parsing only guarantees structural conformance. These checks cover the
cross-field invariants: book active_index bounds, unique entity numbers and
icon slots, and entity references that resolve within their blueprint.
"""
from dataclasses import dataclass, field
from typing import Union

from ..domain import DOCUMENT_KEY, Blueprint, BlueprintBook, book_blueprints, entity_map
from ..errors import DataError


@dataclass
class ValidationResult:
    """Result of document validation."""
    ok: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # Document variant, label and size, e.g. "blueprint 'Belt test' (5 entities, ...)"
    subject: str = "document"


def describe_document(doc: Union[Blueprint, BlueprintBook]) -> str:
    """One-line description naming the document variant, label and size."""
    label = f" '{doc.label}'" if doc.label else ""
    if isinstance(doc, BlueprintBook):
        size = f"{len(book_blueprints(doc))} blueprints"
    else:
        size = f"{len(doc.entities or [])} entities"
    return f"{DOCUMENT_KEY[type(doc)]}{label} ({size}, version {doc.version})"


def _check_blueprint(bp: Blueprint, where: str, errors: list[str], warnings: list[str]) -> None:
    # ===================================================================
    # ENTITY NUMBERS
    # ===================================================================
    seen = set()
    for i, entity in enumerate(bp.entities or []):
        if entity.entity_number in seen:
            errors.append(
                f"{where}.entities[{i}]: entity_number {entity.entity_number} "
                f"duplicates an earlier entity"
            )
        seen.add(entity.entity_number)

    known = set(entity_map(bp))

    # ===================================================================
    # ENTITY REFERENCES
    # ===================================================================
    for i, entity in enumerate(bp.entities or []):
        for target in entity.neighbors or []:
            if target not in known:
                warnings.append(
                    f"{where}.entities[{i}]: neighbour {target} of '{entity.name}' does not exist"
                )
        for target in entity.connection_targets():
            if target not in known:
                warnings.append(
                    f"{where}.entities[{i}]: wire target {target} of '{entity.name}' does not exist"
                )

    for i, schedule in enumerate(bp.schedules or []):
        for loco in schedule.locomotives:
            if loco not in known:
                warnings.append(f"{where}.schedules[{i}]: locomotive {loco} does not exist")

    # ===================================================================
    # ICONS
    # ===================================================================
    icon_slots = set()
    for i, icon in enumerate(bp.icons or []):
        if icon.index in icon_slots:
            errors.append(f"{where}.icons[{i}]: icon index {icon.index} duplicates an earlier icon")
        icon_slots.add(icon.index)


def validate_document(doc: Union[Blueprint, BlueprintBook]) -> ValidationResult:
    """
    Validate a parsed document.

    Args:
        doc: Blueprint or BlueprintBook from parse_document()

    Returns:
        ValidationResult with errors and warnings
    """
    errors = []
    warnings = []

    if isinstance(doc, BlueprintBook):
        count = len(doc.blueprints or [])

        if not 0 <= doc.active_index < count:
            errors.append(
                f"blueprint_book: active_index {doc.active_index} is outside [0, {count})"
            )

        slots = set()
        for i, entry in enumerate(doc.blueprints or []):
            if entry.index in slots:
                errors.append(
                    f"blueprint_book.blueprints[{i}]: index {entry.index} duplicates an earlier entry"
                )
            slots.add(entry.index)

        for i, blueprint in enumerate(book_blueprints(doc)):
            _check_blueprint(blueprint, f"blueprint_book.blueprints[{i}]", errors, warnings)
    else:
        _check_blueprint(doc, "blueprint", errors, warnings)

    return ValidationResult(
        ok=not errors,
        errors=errors,
        warnings=warnings,
        subject=describe_document(doc),
    )


def format_validation(result: ValidationResult) -> str:
    """Summary block for the validate command and DataError messages."""
    if result.ok:
        lines = [f"✓ {result.subject}: validation PASSED"]
    else:
        lines = [f"✗ {result.subject}: validation FAILED"]

    for title, items in (("Errors", result.errors), ("Warnings", result.warnings)):
        if items:
            lines.append(f"\n{title} ({len(items)}):")
            lines.extend(f"  - {item}" for item in items)

    if not result.errors and not result.warnings:
        lines.append("  No issues found")

    return "\n".join(lines)


def ensure_valid(doc: Union[Blueprint, BlueprintBook]) -> ValidationResult:
    """
    Validate and raise on errors. Warnings are returned, not raised.

    Raises:
        DataError: If validation fails (includes formatted summary)
    """
    result = validate_document(doc)
    if not result.ok:
        raise DataError(f"Document validation failed:\n{format_validation(result)}")
    return result
