"""
Document IR: blueprints and blueprint books.

A decoded exchange string holds exactly one of these, under the wire key
"blueprint" or "blueprint_book".
"""
from typing import Optional, Union

from pydantic import Field

from .models_common import Color, Icon, Tile, WireModel
from .models_entity import Entity
from .models_schedule import Schedule
from .models_version import Version


class Blueprint(WireModel):
    """A single blueprint."""
    # "blueprint" in vanilla
    item: Optional[str] = None
    label: Optional[str] = None
    label_color: Optional[Color] = None
    entities: Optional[list[Entity]] = None
    tiles: Optional[list[Tile]] = None
    icons: Optional[list[Icon]] = None
    schedules: Optional[list[Schedule]] = None
    version: Version


class BookEntry(WireModel):
    """A blueprint together with its slot index in the book."""
    index: int = Field(ge=0)
    blueprint: Blueprint


class BlueprintBook(WireModel):
    """A book of blueprints with one of them selected."""
    # "blueprint-book" in vanilla
    item: Optional[str] = None
    label: Optional[str] = None
    label_color: Optional[Color] = None
    blueprints: Optional[list[BookEntry]] = None
    active_index: int = Field(ge=0)
    version: Version


Document = Union[Blueprint, BlueprintBook]

# Wire key under which each document type is stored
DOCUMENT_KEY = {
    Blueprint: "blueprint",
    BlueprintBook: "blueprint_book",
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def entity_map(blueprint: Blueprint) -> dict[int, Entity]:
    """Build entity_number -> Entity lookup map."""
    return {entity.entity_number: entity for entity in blueprint.entities or []}


def book_blueprints(book: BlueprintBook) -> list[Blueprint]:
    """Blueprints of a book in slot order."""
    return [entry.blueprint for entry in book.blueprints or []]


def active_blueprint(book: BlueprintBook) -> Optional[Blueprint]:
    """The blueprint selected by active_index, or None if it is out of range."""
    entries = book.blueprints or []
    if 0 <= book.active_index < len(entries):
        return entries[book.active_index].blueprint
    return None
