"""
Shared building blocks: positions, colors, signals and the wire enums.

Enum values are the literal wire strings; each enum keeps the case
convention the game uses for it.
"""
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class WireModel(BaseModel):
    """Base for every blueprint structure.

    Frozen once parsed. Fields the schema does not name are kept as extras
    so re-encoding never drops them, null values included. Aliases carry
    the wire names; code may also build models by field name, while wire
    text is parsed by alias only (see codec.document).
    """
    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        validate_by_name=True,
        validate_by_alias=True,
    )

    @model_serializer(mode="wrap")
    def drop_absent_fields(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        # Declared fields that are None were absent on the wire; extras are kept as-is
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is None:
                key = field.alias if info.by_alias and field.alias else name
                data.pop(key, None)
        return data


# ============================================================================
# ENUMS
# ============================================================================

class SignalType(str, Enum):
    """Kind of a circuit signal (lowercase on the wire)."""
    ITEM = "item"
    FLUID = "fluid"
    VIRTUAL = "virtual"


class IoType(str, Enum):
    """Underground belt / loader direction (lowercase on the wire)."""
    INPUT = "input"
    OUTPUT = "output"


class IoPriority(str, Enum):
    """Splitter input/output priority (lowercase on the wire)."""
    LEFT = "left"
    RIGHT = "right"


class FilterMode(str, Enum):
    """Filter inserter mode (lowercase on the wire)."""
    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


class InfinityFilterMode(str, Enum):
    """Infinity container filter mode (kebab-case on the wire)."""
    AT_LEAST = "at-least"
    AT_MOST = "at-most"
    EXACTLY = "exactly"


# ============================================================================
# VALUE TYPES
# ============================================================================

class Position(WireModel):
    """Position within a blueprint; 0 is the center."""
    x: float
    y: float


class Color(WireModel):
    """RGBA color, each channel 0 to 1."""
    r: float
    g: float
    b: float
    a: Optional[float] = None


class SignalId(WireModel):
    """A circuit signal reference."""
    name: str
    signal_type: SignalType = Field(alias="type")


class Icon(WireModel):
    """Blueprint icon slot (1-based index)."""
    index: int = Field(gt=0)
    signal: SignalId


class Tile(WireModel):
    """Floor tile, e.g. concrete or landfill."""
    name: str
    position: Position
