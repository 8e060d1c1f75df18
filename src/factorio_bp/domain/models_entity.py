"""
Entity IR: placed structures and their prototype-specific settings.

Only the fields that apply to an entity's prototype are present on any
given instance; everything else stays None and is omitted on render.
Entity-to-entity references (neighbours, wire targets) are entity numbers,
resolved by lookup within the same blueprint.
"""
import re
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field, PositiveInt

from .models_common import (
    Color,
    FilterMode,
    InfinityFilterMode,
    IoPriority,
    IoType,
    Position,
    SignalId,
    WireModel,
)

ITEM_STACK_INDEX_MAX = 0xFFFF

CONNECTION_KEY_RE = re.compile(r"[1-9][0-9]*")


def _canonical_connection_key(value: Any) -> Any:
    # Keys render back as str(int), so only canonical decimal text parses
    if isinstance(value, str) and not CONNECTION_KEY_RE.fullmatch(value):
        raise ValueError(f"connection key {value!r} is not a positive decimal integer")
    return value


ConnectionKey = Annotated[PositiveInt, BeforeValidator(_canonical_connection_key)]


# ============================================================================
# CIRCUIT / COPPER WIRING
# ============================================================================

class ConnectionData(WireModel):
    """A single wire link to a connection point on another entity."""
    entity_id: int = Field(gt=0)
    circuit_id: Optional[int] = Field(default=None, gt=0)


class ConnectionPoint(WireModel):
    """Wire attachment point; red and green links are kept apart."""
    red: Optional[list[ConnectionData]] = None
    green: Optional[list[ConnectionData]] = None


class Connection(WireModel):
    """Both connection points of an entity, keyed "1" and "2" on the wire."""
    first: Optional[ConnectionPoint] = Field(default=None, alias="1")
    second: Optional[ConnectionPoint] = Field(default=None, alias="2")


# ============================================================================
# INVENTORIES AND FILTERS
# ============================================================================

class ItemFilter(WireModel):
    """Item filter slot in a container, inserter or loader."""
    name: str
    index: int = Field(gt=0)


class Inventory(WireModel):
    """Cargo wagon inventory configuration."""
    filters: Optional[list[ItemFilter]] = None
    bar: Optional[int] = Field(default=None, ge=0, le=ITEM_STACK_INDEX_MAX)


class InfinityFilter(WireModel):
    name: str
    count: int = Field(ge=0)
    mode: InfinityFilterMode
    index: int = Field(gt=0)


class InfinitySettings(WireModel):
    """Settings on an infinity chest."""
    remove_unfiltered_items: bool
    filters: Optional[list[InfinityFilter]] = None


class LogisticFilter(WireModel):
    """Request slot of a logistic container. Count is 0 for storage chests."""
    name: str
    index: int = Field(gt=0)
    count: int = Field(ge=0)


# ============================================================================
# PROGRAMMABLE SPEAKER
# ============================================================================

class SpeakerParameter(WireModel):
    playback_volume: float
    playback_globally: bool
    allow_polyphony: bool


class SpeakerAlertParameter(WireModel):
    show_alert: bool
    show_on_map: bool
    icon_signal_id: Optional[SignalId] = None
    alert_message: Optional[str] = None


# ============================================================================
# ENTITY
# ============================================================================

class Entity(WireModel):
    """A placed structure in a blueprint, e.g. an assembling machine."""
    entity_number: int = Field(gt=0)
    name: str
    position: Position

    direction: Optional[int] = Field(default=None, ge=0)
    # Rolling stock only, 0 to 1
    orientation: Optional[float] = None

    connections: Optional[dict[ConnectionKey, Connection]] = None
    neighbors: Optional[list[PositiveInt]] = Field(default=None, alias="neighbours")

    # Item request proxy: item name -> count
    items: Optional[dict[str, int]] = None
    recipe: Optional[str] = None
    bar: Optional[int] = Field(default=None, ge=0, le=ITEM_STACK_INDEX_MAX)
    inventory: Optional[Inventory] = None
    infinity_settings: Optional[InfinitySettings] = None

    # Underground belts and loaders
    io_type: Optional[IoType] = Field(default=None, alias="type")

    # Splitters
    input_priority: Optional[IoPriority] = None
    output_priority: Optional[IoPriority] = None
    filter: Optional[str] = None

    # Filter inserters and loaders
    filters: Optional[list[ItemFilter]] = None
    filter_mode: Optional[FilterMode] = None
    override_stack_size: Optional[int] = Field(default=None, ge=0, le=255)
    drop_position: Optional[Position] = None
    pickup_position: Optional[Position] = None

    # Logistic containers
    request_filters: Optional[list[LogisticFilter]] = None
    request_from_buffers: Optional[bool] = None

    parameters: Optional[SpeakerParameter] = None
    alert_parameters: Optional[SpeakerAlertParameter] = None

    auto_launch: Optional[bool] = None
    variation: Optional[int] = Field(default=None, ge=0, le=255)
    color: Optional[Color] = None
    station: Optional[str] = None

    def connection_targets(self) -> list[int]:
        """Entity numbers reached by this entity's circuit wires."""
        targets = []
        for connection in (self.connections or {}).values():
            for point in (connection.first, connection.second):
                if point is None:
                    continue
                for link in (point.red or []) + (point.green or []):
                    targets.append(link.entity_id)
        return targets
