"""
Domain models for decoded blueprint documents.
"""
from .models_version import Version, pack_version, unpack_version
from .models_common import (
    WireModel,
    SignalType,
    IoType,
    IoPriority,
    FilterMode,
    InfinityFilterMode,
    Position,
    Color,
    SignalId,
    Icon,
    Tile,
)
from .models_entity import (
    ConnectionData,
    ConnectionPoint,
    Connection,
    ItemFilter,
    Inventory,
    InfinityFilter,
    InfinitySettings,
    LogisticFilter,
    SpeakerParameter,
    SpeakerAlertParameter,
    Entity,
)
from .models_schedule import (
    ConditionType,
    CompareType,
    WaitCondition,
    ScheduleRecord,
    Schedule,
)
from .models_blueprint import (
    Blueprint,
    BookEntry,
    BlueprintBook,
    Document,
    DOCUMENT_KEY,
    entity_map,
    book_blueprints,
    active_blueprint,
)

__all__ = [
    "Version",
    "pack_version",
    "unpack_version",
    "WireModel",
    "SignalType",
    "IoType",
    "IoPriority",
    "FilterMode",
    "InfinityFilterMode",
    "Position",
    "Color",
    "SignalId",
    "Icon",
    "Tile",
    "ConnectionData",
    "ConnectionPoint",
    "Connection",
    "ItemFilter",
    "Inventory",
    "InfinityFilter",
    "InfinitySettings",
    "LogisticFilter",
    "SpeakerParameter",
    "SpeakerAlertParameter",
    "Entity",
    "ConditionType",
    "CompareType",
    "WaitCondition",
    "ScheduleRecord",
    "Schedule",
    "Blueprint",
    "BookEntry",
    "BlueprintBook",
    "Document",
    "DOCUMENT_KEY",
    "entity_map",
    "book_blueprints",
    "active_blueprint",
]
