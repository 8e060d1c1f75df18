"""
Schedule IR: train automation schedules stored in a blueprint.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import Field, PositiveInt

from .models_common import WireModel


class ConditionType(str, Enum):
    """Wait condition kind (snake_case on the wire)."""
    TIME = "time"
    INACTIVITY = "inactivity"
    FULL = "full"
    EMPTY = "empty"
    ITEM_COUNT = "item_count"
    CIRCUIT = "circuit"
    ROBOTS_INACTIVE = "robots_inactive"
    FLUID_COUNT = "fluid_count"
    PASSENGER_PRESENT = "passenger_present"
    PASSENGER_NOT_PRESENT = "passenger_not_present"


class CompareType(str, Enum):
    """How a wait condition combines with the one before it."""
    AND = "and"
    OR = "or"


class WaitCondition(WireModel):
    """One clause of a stop's wait condition list."""
    condition_type: ConditionType = Field(alias="type")
    compare_type: CompareType
    # Only for "time" and "inactivity"
    ticks: Optional[int] = Field(default=None, ge=0)
    # Circuit condition payload for "item_count", "circuit" and "fluid_count".
    # Its shape is undocumented, so it is kept as an ordered bag of values.
    condition: Optional[dict[str, Any]] = None


class ScheduleRecord(WireModel):
    """A stop in a train schedule."""
    station: str
    wait_conditions: Optional[list[WaitCondition]] = None


class Schedule(WireModel):
    """A schedule shared by the listed locomotives."""
    schedule: list[ScheduleRecord]
    locomotives: list[PositiveInt]
