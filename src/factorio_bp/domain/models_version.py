"""
Map version: four 16-bit components packed into one 64-bit wire integer.

The 8 bytes of the wire integer are taken in big-endian order and each
consecutive pair is read as a little-endian unsigned 16-bit value.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from ..errors import SchemaError

U16_MAX = 0xFFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

VERSION_FIELDS = ("major", "minor", "patch", "developer")


def unpack_version(value: int) -> tuple[int, int, int, int]:
    """
    Split a wire version integer into (major, minor, patch, developer).

    Raises:
        SchemaError: If value is not an unsigned 64-bit integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"version must be an integer, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise SchemaError(f"version {value} does not fit in an unsigned 64-bit integer")

    raw = value.to_bytes(8, "big")
    major, minor, patch, developer = (
        int.from_bytes(raw[i:i + 2], "little") for i in range(0, 8, 2)
    )
    return major, minor, patch, developer


def pack_version(major: int, minor: int, patch: int, developer: int) -> int:
    """
    Inverse of unpack_version.

    Raises:
        SchemaError: If any component is outside 0..65535
    """
    raw = b""
    for name, component in zip(VERSION_FIELDS, (major, minor, patch, developer)):
        if not 0 <= component <= U16_MAX:
            raise SchemaError(f"version {name} {component} is outside 0..{U16_MAX}")
        raw += component.to_bytes(2, "little")
    return int.from_bytes(raw, "big")


class Version(BaseModel):
    """Game version a blueprint was saved with.

    Validates from the wire integer (or the four named components) and
    serializes back to the wire integer.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(ge=0, le=U16_MAX)
    minor: int = Field(ge=0, le=U16_MAX)
    patch: int = Field(ge=0, le=U16_MAX)
    developer: int = Field(ge=0, le=U16_MAX)

    @model_validator(mode="before")
    @classmethod
    def parse_wire_int(cls, data: Any) -> Any:
        if isinstance(data, int):
            return dict(zip(VERSION_FIELDS, unpack_version(data)))
        return data

    @model_serializer
    def serialize_wire_int(self) -> int:
        return self.to_int()

    def to_int(self) -> int:
        return pack_version(self.major, self.minor, self.patch, self.developer)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.major, self.minor, self.patch, self.developer

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.developer}"
