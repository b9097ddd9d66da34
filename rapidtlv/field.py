"""A single type-length-value field."""

from __future__ import annotations

import struct

_HEADER = struct.Struct(">BI")
HEADER_SIZE = _HEADER.size


def _check_type(field_type: int) -> int:
    if not 0 <= field_type <= 0xFF:
        raise ValueError(f"field type must fit in one byte, got {field_type}")
    return field_type


class Field:
    """A field: a one-byte type and an arbitrary byte value."""

    __slots__ = ("field_type", "value")

    def __init__(self, field_type: int, value: bytes) -> None:
        self.field_type = _check_type(field_type)
        self.value = bytes(value)

    def __len__(self) -> int:
        """Size of the encoded field: type byte, 4-byte length and value."""
        return HEADER_SIZE + len(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self.field_type == other.field_type and self.value == other.value

    def __repr__(self) -> str:
        return f"Field({self.field_type:#04x}, {self.value!r})"

    def encode(self) -> bytes:
        """Return the wire form: type, big-endian u32 length, value."""
        return _HEADER.pack(self.field_type, len(self.value)) + self.value