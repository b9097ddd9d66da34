"""A TLV message: a length header, an event type and up to 256 fields."""

from __future__ import annotations

import struct

from rapidtlv.errors import ErrorCode, RapidTlvError
from rapidtlv.field import HEADER_SIZE, Field, _check_type

_LENGTH = struct.Struct(">I")
_MESSAGE_HEADER_SIZE = _LENGTH.size + 1


class Message:
    """A message holding at most one field per one-byte field type.

    The encoded form is cached; adding or removing a field clears it. A
    parsed message keeps the bytes it was parsed from as its encoding.
    """

    def __init__(self, event_type: int) -> None:
        if not 0 <= event_type <= 0xFF:
            raise ValueError(f"event type must fit in one byte, got {event_type}")
        self.event_type = event_type
        self._fields: dict[int, Field] = {}
        self._raw = b""

    def __repr__(self) -> str:
        return f"Message({self.event_type:#04x}, {self.fields()!r})"

    @classmethod
    def parse(cls, raw: bytes) -> Message:
        """Decode a message; raise :class:`RapidTlvError` if it is malformed."""
        raw = bytes(raw)
        if len(raw) < _MESSAGE_HEADER_SIZE:
            raise RapidTlvError(ErrorCode.MALFORMED, "Not enough data for TLV header")

        msg = cls(raw[4])
        offset = _MESSAGE_HEADER_SIZE
        while offset + HEADER_SIZE <= len(raw):
            field_type = raw[offset]
            (length,) = _LENGTH.unpack_from(raw, offset + 1)
            offset += HEADER_SIZE
            if offset + length > len(raw):
                raise RapidTlvError(
                    ErrorCode.MALFORMED, "Not enough data for field value"
                )
            msg._fields[field_type] = Field(field_type, raw[offset : offset + length])
            offset += length

        msg._raw = raw
        return msg

    def get_field(self, field_type: int) -> Field | None:
        """Return the field of the given type, or None if it is absent."""
        return self._fields.get(_check_type(field_type))

    def add_field(self, field_type: int, value: bytes) -> None:
        """Set the field of the given type, replacing any previous one."""
        self._fields[field_type] = Field(field_type, value)
        self._raw = b""

    def remove_field(self, field_type: int) -> bool:
        """Remove the field of the given type; always returns True."""
        self._fields.pop(_check_type(field_type), None)
        self._raw = b""
        return True

    def fields(self) -> list[Field]:
        """Return the present fields in ascending order of type."""
        return [self._fields[key] for key in sorted(self._fields)]

    def encode(self) -> bytes:
        """Return the wire form, building it only when it is not cached."""
        if not self._raw:
            fields = self.fields()
            total = _MESSAGE_HEADER_SIZE + sum(len(field) for field in fields)
            parts = [_LENGTH.pack(total), bytes([self.event_type])]
            parts.extend(field.encode() for field in fields)
            self._raw = b"".join(parts)
        return self._raw