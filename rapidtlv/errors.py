"""Error codes and the exception raised by the TLV codec."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric error codes grouped by the area they belong to."""

    # Protocol errors
    INVALID_EVENT_TYPE = 0x01
    MALFORMED = 0x02
    INCOMPLETE_MESSAGE = 0x03
    UNSUPPORTED_VERSION = 0x04

    # Application errors
    KEY_NOT_FOUND = 0x11
    TTL_EXPIRED = 0x12
    VALUE_TOO_LARGE = 0x13
    DISK_WRITE_FAILED = 0x14

    # Cluster/state errors
    READONLY_MODE = 0x21
    MASTER_UNAVAILABLE = 0x22
    SYNC_DENIED = 0x23

    # System errors
    INTERNAL_SERVER_ERROR = 0x31
    CONFIG_INVALID = 0x32

    # Client errors
    CONNECTION_FAILED = 0x41
    SEND_FAILED = 0x42
    NOT_CONNECTED = 0x43

    READ_FAILED = 0x51
    WRITE_FAILED = 0x52


class RapidTlvError(Exception):
    """An error carrying an :class:`ErrorCode` and a human-readable message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message

    def __repr__(self) -> str:
        return f"RapidTlvError({self.code.name}, {self.message!r})"