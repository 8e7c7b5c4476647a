"""Errors raised while mapping characters to virtual key codes."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    NOT_FOUND = "not_found"
    OUT_OF_RANGE = "out_of_range"


class KeyMappingError(ValueError):
    """A byte of the input could not be mapped to a key.

    ``byte`` is the offending byte of the encoded input. For non-ASCII text
    it is only the first byte of a multi-byte UTF-8 sequence, so treat it as
    a hint rather than the original character.
    """

    error_code: ErrorCode

    def __init__(self, byte: int, position: int | None = None):
        self.byte = byte
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{self._describe()}: 0x{byte:02X}{where}")

    def _describe(self) -> str:
        return "Cannot map byte"


class OutOfRangeError(KeyMappingError):
    """Byte outside the printable 7-bit ASCII range [32, 127)."""

    error_code = ErrorCode.OUT_OF_RANGE

    def _describe(self) -> str:
        return "Byte outside printable ASCII range"


class KeyNotFoundError(KeyMappingError):
    """Printable byte with no entry in the key table."""

    error_code = ErrorCode.NOT_FOUND

    def _describe(self) -> str:
        return "No key mapping for byte"
