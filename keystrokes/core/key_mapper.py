"""ASCII text → Windows virtual key code sequences (US QWERTY).

Letters and digits map arithmetically onto their virtual key codes; the
remaining printable punctuation comes from ``CHAR_TO_KEY``. Shift is
emitted once when a run of shifted characters starts and once when it
ends, so ``"ABC"`` becomes ``[VK_SHIFT, A, B, C, VK_SHIFT]``.

Usage:
    from keystrokes import to_keystrokes
    to_keystrokes("Hi!")  # [0x10, 0x48, 0x10, 0x49, 0x10, 0x31, 0x10]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple, Union

from keystrokes.core import vk
from keystrokes.core.errors import KeyMappingError, KeyNotFoundError, OutOfRangeError
from keystrokes.log import TRACE

logger = logging.getLogger(__name__)

Text = Union[str, bytes, bytearray]

# Printable ASCII is [ASCII_MIN, ASCII_MAX)
ASCII_MIN: int = 0x20
ASCII_MAX: int = 0x7F

UPPERCASE_A: int = 0x41
UPPERCASE_Z: int = 0x5A
LOWERCASE_A: int = 0x61
LOWERCASE_Z: int = 0x7A
DIGIT_0: int = 0x30
DIGIT_9: int = 0x39

# 'a' - 'A'
CASE_OFFSET: int = 0x20


class KeyEntry(NamedTuple):
    code: int
    requires_shift: bool


def _key(code: int, shift: bool = False) -> KeyEntry:
    return KeyEntry(code, shift)


CHAR_TO_KEY: Mapping[int, KeyEntry] = MappingProxyType({
    # Shift not required
    ord("*"): _key(vk.VK_MULTIPLY),
    ord("-"): _key(vk.VK_SUBTRACT),
    ord("="): _key(vk.VK_OEM_PLUS),
    ord("."): _key(vk.VK_OEM_PERIOD),
    ord("/"): _key(vk.VK_DIVIDE),
    ord(" "): _key(vk.VK_SPACE),
    ord(";"): _key(vk.VK_OEM_1),
    ord("`"): _key(vk.VK_OEM_3),
    ord("["): _key(vk.VK_OEM_4),
    ord("\\"): _key(vk.VK_OEM_5),
    ord("]"): _key(vk.VK_OEM_6),
    ord("'"): _key(vk.VK_OEM_7),
    ord(","): _key(vk.VK_OEM_COMMA),
    # Shift required; digit-row codes equal the ASCII digits
    ord("!"): _key(0x31, shift=True),
    ord("@"): _key(0x32, shift=True),
    ord("#"): _key(0x33, shift=True),
    ord("$"): _key(0x34, shift=True),
    ord("%"): _key(0x35, shift=True),
    ord("^"): _key(0x36, shift=True),
    ord("&"): _key(0x37, shift=True),
    ord("("): _key(0x39, shift=True),
    ord(")"): _key(0x30, shift=True),
    ord("+"): _key(vk.VK_OEM_PLUS, shift=True),
    ord(":"): _key(vk.VK_OEM_1, shift=True),
    ord("?"): _key(vk.VK_OEM_2, shift=True),
    ord("~"): _key(vk.VK_OEM_3, shift=True),
    ord("{"): _key(vk.VK_OEM_4, shift=True),
    ord("|"): _key(vk.VK_OEM_5, shift=True),
    ord("}"): _key(vk.VK_OEM_6, shift=True),
    ord('"'): _key(vk.VK_OEM_7, shift=True),
    ord("<"): _key(vk.VK_OEM_COMMA, shift=True),
    ord(">"): _key(vk.VK_OEM_PERIOD, shift=True),
    ord("_"): _key(vk.VK_OEM_MINUS, shift=True),
})


def _to_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"Expected str, bytes or bytearray, got {type(text).__name__}")


def bracket_shift(entries: Iterable[KeyEntry]) -> list[int]:
    """Flatten classified entries into key codes with Shift bracketing.

    One ``VK_SHIFT`` is emitted at every change of shift state, plus a
    trailing one if the sequence ends shifted.
    """
    keystrokes: list[int] = []
    is_shifting = False
    for code, requires_shift in entries:
        if requires_shift != is_shifting:
            is_shifting = requires_shift
            keystrokes.append(vk.VK_SHIFT)
        keystrokes.append(code)
    if is_shifting:
        keystrokes.append(vk.VK_SHIFT)
    return keystrokes


class KeyMapper:
    """Converts ASCII text to virtual key codes.

    Holds no per-call state; a single instance may be shared between
    threads. *table* replaces the punctuation table and defaults to
    ``CHAR_TO_KEY``.
    """

    def __init__(self, table: Mapping[int, KeyEntry] | None = None):
        if table is None:
            self._table = CHAR_TO_KEY
        else:
            self._table = MappingProxyType({b: KeyEntry(*entry) for b, entry in table.items()})

    @property
    def table(self) -> Mapping[int, KeyEntry]:
        return self._table

    def classify(self, byte: int, position: int | None = None) -> KeyEntry:
        """Return ``(code, requires_shift)`` for a single byte.

        Raises:
            OutOfRangeError: byte outside [32, 127).
            KeyNotFoundError: printable byte with no table entry.
        """
        if byte >= ASCII_MAX or byte < ASCII_MIN:
            raise OutOfRangeError(byte, position)
        if UPPERCASE_A <= byte <= UPPERCASE_Z:
            return KeyEntry(byte, True)
        if LOWERCASE_A <= byte <= LOWERCASE_Z:
            return KeyEntry(byte - CASE_OFFSET, False)
        if DIGIT_0 <= byte <= DIGIT_9:
            return KeyEntry(byte, False)
        entry = self._table.get(byte)
        if entry is None:
            raise KeyNotFoundError(byte, position)
        return entry

    def convert(self, text: Text) -> list[int]:
        """Convert *text* to virtual key codes.

        The whole input is classified before anything is emitted, so a
        failure never yields partial output.
        """
        data = _to_bytes(text)
        try:
            entries = [self.classify(byte, pos) for pos, byte in enumerate(data)]
        except KeyMappingError as e:
            logger.debug("Conversion failed (%s): %s", e.error_code.value, e)
            raise
        keystrokes = bracket_shift(entries)
        if logger.isEnabledFor(TRACE):
            logger.trace("Converted %r -> %s", text, " ".join(vk.describe(keystrokes)))
        return keystrokes

    def convert_into(self, text: Text, keystrokes: list[int]) -> list[int]:
        """Append the key codes for *text* to *keystrokes* and return it.

        *keystrokes* is left unchanged if conversion fails.
        """
        keystrokes.extend(self.convert(text))
        return keystrokes


_default_mapper = KeyMapper()


def classify(byte: int) -> KeyEntry:
    return _default_mapper.classify(byte)


def to_keystrokes(text: Text) -> list[int]:
    """Convert *text* using the built-in QWERTY table."""
    return _default_mapper.convert(text)


def to_keystrokes_into(text: Text, keystrokes: list[int]) -> list[int]:
    return _default_mapper.convert_into(text, keystrokes)
