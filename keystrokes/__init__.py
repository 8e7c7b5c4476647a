"""keystrokes: ASCII text to Windows virtual key code sequences."""

from keystrokes.__version__ import __version__
from keystrokes.core.errors import ErrorCode, KeyMappingError, KeyNotFoundError, OutOfRangeError
from keystrokes.core.key_mapper import (
    CHAR_TO_KEY,
    KeyEntry,
    KeyMapper,
    bracket_shift,
    classify,
    to_keystrokes,
    to_keystrokes_into,
)
from keystrokes.core.vk import VK_SHIFT, describe
from keystrokes.log import configure_logging

__all__ = [
    "__version__",
    "CHAR_TO_KEY",
    "ErrorCode",
    "KeyEntry",
    "KeyMapper",
    "KeyMappingError",
    "KeyNotFoundError",
    "OutOfRangeError",
    "VK_SHIFT",
    "bracket_shift",
    "classify",
    "configure_logging",
    "describe",
    "to_keystrokes",
    "to_keystrokes_into",
]
