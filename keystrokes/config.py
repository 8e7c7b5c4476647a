"""Logging configuration for keystrokes.

The only settings are the ones :func:`keystrokes.log.setup_logging`
takes. They live in a JSON object at ``~/.config/keystrokes/config.json``
(or an explicit path); ``#`` and ``//`` line comments and trailing commas
are tolerated.

``validate_config(conf)`` normalizes a dict and raises ``ValueError`` on
the first bad value. ``load_config(path)`` never raises: an unreadable,
malformed or invalid file leaves the defaults in place.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Callable

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/keystrokes/config.json'

DEFAULT_CONFIG: dict = {
    'debug': False,
    'trace': False,
    'log_file': None,
    'log_max_bytes': 10 * 1024 * 1024,
    'log_backup_count': 5,
}


# ------------------------------------------------------------------
# Field checks
# ------------------------------------------------------------------

def _flag(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{key}' flag: must be boolean")
    return value


def _optional_path(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid '{key}': must be null or a non-empty string")
    return value


def _int_at_least(minimum: int) -> Callable[[str, Any], int]:
    def check(key: str, value: Any) -> int:
        # bool is an int subclass; "true" is never a size
        if isinstance(value, bool):
            raise ValueError(f"Invalid '{key}': {value}")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid '{key}': {value}")
        if number < minimum:
            raise ValueError(f"Invalid '{key}': must be >= {minimum}")
        return number
    return check


_FIELDS: dict[str, Callable[[str, Any], Any]] = {
    'debug': _flag,
    'trace': _flag,
    'log_file': _optional_path,
    'log_max_bytes': _int_at_least(1),
    'log_backup_count': _int_at_least(0),
}


def validate_config(conf: dict | None) -> dict:
    """Return *conf* merged over the defaults, every value normalized.

    Unknown keys are dropped. Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}
    if not isinstance(conf, dict):
        raise ValueError("Invalid config: top level must be an object")

    out = dict(DEFAULT_CONFIG)
    for key, check in _FIELDS.items():
        if key in conf:
            out[key] = check(key, conf[key])
    return out


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove whole-line ``#``/``//`` comments and trailing commas."""
    s = re.sub(r"^[ \t]*(#|//).*$", "", s, flags=re.MULTILINE)
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _read_config_file(path: str) -> dict:
    """Parse *path* into a dict. Raises ``OSError`` or ``ValueError``."""
    with open(path, 'r', encoding='utf-8') as f:
        raw = f.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # JSONDecodeError is a ValueError, so a second failure propagates as one
        data = json.loads(_sanitize_json_text(raw))
    if not isinstance(data, dict):
        raise ValueError(f"top level must be an object, got {type(data).__name__}")
    return data


def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Return the effective configuration (always has every default key).

    *config_path* replaces the user config location; a missing file means
    defaults. Problems with the file are logged as warnings when *debug*
    is set and otherwise ignored.
    """
    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if not os.path.exists(path):
        return dict(DEFAULT_CONFIG)

    try:
        config = validate_config(_read_config_file(path))
    except (OSError, ValueError) as exc:
        if debug:
            logger.warning("Ignoring config %s: %s", path, exc)
        return dict(DEFAULT_CONFIG)

    logger.debug("Loaded config from %s", path)
    return config
