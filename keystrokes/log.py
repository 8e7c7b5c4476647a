"""Logging for keystrokes.

Levels (ascending):
    TRACE =  5  every conversion with its VK_* names
    DEBUG = 10  conversion failures, config problems
    INFO  = 20  default

Usage:
    import keystrokes.log  # must be imported once before any logger is used
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from keystrokes.config import load_config

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "keystrokes"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Patch Logger class once at import time
logging.Logger.trace = _trace  # type: ignore[attr-defined]


def setup_logging(
    debug: bool = False,
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    trace: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``keystrokes`` logger.

    Args:
        debug:        DEBUG on the console instead of WARNING.
        log_file:     Optional path of a rotating log file (always DEBUG).
        max_bytes:    Rotate the log file at this size.
        backup_count: Number of rotated files to keep.
        trace:        Lower the logger to TRACE (per-conversion records).

    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if trace:
        logger.setLevel(TRACE)
    else:
        logger.setLevel(logging.DEBUG if (debug or log_file) else logging.INFO)

    for handler in list(logger.handlers):
        if getattr(handler, "_keystrokes_handler", False):
            logger.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)
        else:
            file_handler.setLevel(TRACE if trace else logging.DEBUG)
            file_handler.setFormatter(fmt)
            file_handler._keystrokes_handler = True  # type: ignore[attr-defined]
            logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    console_handler._keystrokes_handler = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    return logger


def setup_logging_from_config(conf: dict) -> logging.Logger:
    """Apply a config dict as returned by :func:`keystrokes.config.load_config`."""
    return setup_logging(
        debug=conf.get("debug", False),
        log_file=conf.get("log_file"),
        max_bytes=conf.get("log_max_bytes", 10 * 1024 * 1024),
        backup_count=conf.get("log_backup_count", 5),
        trace=conf.get("trace", False),
    )


def configure_logging(config_path: str | None = None, debug: bool = False) -> logging.Logger:
    """Load the config file (see :mod:`keystrokes.config`) and apply it."""
    return setup_logging_from_config(load_config(config_path, debug=debug))
