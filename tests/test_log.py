"""Tests for keystrokes.log: TRACE level and handler setup."""

from __future__ import annotations

import json
import logging
import logging.handlers

from keystrokes.log import (
    LOGGER_NAME,
    TRACE,
    configure_logging,
    setup_logging,
    setup_logging_from_config,
)


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_keystrokes_handler", False)]


def test_trace_level_registered():
    assert logging.getLevelName(TRACE) == "TRACE"


def test_logger_has_trace_method(caplog):
    caplog.set_level(TRACE, logger="keystrokes.test")
    logging.getLogger("keystrokes.test").trace("noisy %d", 1)
    assert [r.getMessage() for r in caplog.records] == ["noisy 1"]


def test_console_only_by_default():
    logger = setup_logging()
    handlers = _own_handlers(logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.WARNING
    assert logger.level == logging.INFO


def test_debug_console():
    logger = setup_logging(debug=True)
    assert _own_handlers(logger)[0].level == logging.DEBUG
    assert logger.level == logging.DEBUG


def test_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "keystrokes.log"
    logger = setup_logging(log_file=str(log_file), max_bytes=1024, backup_count=2)
    file_handlers = [
        h for h in _own_handlers(logger)
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024
    assert file_handlers[0].backupCount == 2
    logger.debug("hello file")
    file_handlers[0].flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_handlers():
    setup_logging()
    logger = setup_logging(debug=True)
    assert len(_own_handlers(logger)) == 1
    assert logger is logging.getLogger(LOGGER_NAME)


def test_from_config_trace():
    logger = setup_logging_from_config({"trace": True, "debug": False, "log_file": None})
    assert logger.level == TRACE


def test_configure_logging_reads_file(tmp_path):
    log_file = tmp_path / "ks.log"
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"debug": True, "log_file": str(log_file), "log_backup_count": 1}))
    logger = configure_logging(str(cfg_file))
    file_handlers = [
        h for h in _own_handlers(logger)
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_with_null_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text("null")
    logger = configure_logging(str(cfg_file))
    assert len(_own_handlers(logger)) == 1
    assert logger.level == logging.INFO
