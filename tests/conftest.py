import logging

import pytest

from keystrokes.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_keystrokes_logger():
    """Undo handlers and level changes made by setup_logging() in a test."""
    logger = logging.getLogger(LOGGER_NAME)
    old_level = logger.level
    old_handlers = list(logger.handlers)

    yield

    for handler in list(logger.handlers):
        if handler not in old_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(old_level)


@pytest.fixture
def mapper():
    from keystrokes import KeyMapper
    return KeyMapper()
