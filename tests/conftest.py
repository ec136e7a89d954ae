import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handlers and levels installed by configure_logging."""
    logger = logging.getLogger("decision_tree")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
