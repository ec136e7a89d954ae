import logging

import pytest

from decision_tree.utils.logging import (
    LOG_LEVEL_ENV,
    configure_logging,
    log_calls,
    resolve_log_level,
)


def test_resolve_log_level_names():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("ERROR") == logging.ERROR


def test_resolve_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")

    assert resolve_log_level() == logging.INFO


def test_resolve_log_level_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert resolve_log_level() == logging.WARNING


def test_resolve_log_level_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_log_level("chatty")


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("decision_tree")

    configure_logging("info")
    configure_logging("debug")

    marked = [h for h in logger.handlers if getattr(h, "_decision_tree_console", False)]
    assert len(marked) == 1
    assert logger.level == logging.DEBUG


def test_log_calls_logs_and_reraises(caplog):
    caplog.set_level(logging.DEBUG, logger="decision_tree.tests")

    @log_calls("decision_tree.tests")
    def divide(a, b):
        return a / b

    assert divide(4, 2) == 2
    assert "divide returned 2" in caplog.text

    with pytest.raises(ZeroDivisionError):
        divide(1, 0)
    assert "Error in divide" in caplog.text
