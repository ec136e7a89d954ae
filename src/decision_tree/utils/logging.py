from __future__ import annotations
import logging
import os
from functools import wraps
from typing import Any, Callable

LOG_LEVEL_ENV = "DECISION_TREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log function calls at DEBUG level with basic error logging."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s args=%s kwargs=%s", func.__name__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__name__, e)
                raise
            logger.debug("%s returned %r", func.__name__, result)
            return result

        return _wrapper

    return _decorator


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (or the environment default) to a logging constant."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {name}")
    return value


def configure_logging(level: str | None = None) -> None:
    """Attach a console handler to the package logger. Safe to call repeatedly."""
    package_logger = logging.getLogger("decision_tree")
    package_logger.setLevel(resolve_log_level(level))
    if not any(getattr(h, "_decision_tree_console", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._decision_tree_console = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)


__all__ = ["configure_logging", "log_calls", "resolve_log_level"]
