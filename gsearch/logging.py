"""Package-wide logging setup for gsearch.

All modules obtain loggers through :func:`get_logger` so they hang below the
``gsearch`` root logger. The root logger is configured once, lazily, with a
single stdout handler; child loggers carry no handlers of their own and
inherit its level.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Union

ROOT_LOGGER_NAME = "gsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _coerce_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    return numeric


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the single handler on the ``gsearch`` root logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Numeric level or level name (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).

    Returns:
        The ``gsearch`` root logger.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    root_logger.setLevel(_coerce_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``gsearch`` root.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        A handler-less logger that inherits the root level.
    """
    configure_logging()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``gsearch`` root logger and its handlers."""
    numeric = _coerce_level(level)
    root_logger = configure_logging()
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the whole package back to INFO."""
    set_global_log_level(logging.INFO)


@contextmanager
def log_level(level: Union[int, str]) -> Iterator[logging.Logger]:
    """Temporarily run with a different package log level.

    Example:
        >>> with log_level("debug"):
        ...     depth_first_search(neighbors, "A", "Z")
    """
    root_logger = configure_logging()
    previous = root_logger.level
    set_global_log_level(level)
    try:
        yield root_logger
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Drop the root handler and forget the configuration (used by tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
