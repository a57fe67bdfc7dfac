"""Logger configuration for setkit.

Every set operation logs through its own child of the package logger, so a
DEBUG line reads ``setkit.select - DEBUG - kept 3 of 10 elements`` and can be
silenced per operation with ``logging.getLogger("setkit.map").setLevel(...)``.
The package logger takes its level from ``settings.LOG_LEVEL``.
"""

import logging
import sys

from setkit.core.config import settings

__all__ = ["logger", "setup_logger", "get_operation_logger"]


def setup_logger(
    name: str = "setkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``"setkit"`` for the package logger)
        level: Log level, defaults to ``settings.LOG_LEVEL``
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Handlers live on the package logger only; operation loggers propagate to it
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_operation_logger(operation: str) -> logging.Logger:
    """Return the child logger used by one set operation, e.g. ``setkit.reject``.

    Args:
        operation: Public name of the operation (``"select"``, ``"perform_map"``).

    Raises:
        ValueError: If ``operation`` is empty or contains a dot, which would
            place the logger outside the per-operation level.
    """
    if not operation or "." in operation:
        raise ValueError(f"Invalid operation name for logger: '{operation}'")
    return logger.getChild(operation)


logger = setup_logger()
