"""
Structured logging helpers for the posbridge SDK.

All SDK loggers live under the ``posbridge`` namespace. The package root
logger carries a NullHandler so nothing is printed unless the application
configures logging (or calls :func:`configure_logging`).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "posbridge"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the ``posbridge`` namespace.

    Args:
        name: Module name (usually ``__name__``). Names outside the
            namespace are nested under it.

    Returns:
        Standard library logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the SDK root logger.

    Calling it again only updates the level and format.

    Example:
        >>> configure_logging("DEBUG")
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    handler = next(
        (h for h in root.handlers if isinstance(h, logging.StreamHandler)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    return root
