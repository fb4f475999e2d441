"""Logging for graphfinder.

Every module logs through ``get_logger(__name__)`` below the ``graphfinder``
logger. Adapters emit DEBUG records only: adapter construction, position
cache fills and labels that fail to resolve. Being a library, the package
installs just a ``NullHandler``; call ``enable_debug_logging()`` to watch
adapter traffic while wiring a graph into a pathfinding engine.
"""

import logging
import sys
from typing import List, Optional

ROOT_LOGGER_NAME = "graphfinder"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers attached by enable_debug_logging(), removed by disable_debug_logging()
_debug_handlers: List[logging.Handler] = []

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a graphfinder module.

    Args:
        name: Module name, normally ``__name__``. Names outside the package
            are placed below the ``graphfinder`` logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_debug_logging(
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Send graphfinder DEBUG records to ``handler`` (stdout by default).

    Args:
        handler: Destination handler.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.

    Returns:
        The attached handler.
    """
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)
    _debug_handlers.append(handler)
    return handler


def disable_debug_logging() -> None:
    """Detach the handlers added by ``enable_debug_logging()``."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    while _debug_handlers:
        root_logger.removeHandler(_debug_handlers.pop())
    root_logger.setLevel(logging.NOTSET)
