"""Mini README: Application-wide logging helpers for Maintenance Maker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * resolve_level - turn a level name such as ``"debug"`` into its number.
    * configure_root_logger - attach the shared handler and set the level.

Usage:
    Modules import ``get_logger`` and keep a module-level ``LOGGER``. The root
    handler is attached exactly once so reloading the web application during
    development does not stack duplicate handlers; later calls only adjust
    the level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def resolve_level(level: Union[int, str]) -> int:
    """Accept numeric levels or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Configure the root logger once; an explicit ``level`` is always applied."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if level is not None:
        root_logger.setLevel(resolve_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    if level is None:
        root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, configuring the root logger on first use."""

    configure_root_logger()
    return logging.getLogger(name)
