"""
gomodmerge Logging

Thin wrapper over the standard logging module. Records are rendered on
stderr by rich so that stdout only ever carries the update summary.

Usage:
    from gomodmerge_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Resolving local module graph")
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .constants import LOG_LEVELS

ROOT_LOGGER_NAME = "gomodmerge"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger nested under the gomodmerge root logger.

    Module names from our own packages (``gomodmerge_sdk.client``) are
    mapped to ``gomodmerge.sdk.client`` so that configure_logging controls
    all of them through one parent.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "_"):
        name = ROOT_LOGGER_NAME + "." + name[len(ROOT_LOGGER_NAME) + 1 :]
    elif not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    normalized = level.strip().lower()
    if normalized == "warn":
        normalized = "warning"
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{level}'. Must be one of: {', '.join(LOG_LEVELS)}")
    return _LEVELS[normalized]


def configure_logging(level: Union[str, int] = "warning") -> logging.Logger:
    """
    Configure the gomodmerge root logger.

    Safe to call more than once; the previous handler is replaced.

    Args:
        level: Level name (debug, info, warning, error) or logging constant

    Returns:
        The configured root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    root.propagate = False
    return root
