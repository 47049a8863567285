"""
gomodmerge Common Package

Shared primitives used by the gomodmerge SDK and CLI.

This package provides:
- Exception classes for consistent error handling
- Constants for go commands, file names and exit codes
- Logging setup
- Environment-driven settings

Usage:
    from gomodmerge_common import ToolchainError, get_logger, get_settings
"""

from .config import Settings, get_settings
from .constants import (
    DEFAULT_GO_BINARY,
    GO_MOD_FILENAME,
    GOMODMERGE_VERSION,
    LOG_LEVELS,
    NO_UPDATES_MESSAGE,
    SCRATCH_DIR_PREFIX,
    ExitCodes,
    GoCommands,
)
from .errors import (
    GoModMergeError,
    ManifestIOError,
    RecordDecodeError,
    ToolchainError,
)
from .logger import configure_logging, get_logger

__version__ = GOMODMERGE_VERSION

__all__ = [
    # Errors
    "GoModMergeError",
    "ManifestIOError",
    "RecordDecodeError",
    "ToolchainError",
    # Constants
    "DEFAULT_GO_BINARY",
    "GO_MOD_FILENAME",
    "GOMODMERGE_VERSION",
    "LOG_LEVELS",
    "NO_UPDATES_MESSAGE",
    "SCRATCH_DIR_PREFIX",
    "ExitCodes",
    "GoCommands",
    # Settings
    "Settings",
    "get_settings",
    # Logger
    "get_logger",
    "configure_logging",
]
