"""
gomodmerge Shared Constants

Single source of truth for the go commands gomodmerge runs, the files it
touches and the exit codes it reports.

Usage:
    from gomodmerge_common.constants import GoCommands, ExitCodes

    argv = [DEFAULT_GO_BINARY, *GoCommands.LIST_MODULES]
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

GOMODMERGE_VERSION = "0.1.0"


# =============================================================================
# FILES AND TOOLS
# =============================================================================

GO_MOD_FILENAME = "go.mod"
"""Name of the module manifest the go tool reads from a module root"""

DEFAULT_GO_BINARY = "go"
"""Executable used when no override is configured"""

SCRATCH_DIR_PREFIX = "gomodmerge-"
"""Prefix for scratch workspace directories"""


class GoCommands:
    """Argument vectors passed to the go binary."""

    LIST_MODULES = ("list", "-m", "-json", "all")
    """Emit every module in the build list as a stream of JSON objects"""

    EDIT_MODULE = ("mod", "edit")
    """Edit go.mod in the current directory; pins are appended as -require flags"""

    REQUIRE_FLAG = "-require="


# =============================================================================
# OUTPUT
# =============================================================================

NO_UPDATES_MESSAGE = "no updates required"


class ExitCodes:
    """Process exit statuses reported by the CLI."""

    OK = 0
    FAILURE = 1
    USAGE = 2
    INTERRUPTED = 130


LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels for GOMODMERGE_LOG_LEVEL"""
