"""
gomodmerge Error Classes

Every failure raised by gomodmerge derives from GoModMergeError so callers
can catch a single base class. Errors carry a stable ``code`` and, where an
underlying cause is known, a ``details`` string describing it.

Usage:
    from gomodmerge_common.errors import ToolchainError

    raise ToolchainError("go list failed", command=["go", "list"], returncode=1)
"""

from typing import Any, Dict, List, Optional, Sequence


class GoModMergeError(Exception):
    """Base class for all gomodmerge errors."""

    code = "GOMODMERGE_ERROR"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Render the message with its underlying cause, if any."""
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ManifestIOError(GoModMergeError):
    """A manifest could not be read, or the scratch copy could not be written."""

    code = "MANIFEST_IO_ERROR"


class RecordDecodeError(GoModMergeError):
    """The resolver emitted a malformed or truncated module record."""

    code = "RECORD_DECODE_ERROR"


class ToolchainError(GoModMergeError):
    """An external go command could not be started or exited non-zero."""

    code = "TOOLCHAIN_ERROR"

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.command: List[str] = list(command or [])
        self.returncode = returncode
        if details is None and self.command:
            details = f"command: {' '.join(self.command)}"
            if returncode is not None:
                details += f", exit status {returncode}"
        super().__init__(message, details)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["command"] = self.command
        data["returncode"] = self.returncode
        return data
