"""
Go Toolchain Access
===================

gomodmerge talks to exactly two go commands:

- ``go list -m -json all`` to resolve a module's full build list
- ``go mod edit -require=...`` to pin versions in the local go.mod

Both sit behind the Toolchain interface. GoToolchain spawns the real
binary; FakeToolchain serves canned resolver output and records edit
requests, so the merge logic can be exercised without a Go installation.
"""

import json
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from gomodmerge_common.config import get_settings
from gomodmerge_common.constants import GO_MOD_FILENAME, GoCommands
from gomodmerge_common.errors import ToolchainError
from gomodmerge_common.logger import get_logger

logger = get_logger(__name__)


class Toolchain(ABC):
    """The external resolver and manifest editor."""

    @abstractmethod
    def list_modules(self, root: Optional[Path] = None) -> Iterator[str]:
        """
        Stream the resolver's structured output for the module at root.

        Args:
            root: Module root directory; None means the current directory

        Yields:
            Text chunks of concatenated JSON module records

        Raises:
            ToolchainError: If the resolver cannot run or exits non-zero
        """

    @abstractmethod
    def edit_requirements(self, pins: Sequence[str]) -> None:
        """
        Pin each ``module@version`` in the current directory's go.mod.

        All pins are applied by a single invocation.

        Raises:
            ToolchainError: If the editor cannot run or exits non-zero
        """


# ============================================================================
# Real implementation
# ============================================================================


class GoToolchain(Toolchain):
    """Runs the go binary as a subprocess."""

    def __init__(self, go_binary: Optional[str] = None):
        self.go_binary = go_binary or get_settings().go_binary

    def _command(self, args: Sequence[str]) -> List[str]:
        return [self.go_binary, *args]

    def list_modules(self, root: Optional[Path] = None) -> Iterator[str]:
        cmd = self._command(GoCommands.LIST_MODULES)
        logger.debug(f"Running {' '.join(cmd)} in {root or Path.cwd()}")

        try:
            proc = subprocess.Popen(
                cmd,
                cwd=str(root) if root else None,
                stdout=subprocess.PIPE,
                stderr=None,
                text=True,
            )
        except OSError as e:
            raise ToolchainError(
                f"cannot run {self.go_binary}",
                command=cmd,
                details=str(e),
            ) from e

        finished = False
        try:
            for line in proc.stdout:
                yield line
            finished = True
        finally:
            proc.stdout.close()
            if not finished:
                # The consumer stopped early (e.g. on a decode error).
                proc.kill()
            returncode = proc.wait()

        if returncode != 0:
            raise ToolchainError("resolving module versions failed", command=cmd, returncode=returncode)

    def edit_requirements(self, pins: Sequence[str]) -> None:
        cmd = self._command(GoCommands.EDIT_MODULE)
        cmd.extend(GoCommands.REQUIRE_FLAG + pin for pin in pins)
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, stderr=None)
        except OSError as e:
            raise ToolchainError(
                f"cannot run {self.go_binary}",
                command=cmd,
                details=str(e),
            ) from e

        if result.returncode != 0:
            raise ToolchainError("updating go.mod failed", command=cmd, returncode=result.returncode)


# ============================================================================
# Fake implementation
# ============================================================================


def render_module_records(
    versions: Mapping[str, str],
    main_module: Optional[str] = "example.com/main",
) -> str:
    """
    Render a version map as resolver output.

    The main module, if given, is emitted first without a version, the way
    the go tool reports it.
    """
    records: List[Dict[str, object]] = []
    if main_module:
        records.append({"Path": main_module, "Main": True})
    for path in sorted(versions):
        records.append({"Path": path, "Version": versions[path]})
    return "\n".join(json.dumps(record, indent="\t") for record in records) + "\n"


class FakeToolchain(Toolchain):
    """
    Canned toolchain for tests and dry experiments.

    ``local_output`` answers list requests for the current directory (root
    None); ``foreign_output`` answers requests for any other root. Every
    call is recorded, including the go.mod content found in a foreign root
    at the moment it was listed.
    """

    def __init__(
        self,
        local_output: str = "",
        foreign_output: str = "",
        list_returncode: int = 0,
        edit_returncode: int = 0,
        chunk_size: Optional[int] = None,
    ):
        self.local_output = local_output
        self.foreign_output = foreign_output
        self.list_returncode = list_returncode
        self.edit_returncode = edit_returncode
        self.chunk_size = chunk_size

        self.list_calls: List[Optional[Path]] = []
        self.foreign_manifests: List[Optional[str]] = []
        self.edit_calls: List[List[str]] = []

    @classmethod
    def from_version_maps(
        cls,
        local: Mapping[str, str],
        foreign: Mapping[str, str],
        **kwargs,
    ) -> "FakeToolchain":
        return cls(
            local_output=render_module_records(local),
            foreign_output=render_module_records(foreign, main_module="example.com/foreign"),
            **kwargs,
        )

    def list_modules(self, root: Optional[Path] = None) -> Iterator[str]:
        self.list_calls.append(root)
        if root is None:
            output = self.local_output
        else:
            manifest = Path(root) / GO_MOD_FILENAME
            self.foreign_manifests.append(manifest.read_text() if manifest.exists() else None)
            output = self.foreign_output

        if self.list_returncode != 0:
            raise ToolchainError(
                "resolving module versions failed",
                command=["go", *GoCommands.LIST_MODULES],
                returncode=self.list_returncode,
            )

        if self.chunk_size:
            for start in range(0, len(output), self.chunk_size):
                yield output[start : start + self.chunk_size]
        elif output:
            yield output

    def edit_requirements(self, pins: Sequence[str]) -> None:
        cmd = ["go", *GoCommands.EDIT_MODULE, *(GoCommands.REQUIRE_FLAG + pin for pin in pins)]
        self.edit_calls.append(list(pins))
        if self.edit_returncode != 0:
            raise ToolchainError("updating go.mod failed", command=cmd, returncode=self.edit_returncode)


def create_toolchain(go_binary: Optional[str] = None) -> Toolchain:
    """Create the toolchain used by the CLI."""
    return GoToolchain(go_binary=go_binary)
