"""
Workspace Utilities Module
==========================

Provides utilities for the directories gomodmerge works in:
- Finding the local module root (the nearest go.mod)
- Reading a foreign manifest
- Creating a scratch module that holds only a copy of a foreign go.mod, so
  the resolver can run against it without touching the caller's module
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from gomodmerge_common.constants import GO_MOD_FILENAME, SCRATCH_DIR_PREFIX
from gomodmerge_common.errors import ManifestIOError
from gomodmerge_common.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Module Root Detection
# ============================================================================


def find_module_root(start_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the module root governing a directory.

    Walks up the directory tree from start_path looking for a directory
    that contains go.mod, the way the go tool locates the main module.

    Args:
        start_path: Starting directory (defaults to current working directory)

    Returns:
        Path to the module root, or None if not found
    """
    current = (start_path or Path.cwd()).resolve()

    for parent in [current] + list(current.parents):
        if (parent / GO_MOD_FILENAME).is_file():
            return parent

    return None


# ============================================================================
# Manifest I/O
# ============================================================================


def read_manifest(path: Union[str, Path]) -> bytes:
    """
    Read a go.mod file.

    Raises:
        ManifestIOError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ManifestIOError(f"cannot read manifest {path}", details=e.strerror or str(e)) from e


def write_manifest(directory: Path, content: bytes) -> Path:
    """
    Write content as the go.mod of directory.

    Returns:
        Path of the written file

    Raises:
        ManifestIOError: If the file cannot be written
    """
    target = directory / GO_MOD_FILENAME
    try:
        target.write_bytes(content)
    except OSError as e:
        raise ManifestIOError(f"cannot write scratch manifest {target}", details=e.strerror or str(e)) from e
    return target


# ============================================================================
# Scratch Workspace
# ============================================================================


@contextmanager
def scratch_workspace(parent: Optional[Path] = None) -> Iterator[Path]:
    """
    Create a temporary directory and remove it when the block exits.

    The directory is removed on every exit path, including errors raised
    inside the block.

    Args:
        parent: Directory to create the workspace in (defaults to the
            system temp directory)

    Yields:
        Path to the empty workspace

    Raises:
        ManifestIOError: If the directory cannot be created
    """
    try:
        workspace = Path(tempfile.mkdtemp(prefix=SCRATCH_DIR_PREFIX, dir=str(parent) if parent else None))
    except OSError as e:
        raise ManifestIOError("cannot create scratch workspace", details=e.strerror or str(e)) from e

    logger.debug(f"Created scratch workspace: {workspace}")
    try:
        yield workspace
    finally:
        shutil.rmtree(workspace, ignore_errors=True)
        logger.debug(f"Removed scratch workspace: {workspace}")
