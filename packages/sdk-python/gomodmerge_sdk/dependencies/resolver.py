"""
Module Version Resolution
=========================

Builds a flat module path -> version map from the resolver's view of a
module's build list. The resolver does all transitive resolution; this
module only decodes and flattens its output.
"""

from pathlib import Path
from typing import Dict, Optional

from gomodmerge_common.logger import get_logger

from ..toolchain import Toolchain
from .records import iter_module_records

logger = get_logger(__name__)


def build_version_map(toolchain: Toolchain, root: Optional[Path] = None) -> Dict[str, str]:
    """
    Resolve the module at root into a version map.

    Args:
        toolchain: Resolver to query
        root: Module root directory; None means the current directory

    Returns:
        Dict mapping module path to resolved version. Modules without a
        version (the main module) are left out.

    Raises:
        ToolchainError: If the resolver fails
        RecordDecodeError: If the resolver output is malformed
    """
    versions: Dict[str, str] = {}
    skipped = 0

    for record in iter_module_records(toolchain.list_modules(root)):
        if not record.has_version:
            skipped += 1
            continue
        versions[record.path] = record.version

    logger.debug(
        f"Resolved {len(versions)} module versions in {root or 'current module'} "
        f"({skipped} unversioned skipped)"
    )
    return versions
