"""gomodmerge SDK - merge Go module requirements from a foreign go.mod.

This package provides tools for:
- Resolving a module's build list into a version map
- Computing upgrade-only update sets between two version maps
- Applying update sets to the local go.mod

Example:
    >>> from gomodmerge_sdk import merge_modfile
    >>> outcome = merge_modfile("../other/go.mod")
    >>> for update in outcome.result.updates:
    ...     print(update)

Package Structure:
    gomodmerge_sdk/
    ├── dependencies/   - Versions, record decoding, resolution, merging, applying
    ├── utils/          - Module root detection and scratch workspaces
    ├── toolchain.py    - Access to the go binary (real and fake)
    └── client.py       - End-to-end merge
"""

from .client import MergeOutcome, MergeStage, merge_modfile
from .dependencies import (
    ApplyResult,
    ModuleRecord,
    ModuleUpdate,
    Version,
    apply_updates,
    build_version_map,
    compare_versions,
    iter_module_records,
    merge_version_maps,
    parse_version,
)
from .toolchain import FakeToolchain, GoToolchain, Toolchain, create_toolchain, render_module_records

__version__ = "0.1.0"

__all__ = [
    # Client
    "merge_modfile",
    "MergeOutcome",
    "MergeStage",
    # Toolchain
    "Toolchain",
    "GoToolchain",
    "FakeToolchain",
    "create_toolchain",
    "render_module_records",
    # Dependencies
    "ApplyResult",
    "ModuleRecord",
    "ModuleUpdate",
    "Version",
    "apply_updates",
    "build_version_map",
    "compare_versions",
    "iter_module_records",
    "merge_version_maps",
    "parse_version",
]
