"""
gomodmerge Dependency Management
================================

Provides utilities for:
- Comparing Go module versions by semantic-version precedence
- Decoding the resolver's module record stream
- Building module version maps
- Merging two version maps into a minimal, upgrade-only update set
- Applying an update set to go.mod
"""

from .applier import ApplyResult, apply_updates
from .merger import ModuleUpdate, merge_version_maps, ordered_updates
from .records import ModuleRecord, iter_module_records
from .resolver import build_version_map
from .version import Version, compare_versions, is_valid_version, parse_version

__all__ = [
    # Version utilities
    "Version",
    "compare_versions",
    "is_valid_version",
    "parse_version",
    # Records
    "ModuleRecord",
    "iter_module_records",
    # Resolution
    "build_version_map",
    # Merging
    "ModuleUpdate",
    "merge_version_maps",
    "ordered_updates",
    # Applying
    "ApplyResult",
    "apply_updates",
]
