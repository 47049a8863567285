"""Shared utilities for the gomodmerge SDK."""

from .workspace import find_module_root, read_manifest, scratch_workspace, write_manifest

__all__ = [
    "find_module_root",
    "read_manifest",
    "scratch_workspace",
    "write_manifest",
]
