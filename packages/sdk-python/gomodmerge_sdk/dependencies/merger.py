"""
Version Merging
===============

Computes the minimal set of upgrades that brings a local module's
dependencies up to what a foreign module requires. Versions are only ever
raised: a foreign version that is equal to or older than the local one is
ignored.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .version import compare_versions


@dataclass
class ModuleUpdate:
    """A single module pin produced by the merge."""

    path: str
    version: str
    # Local version being replaced; None when the module is new.
    previous: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.previous is None

    @property
    def pin(self) -> str:
        """The module@version form the manifest editor accepts."""
        return f"{self.path}@{self.version}"

    def __str__(self) -> str:
        return f"{self.path} {self.version}"


def merge_version_maps(local: Mapping[str, str], foreign: Mapping[str, str]) -> Dict[str, str]:
    """
    Compute the update set for merging foreign into local.

    A module is included when it is missing from local, or when its
    foreign version has strictly higher semantic-version precedence than
    the local one.

    Args:
        local: The local module's resolved versions
        foreign: The foreign module's resolved versions

    Returns:
        Dict mapping module path to the version to pin. Empty when local
        is already up to date.
    """
    updates: Dict[str, str] = {}
    for path, version in foreign.items():
        local_version = local.get(path)
        if local_version is None or compare_versions(version, local_version) > 0:
            updates[path] = version
    return updates


def ordered_updates(
    updates: Mapping[str, str],
    local: Optional[Mapping[str, str]] = None,
) -> List[ModuleUpdate]:
    """Order an update set by module path."""
    local = local or {}
    return [ModuleUpdate(path=path, version=updates[path], previous=local.get(path)) for path in sorted(updates)]
