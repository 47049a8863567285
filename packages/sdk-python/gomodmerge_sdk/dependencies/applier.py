"""
Manifest Update Application
===========================

Commits an update set to the local go.mod with a single editor call.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from gomodmerge_common.logger import get_logger

from ..toolchain import Toolchain
from .merger import ModuleUpdate, ordered_updates

logger = get_logger(__name__)


@dataclass
class ApplyResult:
    """Outcome of applying an update set."""

    # Updates in module path order
    updates: List[ModuleUpdate] = field(default_factory=list)

    # Whether go.mod was edited
    applied: bool = False

    dry_run: bool = False

    @property
    def up_to_date(self) -> bool:
        return not self.updates


def apply_updates(
    toolchain: Toolchain,
    updates: Mapping[str, str],
    local: Optional[Mapping[str, str]] = None,
    dry_run: bool = False,
) -> ApplyResult:
    """
    Pin every module in the update set.

    Args:
        toolchain: Manifest editor to call
        updates: Module path -> version to pin
        local: Local version map, used to record the version each update replaces
        dry_run: Compute the ordered updates without editing go.mod

    Returns:
        ApplyResult with updates in module path order

    Raises:
        ToolchainError: If the editor fails. Nothing is reported as applied.
    """
    if not updates:
        logger.info("No updates required")
        return ApplyResult(dry_run=dry_run)

    ordered = ordered_updates(updates, local)

    for update in ordered:
        if update.is_new:
            logger.debug(f"{update.path}: adding {update.version}")
        else:
            logger.debug(f"{update.path}: {update.previous} -> {update.version}")

    if dry_run:
        logger.info(f"Dry run: {len(ordered)} update(s) not written")
        return ApplyResult(updates=ordered, applied=False, dry_run=True)

    toolchain.edit_requirements([update.pin for update in ordered])
    logger.info(f"Pinned {len(ordered)} module(s) in go.mod")
    return ApplyResult(updates=ordered, applied=True)
