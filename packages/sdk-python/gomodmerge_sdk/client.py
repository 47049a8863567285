"""
gomodmerge Client
=================

Entry point for merging a foreign go.mod into the local module:

1. Resolve the local module's build list
2. Copy the foreign go.mod into a scratch module and resolve its build list
3. Compute the upgrade-only update set
4. Pin the updates in the local go.mod with one editor call

Every failure is terminal; nothing is retried.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from gomodmerge_common.config import get_settings
from gomodmerge_common.constants import GO_MOD_FILENAME
from gomodmerge_common.errors import ManifestIOError
from gomodmerge_common.logger import get_logger

from .dependencies import ApplyResult, apply_updates, build_version_map, merge_version_maps
from .toolchain import Toolchain, create_toolchain
from .utils.workspace import find_module_root, read_manifest, scratch_workspace, write_manifest

logger = get_logger(__name__)


class MergeStage(str, Enum):
    """Progress of a single merge invocation."""

    START = "start"
    LOCAL_RESOLVED = "local_resolved"
    FOREIGN_RESOLVED = "foreign_resolved"
    MERGED = "merged"
    NO_OP_DONE = "no_op_done"
    DRY_RUN_DONE = "dry_run_done"
    APPLIED = "applied"
    END = "end"


@dataclass
class MergeOutcome:
    """Everything a merge invocation produced."""

    local_versions: Dict[str, str] = field(default_factory=dict)
    foreign_versions: Dict[str, str] = field(default_factory=dict)
    result: ApplyResult = field(default_factory=ApplyResult)
    stage: MergeStage = MergeStage.START
    history: List[MergeStage] = field(default_factory=lambda: [MergeStage.START])

    def advance(self, stage: MergeStage) -> None:
        logger.debug(f"Merge stage: {self.stage.value} -> {stage.value}")
        self.stage = stage
        self.history.append(stage)


def merge_modfile(
    modfile: Union[str, Path],
    toolchain: Optional[Toolchain] = None,
    dry_run: bool = False,
    scratch_parent: Optional[Path] = None,
) -> MergeOutcome:
    """
    Merge the requirements implied by modfile into the local go.mod.

    Args:
        modfile: Path to the foreign go.mod
        toolchain: Resolver/editor to use (defaults to the go binary)
        dry_run: Compute the updates without editing go.mod
        scratch_parent: Where to create the scratch module (defaults to
            GOMODMERGE_SCRATCH_PARENT, then the system temp directory)

    Returns:
        MergeOutcome whose result lists the updates in module path order

    Raises:
        ManifestIOError: If no local go.mod exists or a manifest cannot be read or copied
        ToolchainError: If the resolver or editor fails
        RecordDecodeError: If resolver output is malformed
    """
    toolchain = toolchain or create_toolchain()
    if scratch_parent is None:
        scratch_parent = get_settings().scratch_parent

    outcome = MergeOutcome()

    module_root = find_module_root()
    if module_root is None:
        raise ManifestIOError(
            f"no {GO_MOD_FILENAME} found in {Path.cwd()} or any parent directory",
            details="run gomodmerge inside the module to update",
        )
    logger.info(f"Local module root: {module_root}")

    outcome.local_versions = build_version_map(toolchain)
    outcome.advance(MergeStage.LOCAL_RESOLVED)

    manifest = read_manifest(modfile)
    with scratch_workspace(scratch_parent) as workspace:
        write_manifest(workspace, manifest)
        logger.info(f"Resolving {modfile} in scratch module {workspace}")
        outcome.foreign_versions = build_version_map(toolchain, workspace)
    outcome.advance(MergeStage.FOREIGN_RESOLVED)

    updates = merge_version_maps(outcome.local_versions, outcome.foreign_versions)
    outcome.advance(MergeStage.MERGED)

    outcome.result = apply_updates(toolchain, updates, outcome.local_versions, dry_run=dry_run)
    if outcome.result.up_to_date:
        outcome.advance(MergeStage.NO_OP_DONE)
    elif outcome.result.applied:
        outcome.advance(MergeStage.APPLIED)
    else:
        outcome.advance(MergeStage.DRY_RUN_DONE)

    outcome.advance(MergeStage.END)
    return outcome
