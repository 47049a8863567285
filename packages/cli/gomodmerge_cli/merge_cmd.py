"""Merge command - Pull newer requirements from another go.mod."""

from pathlib import Path
from typing import Optional

import typer

from gomodmerge_common.config import get_settings
from gomodmerge_common.constants import NO_UPDATES_MESSAGE, ExitCodes
from gomodmerge_common.logger import configure_logging
from gomodmerge_sdk import create_toolchain, merge_modfile

from .utils import handle_error, info


def merge(
    modfile: Path = typer.Argument(
        ...,
        help="Path to the go.mod whose requirements should be merged",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run", "-n",
        help="Show the updates without editing go.mod",
    ),
    go_binary: Optional[str] = typer.Option(
        None,
        "--go",
        help="Go executable to run (default: $GOMODMERGE_GO_BINARY or 'go')",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output",
    ),
):
    """
    Update the local module's dependencies by merging them
    from the dependencies implied by the argument go.mod file.

    Dependencies that are older than the current module's dependencies
    will be ignored.

    Examples:
        gomodmerge ../service/go.mod
        gomodmerge --dry-run ../service/go.mod
    """
    try:
        settings = get_settings(go_binary=go_binary, log_level="debug" if verbose else None)
        configure_logging(settings.log_level)

        outcome = merge_modfile(
            modfile,
            toolchain=create_toolchain(settings.go_binary),
            dry_run=dry_run,
            scratch_parent=settings.scratch_parent,
        )
    except KeyboardInterrupt:
        info("Merge cancelled by user")
        raise typer.Exit(ExitCodes.INTERRUPTED)
    except Exception as e:
        handle_error(e, verbose)
        raise typer.Exit(ExitCodes.FAILURE)

    result = outcome.result
    if result.up_to_date:
        typer.echo(NO_UPDATES_MESSAGE)
        return

    if result.dry_run:
        info(f"Dry run: go.mod not modified ({len(result.updates)} update(s) pending)")
    for update in result.updates:
        typer.echo(str(update))
