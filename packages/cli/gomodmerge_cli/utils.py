"""Console helpers shared by CLI commands."""

from rich.console import Console
from rich.markup import escape

from gomodmerge_common.errors import GoModMergeError

# Diagnostics go to stderr; stdout is reserved for the update summary.
console = Console(stderr=True, highlight=False, soft_wrap=True)


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[bold red]error:[/bold red] {escape(message)}")


def handle_error(exc: BaseException, verbose: bool = False) -> None:
    """Print a single diagnostic line for exc, with its cause when known."""
    if isinstance(exc, GoModMergeError):
        error(exc.describe())
    else:
        # Exceptions such as pydantic's ValidationError render over several lines.
        text = " ".join(str(exc).split())
        error(f"{exc.__class__.__name__}: {text}" if text else exc.__class__.__name__)

    if verbose:
        console.print_exception()
