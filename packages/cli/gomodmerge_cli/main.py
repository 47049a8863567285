"""gomodmerge CLI - Main entry point."""
import typer

from . import merge_cmd

app = typer.Typer(
    name="gomodmerge",
    help="Merge newer Go module requirements from another go.mod",
    add_completion=False,
)

# A single command: invoked directly as `gomodmerge MODFILE`
app.command()(merge_cmd.merge)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
