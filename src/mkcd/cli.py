"""CLI application entry point."""

from pathlib import Path
from typing import Optional

import typer

from mkcd import __version__
from mkcd.config.loader import load_config
from mkcd.core.mkcd import make_directory
from mkcd.exceptions import MkcdError
from mkcd.utils.output import console, print_error, print_info, set_color

PROG_NAME = "mkcd"

app = typer.Typer(
    name=PROG_NAME,
    help="Create a directory (and any missing parents) and print its absolute path.",
    add_completion=False,
)


def print_usage() -> None:
    """Print the short usage message to stderr."""
    typer.echo(f"Usage: {PROG_NAME} <directory>", err=True)
    typer.echo("Creates a directory and changes into it.", err=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROG_NAME} {__version__}", highlight=False)
        raise typer.Exit()


@app.command()
def main(
    directory: Optional[str] = typer.Argument(
        None,
        help=(
            "Directory to create; ~ and relative paths are resolved. "
            "Put -- before a name that starts with -"
        ),
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report on stderr whether the directory was created",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (overrides ~/.config/mkcd/config.yaml)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Create DIRECTORY if needed and print its absolute path.

    Only the path is written to stdout, so a shell function can do
    `cd "$(mkcd dir)"`.
    """
    if directory is None:
        print_usage()
        raise typer.Exit(1)

    try:
        try:
            cfg = load_config(config)
        except Exception as e:
            print_error(f"failed to load config: {e}")
            raise typer.Exit(1)

        set_color(cfg.settings.color)
        verbose = verbose or cfg.settings.verbose

        try:
            result = make_directory(directory)
        except MkcdError as e:
            print_error(str(e))
            raise typer.Exit(1)

        if verbose:
            if result.created:
                print_info(f"Created directory: {result.path}")
            else:
                print_info(f"Directory exists: {result.path}")

        # Output the absolute path so the shell can cd into it
        typer.echo(str(result.path))

    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
