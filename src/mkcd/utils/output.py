"""Rich console output utilities.

Stdout is reserved for the resolved path, so every diagnostic goes through
``err_console``.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape


# Paths may contain ":name:" sequences, so emoji codes are never substituted
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def _print(prefix: str, message: str, style: Optional[str]) -> None:
    err_console.print(
        f"{prefix} {escape(message)}",
        style=style,
        soft_wrap=True,
        highlight=False,
    )


def print_error(message: str) -> None:
    """Print an error message."""
    _print("[bold red]Error:[/bold red]", message, "red")


def print_info(message: str) -> None:
    """Print an info message."""
    _print("[blue]ℹ[/blue]", message, None)


def set_color(enabled: bool) -> None:
    """Enable or disable colored output on both consoles."""
    console.no_color = not enabled
    err_console.no_color = not enabled
