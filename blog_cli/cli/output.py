"""
Console Output.

Rich consoles shared by all commands. Server bodies and error text are
printed verbatim: no markup, emoji codes, highlighting or hard wrapping.
"""

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)


def print_plain(message: str) -> None:
    """Print a line to stdout exactly as given."""
    console.print(message, markup=False)


def print_error(message: str) -> None:
    """Print a failure line to stderr in red."""
    err_console.print(f"[red]{escape(message)}[/red]")
