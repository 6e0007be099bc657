"""Console output utilities.

Usage:
    from triangle_cli.console import console, print_error

    console.print("Hello world", style="bold")
    print_error("Something went wrong")
"""

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message (red X) to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


__all__ = [
    "console",
    "err_console",
    "print_error",
]
