"""Triangle Path CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import typer

from triangle_path import FileOpenError, load_triangle, max_odd_even_path, max_path
from triangle_path.config import get_input_path, get_log_level, load_config

from . import __version__
from .console import console, print_error

app = typer.Typer(
    name="triangle-path",
    help="Triangle Path - maximum path values through number triangles",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"triangle-path version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Triangle Path - maximum path values through number triangles."""
    pass


def format_results(height: int, best: int, best_odd_even: int) -> str:
    """Render the solve report, one fact per line."""
    return (
        f"Loaded triangle with {height} rows. \n"
        f"The maximum path value is {best}.\n"
        "If you may only move left onto an odd number or right onto an even"
        " number, the\n"
        f"maximum path value is {best_odd_even}."
    )


def solve_command(
    path: Optional[Path] = typer.Argument(
        None,
        help="Triangle file, one row per line (default: configured input path)",
        show_default=False,
    ),
) -> None:
    """Load a triangle and print its maximum path values."""
    config = load_config()
    logging.basicConfig(
        level=get_log_level(config),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    input_path = path if path is not None else get_input_path(config)

    try:
        triangle = load_triangle(input_path)
    except FileOpenError as e:
        logger.debug(f"Open failed: {e}")
        print_error(f"Failed to open {e.path}")
        raise typer.Exit(code=1)

    typer.echo(
        format_results(
            triangle.height(),
            max_path(triangle),
            max_odd_even_path(triangle),
        )
    )


app.command(name="solve")(solve_command)


if __name__ == "__main__":
    app()
