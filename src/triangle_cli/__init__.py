"""Triangle Path command-line interface."""

from triangle_path import __version__

__all__ = ["__version__"]
