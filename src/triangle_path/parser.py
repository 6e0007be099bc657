"""Parsing of line-oriented triangle text (Project Euler 67 format).

One row per line, values separated by whitespace:

    3
    7 4
    2 4 6
    8 5 9 3
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .triangle import FileOpenError, InvalidShapeError, Triangle

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


def _parse_row(line: str) -> list[int]:
    """Read integers from a line, stopping at the first non-integer text.

    A token with a leading integer (e.g. "12abc") contributes that integer
    and then ends the row.
    """
    row = []
    for token in line.split():
        match = _INTEGER.match(token)
        if match is None:
            logger.debug(f"Stopped reading row at non-integer token: {token!r}")
            break
        row.append(int(match.group()))
        if match.end() != len(token):
            logger.debug(f"Stopped reading row inside token: {token!r}")
            break
    return row


def parse_triangle(lines: Iterable[str]) -> Triangle:
    """Build a Triangle from an iterable of text lines.

    Args:
        lines: Lines of text, one row each (e.g. an open file)

    Returns:
        Populated Triangle

    Raises:
        InvalidShapeError: If line k does not hold exactly k values
    """
    triangle = Triangle()

    for line_number, line in enumerate(lines, start=1):
        row = _parse_row(line)
        if len(row) != line_number:
            raise InvalidShapeError(line_number, len(row), line=line_number)
        triangle.append_row(row)

    return triangle


def load_triangle(path: str | Path) -> Triangle:
    """Open a triangle file and parse it.

    Raises:
        FileOpenError: If the file cannot be opened
        InvalidShapeError: If any row has the wrong number of values
    """
    path = Path(path)
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e

    with f:
        triangle = parse_triangle(f)

    logger.debug(f"Loaded triangle with {triangle.height()} rows from {path}")
    return triangle
