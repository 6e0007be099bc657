"""Triangle container and library error types.

A Triangle is a stack of integer rows where row i (0-indexed) holds exactly
i + 1 values. Each value is adjacent to the two values directly below it:

       3
      7 4
     2 4 6
    8 5 9 3

Rows are appended one at a time. A row of the wrong length is rejected
with InvalidShapeError and the Triangle is left untouched.
"""

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path


class TriangleError(Exception):
    """Base class for triangle-path errors."""

    pass


class InvalidShapeError(TriangleError, ValueError):
    """Raised when a row does not have length equal to height + 1."""

    def __init__(self, expected: int, actual: int, line: int | None = None):
        self.expected = expected
        self.actual = actual
        self.line = line
        location = f"line {line}: " if line is not None else ""
        super().__init__(
            f"{location}row must have {expected} values "
            f"(the triangle height plus one), got {actual}"
        )


class EmptyTriangleError(TriangleError, ValueError):
    """Raised when folding a Triangle with no rows."""

    def __init__(self, message: str = "fold_triangle expects a non-empty triangle"):
        super().__init__(message)


class FileOpenError(TriangleError, OSError):
    """Raised when the triangle input file cannot be opened."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to open {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


Row = tuple[int, ...]


def _check_int(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"triangle values must be integers, got {type(value).__name__}: {value!r}"
        )


class Triangle:
    """Shape-checked triangular array of integers.

    Invariant: len(self._rows[i]) == i + 1 for every i.
    """

    def __init__(self) -> None:
        self._rows: list[list[int]] = []

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Triangle":
        """Build a Triangle by appending each row in order."""
        triangle = cls()
        for row in rows:
            triangle.append_row(row)
        return triangle

    def append_row(self, row: Sequence[int]) -> None:
        """Append a row whose length is the current height plus one.

        Raises:
            InvalidShapeError: If the row has the wrong length. The
                Triangle is not modified.
            TypeError: If any value is not an int. The Triangle is not
                modified.
        """
        values = list(row)
        for value in values:
            _check_int(value)
        expected = self.height() + 1
        if len(values) != expected:
            raise InvalidShapeError(expected, len(values))
        self._rows.append(values)

    def height(self) -> int:
        """Number of rows."""
        return len(self._rows)

    def width(self) -> int:
        """Width of the bottom row. Always equal to height()."""
        return self.height()

    def at(self, row: int, position: int) -> int:
        """Value at (row, position).

        Callers must keep row < height() and position <= row; other
        indices are unchecked.
        """
        return self._rows[row][position]

    def set(self, row: int, position: int, value: int) -> None:
        """Overwrite the value at (row, position). Row lengths never change."""
        _check_int(value)
        self._rows[row][position] = value

    def rows(self) -> tuple[Row, ...]:
        """Read-only view of all rows, top first."""
        return tuple(tuple(row) for row in self._rows)

    def __len__(self) -> int:
        return self.height()

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Triangle(height={self.height()})"
