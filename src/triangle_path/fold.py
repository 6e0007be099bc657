"""Generic bottom-up reduction over a Triangle.

fold_triangle(triangle, make_leaf, combine) turns every bottom-row value
into a T with make_leaf, then walks upward one row at a time, replacing
the accumulator with combine(value, below_left, below_right) for each
value in the row:

       3            acc'' = [combine(3, acc'[0], acc'[1])]
      7 4     ==>   acc'  = [combine(7, acc[0], acc[1]), combine(4, acc[1], acc[2])]
     2 4 6          acc   = [make_leaf(2), make_leaf(4), make_leaf(6)]

The final accumulator holds a single value, which is the result.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from .triangle import EmptyTriangleError, Triangle

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fold_triangle(
    triangle: Triangle,
    make_leaf: Callable[[int], T],
    combine: Callable[[int, T, T], T],
) -> T:
    """Reduce a Triangle to a single value, bottom row first.

    Args:
        triangle: Non-empty Triangle. It is only read, never modified.
        make_leaf: Maps each bottom-row value to an initial T.
        combine: Merges a value with the two T's beneath it.

    Returns:
        The value produced for the apex.

    Raises:
        EmptyTriangleError: If the triangle has no rows.
    """
    if triangle.height() == 0:
        raise EmptyTriangleError()

    rows = triangle.rows()
    accum = [make_leaf(value) for value in rows[-1]]

    # Slots past the current row width go stale and are never read again
    for row in reversed(rows[:-1]):
        for i, value in enumerate(row):
            accum[i] = combine(value, accum[i], accum[i + 1])

    logger.debug(f"Folded triangle of height {triangle.height()}")
    return accum[0]
