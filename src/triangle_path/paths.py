"""Path evaluators built on fold_triangle."""

from .fold import fold_triangle
from .triangle import Triangle


def _leaf(value: int) -> int:
    return value


def _is_even(n: int) -> bool:
    return n % 2 == 0


def max_path(triangle: Triangle) -> int:
    """Greatest sum of a path from apex to base (Project Euler 67).

    Each value keeps the larger of the two totals beneath it.
    """

    def combine(value: int, left: int, right: int) -> int:
        return value + max(left, right)

    return fold_triangle(triangle, _leaf, combine)


def max_odd_even_path(triangle: Triangle) -> int:
    """Maximum path value when turns are parity-restricted.

    A path may only turn left onto an odd number and right onto an even
    number. Parity is tested on the accumulated total of each child, not
    the raw triangle value. A child that fails its test contributes 0.
    """

    def combine(value: int, left: int, right: int) -> int:
        return value + max(
            0 if _is_even(left) else left,
            right if _is_even(right) else 0,
        )

    return fold_triangle(triangle, _leaf, combine)
