"""Triangle Path - maximum-value paths through numeric triangles.

Public API:
- Triangle: shape-checked container, row i holds i + 1 integers
- fold_triangle: generic bottom-up reduction over a Triangle
- max_path / max_odd_even_path: evaluators built on fold_triangle
- parse_triangle / load_triangle: text parsing and file loading
"""

from .fold import fold_triangle
from .parser import load_triangle, parse_triangle
from .paths import max_odd_even_path, max_path
from .triangle import (
    EmptyTriangleError,
    FileOpenError,
    InvalidShapeError,
    Triangle,
    TriangleError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Container
    "Triangle",
    # Errors
    "TriangleError",
    "InvalidShapeError",
    "EmptyTriangleError",
    "FileOpenError",
    # Algorithms
    "fold_triangle",
    "max_path",
    "max_odd_even_path",
    # Input
    "parse_triangle",
    "load_triangle",
]
