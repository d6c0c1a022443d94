"""Transform data structures: square-symmetry matrices and view state."""
from dataclasses import dataclass, field
from fractions import Fraction

import numpy as np

from models.point import Point


@dataclass(frozen=True)
class Matrix:
    """2x2 integer matrix, one of the eight symmetries of the square.

    Reading matrices as transforms applied to the right, ``a * b`` applies
    ``b`` first. Every member of the group is orthogonal, so the transpose
    is the inverse.
    """
    xx: int = 1
    xy: int = 0
    yx: int = 0
    yy: int = 1

    def __mul__(self, other):
        """Compose with another matrix, or map a point."""
        if isinstance(other, Matrix):
            return Matrix(
                self.xx * other.xx + self.xy * other.yx,
                self.xx * other.xy + self.xy * other.yy,
                self.yx * other.xx + self.yy * other.yx,
                self.yx * other.xy + self.yy * other.yy,
            )
        if isinstance(other, Point):
            return Point(
                self.xx * other.x + self.xy * other.y,
                self.yx * other.x + self.yy * other.y,
            )
        return NotImplemented

    def transpose(self) -> 'Matrix':
        return Matrix(self.xx, self.yx, self.xy, self.yy)

    @property
    def determinant(self) -> int:
        """+1 for rotations, -1 for reflections"""
        return self.xx * self.yy - self.xy * self.yx

    @property
    def is_reflection(self) -> bool:
        return self.determinant < 0

    def as_array(self) -> np.ndarray:
        """Matrix as a 2x2 int64 array (row-major)."""
        return np.array([[self.xx, self.xy], [self.yx, self.yy]], dtype=np.int64)


IDENTITY = Matrix()
ROTATE_CCW = Matrix(0, -1, 1, 0)   # Left rotation
ROTATE_CW = Matrix(0, 1, -1, 0)    # Right rotation
FLIP_X = Matrix(1, 0, 0, -1)       # Reflection about the x axis
FLIP_Y = Matrix(-1, 0, 0, 1)       # Reflection about the y axis


def _generate_group(*generators: Matrix) -> frozenset:
    """Close a set of generators under multiplication."""
    group = {IDENTITY}
    frontier = [IDENTITY]
    while frontier:
        m = frontier.pop()
        for g in generators:
            product = g * m
            if product not in group:
                group.add(product)
                frontier.append(product)
    return frozenset(group)


# All eight symmetries of the square
SYMMETRIES = _generate_group(ROTATE_CCW, FLIP_X)


def _zero() -> Point:
    return Point(Fraction(0), Fraction(0))


@dataclass(frozen=True)
class ViewState:
    """Transform state of one view.

    Attributes:
        matrix: Accumulated rotation/reflection
        offset: Integer translation (initial offset plus translations)
        correction: Exact centroid compensation accumulated across edits
    """
    matrix: Matrix = IDENTITY
    offset: Point = field(default_factory=lambda: Point(0, 0))
    correction: Point = field(default_factory=_zero)
