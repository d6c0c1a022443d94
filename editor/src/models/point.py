"""
4color - Point Primitive

Two-dimensional point/vector used for tile coordinates, offsets and
centroids. Coordinates may be int, float or Fraction; arithmetic between
integer points and integer scalars stays exact.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from numbers import Rational
from typing import Iterator, List, Union

Number = Union[int, float, Fraction]

_HALF = Fraction(1, 2)


def round_half_away(value: Number) -> int:
    """Round to the nearest integer, ties away from zero.

    Args:
        value: Real number to round

    Returns:
        Nearest integer (0.5 -> 1, -0.5 -> -1, 2.5 -> 3)
    """
    magnitude = math.floor(abs(value) + _HALF)
    return magnitude if value >= 0 else -magnitude


def _divide(value: Number, k: Number) -> Number:
    """Divide exactly when both operands are rational."""
    if isinstance(value, Rational) and isinstance(k, Rational):
        return Fraction(value) / k
    return value / k


@dataclass(frozen=True, order=True)
class Point:
    """2D point with vector arithmetic.

    Ordering is (x, y) lexicographic. It only gives sets and sorted output a
    deterministic order and carries no geometric meaning.
    """
    x: Number = 0
    y: Number = 0

    def __iter__(self) -> Iterator[Number]:
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: Number) -> 'Point':
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: Number) -> 'Point':
        return Point(_divide(self.x, k), _divide(self.y, k))

    def __floordiv__(self, k: int) -> 'Point':
        return Point(self.x // k, self.y // k)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def round(self, factor: Number = 1) -> 'Point':
        """Scale, then round each coordinate half away from zero.

        Args:
            factor: Scale applied before rounding

        Returns:
            Integer point
        """
        return Point(round_half_away(self.x * factor), round_half_away(self.y * factor))

    def neighbors(self) -> List['Point']:
        """The four edge-adjacent points (E, W, N, S)."""
        return [
            Point(self.x + 1, self.y),
            Point(self.x - 1, self.y),
            Point(self.x, self.y + 1),
            Point(self.x, self.y - 1),
        ]

    @classmethod
    def of(cls, value) -> 'Point':
        """Coerce a Point or an (x, y) pair to a Point."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


ORIGIN = Point(0, 0)
