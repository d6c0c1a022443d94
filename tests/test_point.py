"""
Tests for the Point primitive.

Verifies:
- Vector arithmetic (exact for integers)
- Ordering and set uniqueness
- Half-away-from-zero rounding, with and without a scale factor
- Edge neighbours
"""
from fractions import Fraction

import pytest

from models.point import ORIGIN, Point, round_half_away


# ══════════════════════════════════════════════════════════════════════════
# Arithmetic
# ══════════════════════════════════════════════════════════════════════════

class TestArithmetic:
    """Vector operators"""

    def test_add_sub(self):
        assert Point(1, 2) + Point(3, -4) == Point(4, -2)
        assert Point(1, 2) - Point(3, -4) == Point(-2, 6)

    def test_scalar_multiply_both_sides(self):
        assert Point(1, -2) * 3 == Point(3, -6)
        assert 3 * Point(1, -2) == Point(3, -6)

    def test_integer_division_is_exact(self):
        p = Point(27, 39) / 2
        assert p == Point(Fraction(27, 2), Fraction(39, 2))
        assert isinstance(p.x, Fraction)

    def test_fraction_equals_float(self):
        assert Point(27, 39) / 2 == Point(13.5, 19.5)

    def test_float_division(self):
        assert Point(1.0, 3.0) / 2 == Point(0.5, 1.5)

    def test_floor_division(self):
        assert Point(45, -1) // 20 == Point(2, -1)

    def test_negation(self):
        assert -Point(3, -4) == Point(-3, 4)

    def test_unpacking(self):
        x, y = Point(5, 6)
        assert (x, y) == (5, 6)

    def test_str(self):
        assert str(Point(1, -2)) == "(1, -2)"

    def test_of_pair(self):
        assert Point.of((3, 4)) == Point(3, 4)
        p = Point(1, 1)
        assert Point.of(p) is p


# ══════════════════════════════════════════════════════════════════════════
# Ordering
# ══════════════════════════════════════════════════════════════════════════

class TestOrdering:
    """Lexicographic (x, y) order and value identity"""

    def test_orders_by_x_then_y(self):
        assert Point(0, 5) < Point(1, 0)
        assert Point(1, 0) < Point(1, 1)
        assert sorted([Point(1, 1), Point(0, 9), Point(1, 0)]) == [
            Point(0, 9), Point(1, 0), Point(1, 1)
        ]

    def test_set_uniqueness(self):
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


# ══════════════════════════════════════════════════════════════════════════
# Rounding
# ══════════════════════════════════════════════════════════════════════════

class TestRounding:
    """Ties go away from zero"""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (-0.5, -1),
        (1.5, 2),
        (2.5, 3),
        (-2.5, -3),
        (Fraction(7, 2), 4),
        (Fraction(-1, 4), 0),
        (Fraction(15, 4), 4),
        (0.49, 0),
        (-1.51, -2),
        (3, 3),
    ])
    def test_round_half_away(self, value, expected):
        assert round_half_away(value) == expected

    def test_point_round(self):
        assert Point(0.5, -0.5).round() == Point(1, -1)

    def test_point_round_with_factor(self):
        # 1.25 * 2 = 2.5 -> 3
        assert Point(1.25, 2.5).round(2) == Point(3, 5)
        assert Point(Fraction(17, 2), Fraction(7, 4)).round(2) == Point(17, 4)

    def test_round_returns_ints(self):
        p = Point(Fraction(3, 2), 2.0).round()
        assert isinstance(p.x, int) and isinstance(p.y, int)


# ══════════════════════════════════════════════════════════════════════════
# Neighbours
# ══════════════════════════════════════════════════════════════════════════

class TestNeighbors:

    def test_four_edge_neighbors(self):
        assert set(ORIGIN.neighbors()) == {Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1)}

    def test_no_diagonals(self):
        assert Point(1, 1) not in ORIGIN.neighbors()
