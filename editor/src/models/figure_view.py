"""
4color - Figure View

A FigureView is a colored, independently transformed projection of a shared
Figure. It never stores tiles of its own: every query re-derives the
transformed tiles from the live Figure.

Transform model:
    A tile t of the figure is displayed at

        M (t - c) + c + k + d  =  M t + s,    s = round(c - M c + k) + d

    where M is the accumulated matrix, c the figure centroid (the pivot),
    k the centroid correction and d the integer offset. The pivot part is
    computed exactly and rounded once (half away from zero), so all tiles of
    a view move by the same integer amount and a shape never tears apart.
    d is added after rounding, so a translation moves every tile by exactly
    d whatever the orientation.

Editing through a view inverts that map, toggles the underlying tile, then
folds the centroid shift into k so that s, and with it every tile already
on screen, stays exactly where it was.
"""

import logging
from fractions import Fraction
from typing import Set

import numpy as np

from models.color import BLACK, Color
from models.point import ORIGIN, Point
from models.transform import (
    FLIP_X, FLIP_Y, IDENTITY, ROTATE_CCW, ROTATE_CW, Matrix, ViewState,
)


class FigureView:
    """Transformed view over a shared Figure.

    Mutating methods return the view itself so commands can be chained:

        view.rotate_cw().flip_x().translate(Point(3, 0)).tiles()
    """

    def __init__(self, figure, offset=ORIGIN, color: Color = BLACK):
        """
        Args:
            figure: Shared Figure (not owned)
            offset: Initial integer offset, restored by reset()
            color: Display color
        """
        if not isinstance(color, Color):
            raise TypeError("color must be a Color object")
        self._logger = logging.getLogger('FigureView')
        self._figure = figure
        offset = Point.of(offset)
        self._init_offset = Point(int(offset.x), int(offset.y))
        self._offset = self._init_offset
        self._correction = Point(Fraction(0), Fraction(0))
        self._matrix = IDENTITY
        self._color = color

    def __repr__(self) -> str:
        return (f"FigureView(color={self._color}, matrix={self._matrix}, "
                f"offset={self._offset}, correction={self._correction})")

    # ========================================
    # Properties
    # ========================================

    @property
    def figure(self):
        return self._figure

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def offset(self) -> Point:
        return self._offset

    @property
    def correction(self) -> Point:
        return self._correction

    def color(self) -> Color:
        return self._color

    # ========================================
    # Forward / Inverse Mapping
    # ========================================

    def _shift(self) -> Point:
        """Integer translation s applied after the matrix (see module doc)"""
        c = self._figure.centroid()
        pivot_shift = c - self._matrix * c + self._correction
        return pivot_shift.round() + self._offset

    def tiles(self) -> Set[Point]:
        """Transformed tiles, derived from the figure's current tiles.

        Never mutates the figure. An identity view with no offset returns
        exactly the figure's tiles.
        """
        if len(self._figure) == 0:
            return set()
        sx, sy = self._shift()
        coords = self._figure.as_array() @ self._matrix.as_array().T
        coords += np.array([sx, sy], dtype=np.int64)
        return {Point(int(x), int(y)) for x, y in coords}

    def source_tile(self, p) -> Point:
        """Figure tile displayed at view position p (inverse of tiles()).

        Args:
            p: Integer point in view space

        Returns:
            Integer point in figure space
        """
        p = Point.of(p)
        return self._matrix.transpose() * (p - self._shift())

    # ========================================
    # Editing
    # ========================================

    def toggle(self, p) -> 'FigureView':
        """Toggle the figure tile displayed at view position p.

        The centroid moves as a side effect of the edit. The change,
        transformed by this view's matrix minus the identity change, is
        added to the correction so this view's tiles stay in place.

        Args:
            p: Integer point in view space
        """
        target = self.source_tile(p)
        before = self._figure.centroid()
        self._figure.toggle(target)
        delta = self._figure.centroid() - before
        self._correction = self._correction + self._matrix * delta - delta
        self._logger.debug(f"Toggled {p} -> figure tile {target}, correction {self._correction}")
        return self

    # ========================================
    # Transform Operations
    # ========================================

    def translate(self, dr) -> 'FigureView':
        """Move the view by an integer vector"""
        dr = Point.of(dr)
        self._offset = self._offset + Point(int(dr.x), int(dr.y))
        return self

    def _apply(self, m: Matrix) -> 'FigureView':
        self._matrix = m * self._matrix
        self._logger.debug(f"Transform now {self._matrix}")
        return self

    def flip_x(self) -> 'FigureView':
        """Reflect about the horizontal axis through the centroid"""
        return self._apply(FLIP_X)

    def flip_y(self) -> 'FigureView':
        """Reflect about the vertical axis through the centroid"""
        return self._apply(FLIP_Y)

    def rotate_ccw(self) -> 'FigureView':
        return self._apply(ROTATE_CCW)

    def rotate_cw(self) -> 'FigureView':
        return self._apply(ROTATE_CW)

    def reset(self) -> 'FigureView':
        """Restore the initial offset and orientation. The figure is untouched."""
        self._offset = self._init_offset
        self._correction = Point(Fraction(0), Fraction(0))
        self._matrix = IDENTITY
        return self

    # ========================================
    # Snapshot API
    # ========================================

    def get_state(self) -> ViewState:
        return ViewState(self._matrix, self._offset, self._correction)

    def set_state(self, state: ViewState) -> None:
        self._matrix = state.matrix
        self._offset = state.offset
        self._correction = state.correction
