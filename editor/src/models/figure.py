"""
4color - Figure Data Model

A Figure is the set of tiles the user edits: the shared ground truth that
every view projects. It knows nothing about transforms or colors.

This class handles:
- Toggle editing (symmetric difference with one tile)
- Centroid (exact arithmetic mean, origin when empty)
- Contiguity (4-neighbour flood fill, cached until the next mutation)
- Snapshot API (for undo/redo support)

Usage:
    figure = Figure([(1, 1), (1, 2), (2, 1)])
    figure.toggle(Point(2, 2))
    figure.is_contiguous()   # True
    figure.centroid()        # Point(3/2, 3/2)
"""

import logging
from fractions import Fraction
from typing import FrozenSet, Iterable, Iterator, Optional, Set

import numpy as np

from models.point import ORIGIN, Point


def flood_fill(tiles: Set[Point], start: Point) -> Set[Point]:
    """Collect the tiles reachable from start through shared edges.

    Args:
        tiles: Tile set to search
        start: Seed tile; nothing is reached if it is not in tiles

    Returns:
        Set of reachable tiles (diagonals do not connect)
    """
    found = set()
    stack = [start]
    while stack:
        p = stack.pop()
        if p in found or p not in tiles:
            continue
        found.add(p)
        stack.extend(p.neighbors())
    return found


def is_connected(tiles: Set[Point]) -> bool:
    """True if every tile is reachable from every other. Empty sets are connected."""
    if not tiles:
        return True
    return len(flood_fill(tiles, min(tiles))) == len(tiles)


class Figure:
    """Set of integer tiles with toggle editing.

    Views hold a reference to a Figure and mutate it only through
    toggle() and clear().
    """

    def __init__(self, tiles: Optional[Iterable] = None):
        """Create a figure, empty or from an iterable of Points / (x, y) pairs"""
        self._logger = logging.getLogger('Figure')
        self._tiles: Set[Point] = set()
        for tile in tiles or ():
            p = Point.of(tile)
            self._tiles.add(Point(int(p.x), int(p.y)))

        # Contiguity cache; None means stale
        self._contiguous: Optional[bool] = None

        self._logger.debug(f"Created figure with {len(self._tiles)} tiles")

    # ========================================
    # Queries
    # ========================================

    def tiles(self) -> FrozenSet[Point]:
        """Read-only copy of the current tiles"""
        return frozenset(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, p) -> bool:
        return Point.of(p) in self._tiles

    def __iter__(self) -> Iterator[Point]:
        return iter(sorted(self._tiles))

    def __repr__(self) -> str:
        return f"Figure({sorted(tuple(p) for p in self._tiles)})"

    def as_array(self) -> np.ndarray:
        """Tiles as an (n, 2) int64 array, sorted by (x, y)"""
        if not self._tiles:
            return np.zeros((0, 2), dtype=np.int64)
        return np.array([tuple(p) for p in sorted(self._tiles)], dtype=np.int64)

    def centroid(self) -> Point:
        """Arithmetic mean of the tile coordinates.

        Recomputed from scratch on every call; the sum is exact and the
        division produces Fractions, so there is no drift across edits.

        Returns:
            Point of Fractions, or the origin for an empty figure
        """
        if not self._tiles:
            return ORIGIN
        n = len(self._tiles)
        sx, sy = self.as_array().sum(axis=0)
        return Point(Fraction(int(sx), n), Fraction(int(sy), n))

    def is_contiguous(self) -> bool:
        """True if all tiles are connected through shared edges.

        Empty and single-tile figures are contiguous.
        """
        if self._contiguous is None:
            self._contiguous = is_connected(self._tiles)
        return self._contiguous

    # ========================================
    # Mutation
    # ========================================

    def toggle(self, p) -> None:
        """Remove p if it is a tile, otherwise add it.

        Args:
            p: Integer Point or (x, y) pair
        """
        p = Point.of(p)
        if p in self._tiles:
            self._tiles.remove(p)
            self._logger.debug(f"Removed tile {p}")
        else:
            self._tiles.add(p)
            self._logger.debug(f"Added tile {p}")
        self._contiguous = None

    def clear(self) -> None:
        """Remove every tile"""
        self._tiles.clear()
        self._contiguous = None
        self._logger.debug("Cleared figure")

    # ========================================
    # Snapshot API
    # ========================================

    def get_snapshot(self) -> FrozenSet[Point]:
        """Get the tile set (for undo)"""
        return self.tiles()

    def set_snapshot(self, tiles: Iterable[Point]) -> None:
        """Restore the tile set from get_snapshot()"""
        self._tiles = {Point.of(p) for p in tiles}
        self._contiguous = None
        self._logger.debug(f"Restored {len(self._tiles)} tiles from snapshot")
