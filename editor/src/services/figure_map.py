"""
4color - Figure Map Service

Configuration-level checks over the views currently on the board. A figure
map groups the transformed tiles of every view by color; it is rebuilt for
each analysis pass and never stored.

needs_four_colors() is a pairwise adjacency heuristic over the current
placement, not a graph-coloring solver: it reports whether every colored
region touches every other one, which is the situation that forces four
distinct colors for four regions.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterable, Set

from constants import STATUS_LABELS
from models.color import Color
from models.point import Point

FigureMap = Dict[Color, Set[Point]]

logger = logging.getLogger(__name__)


def build_figure_map(views: Iterable) -> FigureMap:
    """Group the transformed tiles of each view by color.

    Views without tiles contribute no entry. Views sharing a color are merged.

    Args:
        views: FigureView objects

    Returns:
        Dict mapping Color -> set of tile positions
    """
    figure_map: FigureMap = {}
    for view in views:
        tiles = view.tiles()
        if tiles:
            figure_map.setdefault(view.color(), set()).update(tiles)
    return figure_map


def _as_figure_map(views_or_map) -> FigureMap:
    if isinstance(views_or_map, dict):
        return views_or_map
    return build_figure_map(views_or_map)


def visible_tile_count(views_or_map) -> int:
    """Number of distinct grid positions covered by any view.

    Args:
        views_or_map: FigureView objects or a prebuilt figure map
    """
    figure_map = _as_figure_map(views_or_map)
    visible = set()
    for tiles in figure_map.values():
        visible |= tiles
    return len(visible)


def has_overlap(views) -> bool:
    """True if at least two views cover the same position"""
    views = list(views)
    total = sum(len(view.tiles()) for view in views)
    return visible_tile_count(views) < total


def tile_touches(tile: Point, others: Set[Point]) -> bool:
    """True if tile shares an edge with any tile in others"""
    return any(n in others for n in tile.neighbors())


def tiles_touch(tiles: Set[Point], others: Set[Point]) -> bool:
    """True if some tile of tiles shares an edge with some tile of others"""
    return any(tile_touches(tile, others) for tile in tiles)


def needs_four_colors(views_or_map) -> bool:
    """True if every colored region touches every other one.

    A single region qualifies trivially; an empty board does not.

    Args:
        views_or_map: FigureView objects or a prebuilt figure map
    """
    figure_map = _as_figure_map(views_or_map)
    if not figure_map:
        return False
    for (color_a, tiles_a), (color_b, tiles_b) in combinations(figure_map.items(), 2):
        if not tiles_touch(tiles_a, tiles_b):
            logger.debug(f"{color_a} does not touch {color_b}")
            return False
    return True


@dataclass(frozen=True)
class BoardStatus:
    """Indicator lamps of the status row.

    Attributes:
        contiguous: The shared figure is one connected piece
        all_visible: No view hides a tile of another
        four_colors: Every pair of colored regions touches
    """
    contiguous: bool
    all_visible: bool
    four_colors: bool

    def lamps(self):
        """(label, lit) pairs in display order"""
        return list(zip(STATUS_LABELS, (self.contiguous, self.all_visible, self.four_colors)))

    def __str__(self) -> str:
        return ' '.join(label if lit else '-' for label, lit in self.lamps())


def board_status(figure, views) -> BoardStatus:
    """Compute the status lamps for a board.

    Args:
        figure: Shared Figure
        views: FigureView objects projecting that figure
    """
    views = list(views)
    figure_map = build_figure_map(views)
    all_visible = visible_tile_count(figure_map) == len(views) * len(figure)
    return BoardStatus(
        contiguous=figure.is_contiguous(),
        all_visible=all_visible,
        four_colors=needs_four_colors(figure_map),
    )
