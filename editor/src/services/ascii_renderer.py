"""
4color - ASCII Renderer

Text pictures of tile sets, views and whole boards for the headless CLI,
logs and tests. Rows run from the largest y at the top to the smallest at
the bottom, so the picture has the same orientation as the grid.
"""

from typing import Dict, Iterable, List, Optional

from constants import ASCII_EMPTY, ASCII_OVERLAP, ASCII_TILE
from models.point import Point


def _bounds(tiles: Iterable[Point]):
    xs = [p.x for p in tiles]
    ys = [p.y for p in tiles]
    return min(xs), max(xs), min(ys), max(ys)


def render_tiles(tiles: Iterable[Point]) -> str:
    """Picture of a tile set: '# ' for a tile, '. ' for a gap.

    The last line holds the coordinates of the lower left cell, "x,y".

    Args:
        tiles: Integer points

    Returns:
        Multi-line string, empty for no tiles
    """
    tiles = set(tiles)
    if not tiles:
        return ''
    x_min, x_max, y_min, y_max = _bounds(tiles)
    lines = []
    for y in range(y_max, y_min - 1, -1):
        row = ''.join(ASCII_TILE if Point(x, y) in tiles else ASCII_EMPTY
                      for x in range(x_min, x_max + 1))
        lines.append(row)
    lines.append(f"{x_min},{y_min}")
    return '\n'.join(lines) + '\n'


def render_view(view) -> str:
    """Picture of one view's transformed tiles"""
    return render_tiles(view.tiles())


def render_board(views, width: Optional[int] = None, height: Optional[int] = None) -> str:
    """Picture of several views in one grid.

    Each view is drawn with the first letter of its color name; cells
    covered by more than one view show '*'.

    Args:
        views: FigureView objects
        width: Number of columns starting at x = 0 (default: fit the tiles)
        height: Number of rows starting at y = 0 (default: fit the tiles)

    Returns:
        Multi-line string, empty when nothing is drawn and no size is given
    """
    cells: Dict[Point, List[str]] = {}
    for view in views:
        letter = view.color().letter()
        for tile in view.tiles():
            cells.setdefault(tile, []).append(letter)

    if width is not None and height is not None:
        x_min, x_max, y_min, y_max = 0, width - 1, 0, height - 1
    elif cells:
        x_min, x_max, y_min, y_max = _bounds(cells)
    else:
        return ''

    lines = []
    for y in range(y_max, y_min - 1, -1):
        row = []
        for x in range(x_min, x_max + 1):
            letters = cells.get(Point(x, y))
            if not letters:
                row.append(ASCII_EMPTY)
            elif len(letters) > 1:
                row.append(ASCII_OVERLAP + ' ')
            else:
                row.append(letters[0] + ' ')
        lines.append(''.join(row).rstrip())
    return '\n'.join(lines) + '\n'
