"""
Shared fixtures for 4color tests.

Provides the example figures used across the model tests and a fresh board.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Example figures ─────────────────────────────────────────────────────
# Named by where their centroid falls: on a tile, on an edge, on a corner

EXAMPLE_TILES = {
    'dot':    [(-2, 0)],                           # center on tile
    'x_bar2': [(8, 7), (9, 7)],                    # center on edge
    'y_bar2': [(0, 0), (0, -1)],                   # center on edge
    'x_bar3': [(8, 7), (9, 7), (10, 7)],           # center on tile
    'y_bar3': [(0, 0), (0, -1), (0, -2)],          # center on tile
    'square': [(2, 2), (2, 3), (3, 3), (3, 2)],    # center on corner
    'ell':    [(1, 1), (1, 2), (1, 3), (2, 1)],    #  #
                                                   #  #
                                                   #  # #
    'tee':    [(1, 2), (2, 2), (3, 2), (2, 1)],    #  # # #
                                                   #    #
}


def as_points(pairs):
    """Set of Points from (x, y) pairs"""
    from models.point import Point
    return {Point(x, y) for x, y in pairs}


@pytest.fixture(params=sorted(EXAMPLE_TILES))
def example_name(request):
    """Name of each example figure in turn"""
    return request.param


@pytest.fixture
def example_figure(example_name):
    """Each example figure in turn"""
    from models.figure import Figure
    return Figure(EXAMPLE_TILES[example_name])


@pytest.fixture
def figure_of():
    """Factory: Figure from an example name"""
    from models.figure import Figure

    def make(name):
        return Figure(EXAMPLE_TILES[name])
    return make


@pytest.fixture
def view_of():
    """Factory: untransformed black view over a fresh example figure"""
    from models.figure import Figure
    from models.figure_view import FigureView

    def make(name):
        return FigureView(Figure(EXAMPLE_TILES[name]))
    return make


@pytest.fixture
def board():
    """Fresh default board"""
    from main.grid_map import GridMap
    return GridMap()
