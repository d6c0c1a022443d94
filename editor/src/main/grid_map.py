"""
4color - Grid Map (board controller)

Owns the shared Figure and its four colored views and turns input commands
into model operations. It holds no toolkit objects: a window shell forwards
key names and pixel clicks, then redraws from views and status().

Usage:
    board = GridMap()
    board.handle_click(30, 310)      # toggle a tile in the focused view
    board.handle_key('Page_Up')      # rotate the focused view
    board.handle_key('Tab')          # focus the next view
    board.status().four_colors
    board.undo()
"""

import logging

from constants import GRID_SHADE_FACTOR, VIEW_COLOR_NAMES
from main.config_mixin import ConfigMixin, GridSettings
from main.event_mixin import EventMixin
from main.history_mixin import HistoryMixin
from models.color import Color
from models.figure import Figure
from models.figure_view import FigureView
from models.point import Point
from services.figure_map import board_status
from utils.history_manager import HistoryManager


class GridMap(ConfigMixin, EventMixin, HistoryMixin):
    """Board of one shared figure and several transformed views"""

    def __init__(self, settings: GridSettings = None, config_file: str = None,
                 color_names=VIEW_COLOR_NAMES):
        """
        Args:
            settings: Board settings (default: GridSettings())
            config_file: Optional JSON file to load settings from
            color_names: Palette names of the views, in focus order
        """
        self._logger = logging.getLogger('GridMap')
        self.config_file = config_file
        self.settings = settings or GridSettings()
        self._load_config()
        self.settings.validate()

        self.figure = Figure()
        self.views = []
        for i, name in enumerate(color_names):
            offset = Point(i * self.settings.view_spacing, 0)
            self.views.append(FigureView(self.figure, offset, Color.from_name(name)))
        if not self.views:
            raise ValueError("A board needs at least one view")
        self.focused_index = 0

        self.history_manager = HistoryManager(max_history=self.settings.max_history)
        self._is_applying_history = False
        self._save_state("New board")

        self._logger.debug(f"Created board with {len(self.views)} views")

    # ========================================
    # Focus
    # ========================================

    @property
    def focused_view(self) -> FigureView:
        return self.views[self.focused_index]

    def focus_next_figure(self):
        """Move focus to the next view, wrapping around"""
        self.focused_index = (self.focused_index + 1) % len(self.views)

    def focus_figure(self, index: int):
        """Move focus to the view at index

        Raises:
            ValueError: If there is no view at index
        """
        if not 0 <= index < len(self.views):
            raise ValueError(f"View index {index} out of range 0..{len(self.views) - 1}")
        self.focused_index = index

    def grid_color(self) -> Color:
        """Grid line color: a darker shade of the focused view's color"""
        return self.focused_view.color().scaled(GRID_SHADE_FACTOR)

    # ========================================
    # Board Operations
    # ========================================

    def apply(self, action, all_views=False):
        """Call action(view) on the focused view, or on every view

        Args:
            action: Function taking a FigureView
            all_views: Apply to every view instead of only the focused one
        """
        targets = self.views if all_views else [self.focused_view]
        for view in targets:
            action(view)

    def clear(self):
        """Erase the tiles and reset each view's position and orientation"""
        self.figure.clear()
        self.apply(FigureView.reset, all_views=True)
        self._logger.debug("Cleared board")

    def load_tiles(self, tiles, description="Load tiles"):
        """Replace the figure's tiles, reset every view and record the change

        Args:
            tiles: Iterable of Points or (x, y) pairs
        """
        self.figure.set_snapshot(Point.of(tile) for tile in tiles)
        self.apply(FigureView.reset, all_views=True)
        self._save_state(description)

    def status(self):
        """Indicator lamps for the current placement"""
        return board_status(self.figure, self.views)

    # ========================================
    # Geometry
    # ========================================

    @property
    def width(self) -> int:
        """Grid width in pixels"""
        return self.settings.num_edge_tiles * self.settings.tile_size

    @property
    def height(self) -> int:
        """Grid height in pixels, including the status row"""
        return self.width + self.settings.tile_size

    def point(self, x, y) -> Point:
        """Tile under a pixel. Pixels grow downward, tiles grow upward."""
        return Point(int(x), self.height - int(y)) // self.settings.tile_size
