"""
4color - Data Models

This module contains the data model classes: points, transform matrices,
colors, figures and their views. This is the MODEL in MVC architecture.
Nothing here renders or reads input.

Public API: Import Point, Matrix, Color, Figure, FigureView, ViewState,
BoardSnapshot from models.
"""

from .point import Point, round_half_away
from .transform import Matrix, ViewState
from .color import Color
from .figure import Figure
from .figure_view import FigureView
from .snapshot import BoardSnapshot

__all__ = [
    'Point', 'round_half_away',
    'Matrix', 'ViewState',
    'Color',
    'Figure', 'FigureView',
    'BoardSnapshot',
]
