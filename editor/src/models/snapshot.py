"""Board snapshot value used by the undo/redo history."""
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from models.point import Point
from models.transform import ViewState


@dataclass(frozen=True)
class BoardSnapshot:
    """Complete, comparable state of a board.

    Attributes:
        tiles: Tiles of the shared figure
        views: Transform state of each view, in board order
        focused: Index of the focused view
    """
    tiles: FrozenSet[Point]
    views: Tuple[ViewState, ...]
    focused: int = 0
