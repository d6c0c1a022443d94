"""History management and undo/redo for GridMap"""

from models.snapshot import BoardSnapshot
from utils.logger import loggerRaise


class HistoryMixin:
    """Undo/redo system and board snapshots

    Expects the host class to provide:
    - self.figure: Shared Figure
    - self.views: List of FigureView
    - self.focused_index: Index of the focused view
    - self.history_manager: HistoryManager
    - self._is_applying_history: Reentrancy guard
    - self._logger: Logger instance
    """

    def get_snapshot(self) -> BoardSnapshot:
        """Capture figure tiles, every view's transform and the focus"""
        return BoardSnapshot(
            tiles=self.figure.get_snapshot(),
            views=tuple(view.get_state() for view in self.views),
            focused=self.focused_index,
        )

    def set_snapshot(self, snapshot: BoardSnapshot):
        """Restore a snapshot from get_snapshot()

        Raises:
            ValueError: If the snapshot was taken from a board with a different number of views
        """
        if len(snapshot.views) != len(self.views):
            raise ValueError(
                f"Snapshot has {len(snapshot.views)} views, board has {len(self.views)}"
            )
        self.figure.set_snapshot(snapshot.tiles)
        for view, state in zip(self.views, snapshot.views):
            view.set_state(state)
        self.focused_index = snapshot.focused % len(self.views)

    def _restore_state(self, state):
        """Restore a state from history"""
        if not state:
            return

        self._is_applying_history = True
        try:
            self.set_snapshot(state)
        except Exception as e:
            loggerRaise(e, "Error restoring history state")
        finally:
            self._is_applying_history = False

    def _save_state(self, description):
        """Save current state to history"""
        if self._is_applying_history:
            return  # Don't save state during undo/redo

        self.history_manager.save_state(self.get_snapshot(), description)

    def undo(self):
        """Undo the last action

        Returns:
            True if a state was restored
        """
        state = self.history_manager.undo()
        if state:
            self._restore_state(state)
            self._logger.debug(f"Undo: now at '{self.history_manager.get_current_description()}'")
            return True
        return False

    def redo(self):
        """Redo the last undone action

        Returns:
            True if a state was restored
        """
        state = self.history_manager.redo()
        if state:
            self._restore_state(state)
            self._logger.debug(f"Redo: now at '{self.history_manager.get_current_description()}'")
            return True
        return False
