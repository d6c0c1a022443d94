"""
Undo/Redo History Manager for 4color

Keeps board snapshots in an ordered list with a cursor. Saving after an undo
drops the redo branch; undo and redo stop at either end and never wrap.
The oldest entry is discarded once the list grows past max_history.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any

from constants import DEFAULT_MAX_HISTORY


@dataclass(frozen=True)
class HistoryEntry:
	"""One recorded state and the action that produced it"""
	data: Any
	description: str = ""


class HistoryManager:
	"""Undo/redo cursor over a bounded list of state snapshots"""

	def __init__(self, max_history=DEFAULT_MAX_HISTORY):
		"""
		Args:
			max_history: Number of entries kept, including the current one

		Raises:
			ValueError: If max_history is smaller than 1
		"""
		if max_history < 1:
			raise ValueError(f"max_history must be at least 1, got {max_history}")
		self._logger = logging.getLogger('HistoryManager')
		self.max_history = max_history
		self.history = []
		self.current_index = -1  # -1 while empty
		self._listeners = []

	# ========================================
	# Recording
	# ========================================

	def save_state(self, state_data, description=""):
		"""Record a state as the new current entry

		Args:
			state_data: Snapshot to record; stored as a deep copy
			description: Label of the action that produced it
		"""
		del self.history[self.current_index + 1:]
		self.history.append(HistoryEntry(copy.deepcopy(state_data), description))

		overflow = len(self.history) - self.max_history
		if overflow > 0:
			del self.history[:overflow]
		self.current_index = len(self.history) - 1

		self._logger.debug(f"Saved '{description}' ({self.current_index + 1}/{len(self.history)})")
		self._notify_listeners()

	def clear(self):
		"""Forget every entry"""
		self.history = []
		self.current_index = -1
		self._logger.debug("History cleared")
		self._notify_listeners()

	# ========================================
	# Navigation
	# ========================================

	def can_undo(self):
		return self.current_index > 0

	def can_redo(self):
		return self.current_index < len(self.history) - 1

	def undo(self):
		"""Step back one entry

		Returns:
			Copy of the previous state, or None at the oldest entry
		"""
		if not self.can_undo():
			self._logger.debug("Nothing to undo")
			return None
		return self._step(-1)

	def redo(self):
		"""Step forward one entry

		Returns:
			Copy of the next state, or None at the newest entry
		"""
		if not self.can_redo():
			self._logger.debug("Nothing to redo")
			return None
		return self._step(1)

	def _step(self, delta):
		self.current_index += delta
		entry = self.history[self.current_index]
		self._logger.debug(f"Moved to '{entry.description}' (index {self.current_index})")
		self._notify_listeners()
		return copy.deepcopy(entry.data)

	# ========================================
	# Descriptions
	# ========================================

	def _description_at(self, index):
		if 0 <= index < len(self.history):
			return self.history[index].description
		return ""

	def get_current_description(self):
		return self._description_at(self.current_index)

	def get_undo_description(self):
		"""Label of the entry undo() would restore, or "" """
		return self._description_at(self.current_index - 1) if self.can_undo() else ""

	def get_redo_description(self):
		"""Label of the entry redo() would restore, or "" """
		return self._description_at(self.current_index + 1) if self.can_redo() else ""

	# ========================================
	# Listeners
	# ========================================

	def add_listener(self, callback):
		"""Register callback(can_undo, can_redo), called after every change"""
		self._listeners.append(callback)

	def remove_listener(self, callback):
		if callback in self._listeners:
			self._listeners.remove(callback)

	def _notify_listeners(self):
		can_undo, can_redo = self.can_undo(), self.can_redo()
		for callback in list(self._listeners):
			callback(can_undo, can_redo)
