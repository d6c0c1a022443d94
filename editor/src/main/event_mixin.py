"""Keyboard and mouse command handlers for GridMap"""

from constants import KEY_COMMANDS
from models.point import Point


class EventMixin:
	"""Maps key names and clicks onto board commands

	Expects the host class to provide focused_view, focus_next_figure(), focus_figure(),
	clear(), undo(), redo(), point() and _save_state().
	"""

	# Commands that act on the focused view, with their history descriptions
	_VIEW_COMMANDS = {
		'translate': "Move figure",
		'rotate_ccw': "Rotate left",
		'rotate_cw': "Rotate right",
		'flip_x': "Flip about x",
		'flip_y': "Flip about y",
	}

	def handle_key(self, key):
		"""Run the command bound to a key

		Args:
			key: Key name (see constants.KEY_COMMANDS)

		Returns:
			True if the key is bound and the command ran, False otherwise
		"""
		binding = KEY_COMMANDS.get(key)
		if binding is None:
			self._logger.debug(f"Unbound key: {key}")
			return False
		command, argument = binding
		self.run_command(command, argument)
		return True

	def run_command(self, command, argument=None):
		"""Run a named board command

		Args:
			command: 'translate', 'rotate_ccw', 'rotate_cw', 'flip_x', 'flip_y',
				'focus_next', 'focus', 'clear', 'undo' or 'redo'
			argument: Tile delta for 'translate', view index for 'focus',
				unused otherwise

		Raises:
			ValueError: If the command is unknown or the view index is out of range
		"""
		if command in self._VIEW_COMMANDS:
			method = getattr(self.focused_view, command)
			if argument is None:
				method()
			else:
				method(Point.of(argument))
			self._save_state(self._VIEW_COMMANDS[command])
		elif command == 'focus_next':
			self.focus_next_figure()
			self._save_state("Focus next figure")
		elif command == 'focus':
			self.focus_figure(argument)
			self._save_state(f"Focus figure {argument}")
		elif command == 'clear':
			self.clear()
			self._save_state("Clear")
		elif command == 'undo':
			self.undo()
		elif command == 'redo':
			self.redo()
		else:
			raise ValueError(f"Unknown command '{command}'")

	def handle_click(self, x, y):
		"""Toggle the tile under a pixel in the focused view

		Args:
			x: Pixel column, from the left
			y: Pixel row, from the top

		Returns:
			The view-space tile that was toggled
		"""
		tile = self.point(x, y)
		self.toggle_tile(tile)
		return tile

	def toggle_tile(self, tile):
		"""Toggle a view-space tile in the focused view and record it"""
		tile = Point.of(tile)
		self.focused_view.toggle(tile)
		self._save_state(f"Toggle tile {tile}")
