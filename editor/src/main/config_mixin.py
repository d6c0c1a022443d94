"""Configuration management for GridMap"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields

from constants import (
	DEFAULT_MAX_HISTORY, DEFAULT_NUM_EDGE_TILES, DEFAULT_TILE_SIZE, DEFAULT_VIEW_SPACING,
)
from utils.logger import loggerRaise


@dataclass
class GridSettings:
	"""Board settings, persisted as JSON"""
	num_edge_tiles: int = DEFAULT_NUM_EDGE_TILES
	tile_size: int = DEFAULT_TILE_SIZE
	view_spacing: int = DEFAULT_VIEW_SPACING
	max_history: int = DEFAULT_MAX_HISTORY

	def validate(self):
		"""Check value ranges

		Raises:
			ValueError: If a size is not a positive integer or the spacing is negative
		"""
		for name in ('num_edge_tiles', 'tile_size', 'max_history'):
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, int) or value < 1:
				raise ValueError(f"{name} must be a positive integer, got {value!r}")
		if isinstance(self.view_spacing, bool) or not isinstance(self.view_spacing, int) or self.view_spacing < 0:
			raise ValueError(f"view_spacing must be a non-negative integer, got {self.view_spacing!r}")

	@classmethod
	def from_dict(cls, data):
		"""Build settings from a dict, ignoring unknown keys"""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(data) - known)
		if unknown:
			logging.getLogger('GridSettings').warning(f"Ignoring unknown settings: {', '.join(unknown)}")
		settings = cls(**{k: v for k, v in data.items() if k in known})
		settings.validate()
		return settings


class ConfigMixin:
	"""Configuration file operations

	Expects the host class to provide self.settings and self.config_file.
	"""

	def _load_config(self):
		"""Load settings from the config file, keeping defaults if it does not exist"""
		if not self.config_file or not os.path.exists(self.config_file):
			return self.settings
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				self.settings = GridSettings.from_dict(json.load(f))
		except Exception as e:
			loggerRaise(e, "Error loading config")
		self._logger.debug(f"Loaded settings from {self.config_file}: {self.settings}")
		return self.settings

	def _save_config(self):
		"""Save settings to the config file"""
		if not self.config_file:
			return
		try:
			config_dir = os.path.dirname(self.config_file)
			if config_dir:
				os.makedirs(config_dir, exist_ok=True)
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(asdict(self.settings), f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
		self._logger.debug(f"Saved settings to {self.config_file}")
