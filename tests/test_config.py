"""
Tests for board settings and the JSON config file.

Covers:
- GridSettings defaults and validation
- Loading from a file (missing, partial, unknown keys, invalid)
- Saving and reloading
"""
import json
import logging

import pytest

from constants import DEFAULT_NUM_EDGE_TILES, DEFAULT_TILE_SIZE
from main.config_mixin import GridSettings
from main.grid_map import GridMap


class TestGridSettings:

    def test_defaults(self):
        settings = GridSettings()
        settings.validate()
        assert settings.num_edge_tiles == DEFAULT_NUM_EDGE_TILES
        assert settings.tile_size == DEFAULT_TILE_SIZE

    @pytest.mark.parametrize("kwargs", [
        {'num_edge_tiles': 0},
        {'tile_size': -5},
        {'max_history': 0},
        {'view_spacing': -1},
        {'tile_size': 2.5},
        {'tile_size': True},
        {'view_spacing': False},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GridSettings(**kwargs).validate()

    def test_zero_spacing_allowed(self):
        GridSettings(view_spacing=0).validate()

    def test_from_dict_ignores_unknown_keys(self, caplog):
        with caplog.at_level(logging.WARNING, logger='GridSettings'):
            settings = GridSettings.from_dict({'tile_size': 10, 'theme': 'dark'})
        assert settings.tile_size == 10
        assert 'theme' in caplog.text

    def test_from_dict_validates(self):
        with pytest.raises(ValueError):
            GridSettings.from_dict({'num_edge_tiles': -1})

    def test_from_dict_rejects_booleans(self):
        with pytest.raises(ValueError):
            GridSettings.from_dict(json.loads('{"tile_size": true}'))


class TestConfigFile:

    def test_missing_file_keeps_defaults(self, tmp_path):
        board = GridMap(config_file=str(tmp_path / 'missing.json'))
        assert board.settings == GridSettings()

    def test_partial_file(self, tmp_path):
        path = tmp_path / 'grid.json'
        path.write_text(json.dumps({'tile_size': 10, 'num_edge_tiles': 8}))
        board = GridMap(config_file=str(path))
        assert board.width == 80
        assert board.height == 90
        assert board.settings.view_spacing == GridSettings().view_spacing

    def test_spacing_from_file(self, tmp_path):
        path = tmp_path / 'grid.json'
        path.write_text(json.dumps({'view_spacing': 5}))
        board = GridMap(config_file=str(path))
        assert board.views[1].offset.x == 5

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'grid.json'
        path.write_text('{not json')
        with pytest.raises(ValueError):
            GridMap(config_file=str(path))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / 'grid.json'
        path.write_text(json.dumps({'max_history': 0}))
        with pytest.raises(ValueError):
            GridMap(config_file=str(path))

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / 'nested' / 'grid.json'
        board = GridMap(settings=GridSettings(tile_size=12), config_file=str(path))
        board._save_config()
        assert json.loads(path.read_text())['tile_size'] == 12
        assert GridMap(config_file=str(path)).settings.tile_size == 12

    def test_save_without_file_is_noop(self):
        GridMap()._save_config()
