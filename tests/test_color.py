"""
Tests for the Color model.

Verifies:
- Palette lookup by name
- Clamping and conversions
- Equality ignores the name tag
"""
import pytest

from constants import NAMED_COLORS, VIEW_COLOR_NAMES
from models.color import BLACK, RED, Color


class TestColorFactories:

    @pytest.mark.parametrize("name", sorted(NAMED_COLORS))
    def test_from_name(self, name):
        color = Color.from_name(name)
        assert color.name == name
        assert color.to_float3() == NAMED_COLORS[name]

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            Color.from_name('mauve')

    def test_from_hex(self):
        assert Color.from_hex('#0000FF').to_float3() == (0.0, 0.0, 1.0)
        assert Color.from_hex('FFFF00') == Color.from_name('yellow')

    @pytest.mark.parametrize("text", ['#12345', 'GGGGGG', None, 42])
    def test_from_hex_invalid(self, text):
        assert Color.from_hex(text) is None


class TestColorValues:

    def test_clamped(self):
        assert Color(2.0, -1.0, 0.5).to_float3() == (1.0, 0.0, 0.5)

    def test_rgb255_and_hex(self):
        assert RED.to_rgb255() == (255, 0, 64)
        assert RED.to_hex() == '#FF0040'
        assert BLACK.to_hex() == '#000000'

    def test_letters_unique_for_views(self):
        letters = [Color.from_name(name).letter() for name in VIEW_COLOR_NAMES]
        assert letters == ['R', 'Y', 'G', 'B']
        assert Color(0.1, 0.2, 0.3).letter() == '?'

    def test_scaled(self):
        shade = Color.from_name('blue').scaled(0.5)
        assert shade.to_float3() == (0.0, 0.0, 0.5)
        assert shade.name == ''

    def test_iterates_components(self):
        assert list(Color(0.25, 0.5, 0.75)) == [0.25, 0.5, 0.75]

    def test_str(self):
        assert str(RED) == 'red'
        assert str(Color(0.0, 0.0, 0.0)) == '#000000'


class TestColorEquality:

    def test_name_ignored(self):
        assert Color(0.0, 0.0, 0.0) == BLACK
        assert hash(Color(0.0, 0.0, 0.0)) == hash(BLACK)

    def test_not_equal_to_tuple(self):
        assert RED != (1.0, 0.0, 0.25)

    def test_usable_as_dict_key(self):
        assert len({RED: 1, Color.from_name('red'): 2}) == 1
