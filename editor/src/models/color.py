"""
4color - Color Domain Model

Canonical color representation for views and rendering. Components are
normalized floats in [0, 1].
"""

from typing import Iterator, Optional, Tuple

from constants import NAMED_COLORS


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class Color:
    """Immutable RGB color with an optional name tag.

    Iterating a Color yields its (r, g, b) float triple, so it can be passed
    anywhere a component triple is expected.
    """

    __slots__ = ('_r', '_g', '_b', '_name')

    def __init__(self, r: float, g: float, b: float, name: str = ""):
        """Direct construction from normalized components (0-1).

        Args:
            r: Red component (0-1)
            g: Green component (0-1)
            b: Blue component (0-1)
            name: Optional color name (for palette colors)
        """
        self._r = _clamp(r)
        self._g = _clamp(g)
        self._b = _clamp(b)
        self._name = name

    @property
    def r(self) -> float:
        """Red component (0-1) - READ ONLY"""
        return self._r

    @property
    def g(self) -> float:
        """Green component (0-1) - READ ONLY"""
        return self._g

    @property
    def b(self) -> float:
        """Blue component (0-1) - READ ONLY"""
        return self._b

    @property
    def name(self) -> str:
        """Color name (empty string for custom colors) - READ ONLY"""
        return self._name

    # ========================================
    # Output Methods
    # ========================================

    def to_float3(self) -> Tuple[float, float, float]:
        return (self._r, self._g, self._b)

    def to_rgb255(self) -> Tuple[int, int, int]:
        """Convert to 8-bit components (0-255), rounded to nearest."""
        return tuple(int(round(c * 255)) for c in self.to_float3())

    def to_hex(self) -> str:
        """Convert to hex color string: #RRGGBB."""
        r, g, b = self.to_rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"

    def letter(self) -> str:
        """Single upper-case letter used by text renderers."""
        return self._name[:1].upper() if self._name else '?'

    def scaled(self, factor: float) -> 'Color':
        """Darker (factor < 1) or lighter copy of this color. Drops the name."""
        return Color(self._r * factor, self._g * factor, self._b * factor)

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def from_name(color_name: str) -> 'Color':
        """Create Color from a palette name.

        Args:
            color_name: Key of NAMED_COLORS

        Returns:
            Color object with the name tag preserved

        Raises:
            ValueError: If the name is not in the palette
        """
        if color_name not in NAMED_COLORS:
            raise ValueError(f"Unknown color name '{color_name}'")
        r, g, b = NAMED_COLORS[color_name]
        return Color(r, g, b, name=color_name)

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB or RRGGBB.

        Returns:
            Color object if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.lstrip('#')
        if len(hex_string) != 6:
            return None

        try:
            r = int(hex_string[0:2], 16)
            g = int(hex_string[2:4], 16)
            b = int(hex_string[4:6], 16)
        except ValueError:
            return None
        return Color(r / 255.0, g / 255.0, b / 255.0)

    # ========================================
    # Equality and Hashing
    # ========================================

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_float3())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_float3() == other.to_float3()

    def __hash__(self) -> int:
        return hash(self.to_float3())

    def __repr__(self) -> str:
        if self._name:
            return f"Color.from_name({self._name!r})"
        return f"Color({self._r}, {self._g}, {self._b})"

    def __str__(self) -> str:
        return self._name or self.to_hex()


BLACK = Color.from_name('black')
RED = Color.from_name('red')
YELLOW = Color.from_name('yellow')
GREEN = Color.from_name('green')
BLUE = Color.from_name('blue')
