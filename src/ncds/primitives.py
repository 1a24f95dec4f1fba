"""
Design Primitives Module

Basic value types every NCDS token is built from: colors and font specs.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Tuple


class TokenValueError(ValueError):
    """Raised when a token is built from an invalid primitive value."""


def _check_channel(name: str, value: Any) -> None:
    # bool is an int subclass but never a valid channel
    if not isinstance(value, int) or isinstance(value, bool):
        raise TokenValueError(f"Color channel '{name}' must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise TokenValueError(f"Color channel '{name}' out of range [0, 255]: {value}")


@dataclass(frozen=True)
class Color:
    """
    RGBA color with 8-bit channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255), fully opaque by default
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            _check_channel(name, getattr(self, name))

    @classmethod
    def from_hex(cls, value: int, alpha: int = 255) -> 'Color':
        """
        Create a color from a packed 0xRRGGBB integer.

        Bits above the low 24 are ignored.

        Args:
            value: Packed RGB value, e.g. 0xEC1D31
            alpha: Alpha channel

        Returns:
            Color with channels extracted from value.
        """
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)

    @property
    def hex_value(self) -> int:
        """Packed 0xRRGGBB value (alpha not included)."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Convert to an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary"""
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}


class FontWeight(IntEnum):
    """Font weight on the usual 100-900 typographic scale"""
    REGULAR = 400
    MEDIUM = 500
    BOLD = 700


@dataclass(frozen=True)
class FontSpec:
    """
    Text rendering intent for a consumer.

    Attributes:
        family: Font family name
        size: Font size in logical pixels
        line_height: Line height in logical pixels
        weight: Font weight
    """
    family: str
    size: float
    line_height: float
    weight: FontWeight

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'family': self.family,
            'size': self.size,
            'line_height': self.line_height,
            'weight': int(self.weight),
        }
