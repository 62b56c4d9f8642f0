"""
HueForge Color Space

Immutable color value type plus hex <-> RGB <-> HSL conversions.
HSL components are normalized to [0, 1]; hue wraps modulo 1.0.
"""

import colorsys
import math
import re
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

from hueforge.errors import FormatError

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


class HSL(NamedTuple):
    """Transient HSL representation, each component in [0, 1]."""
    h: float
    s: float
    l: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def _check_channel(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(value, f"channel {name} must be an integer")
    if not 0 <= value <= 255:
        raise FormatError(value, f"channel {name} outside [0, 255]")
    return value


@dataclass(frozen=True)
class Color:
    """A 24-bit sRGB color. Canonical text form is uppercase #RRGGBB."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        _check_channel(self.r, "r")
        _check_channel(self.g, "g")
        _check_channel(self.b, "b")

    @classmethod
    def parse(cls, hex_color: str) -> "Color":
        """Parse '#RRGGBB' or 'RRGGBB' (any case)."""
        if not isinstance(hex_color, str):
            raise FormatError(hex_color, "expected a string")
        match = HEX_PATTERN.match(hex_color.strip())
        if not match:
            raise FormatError(hex_color)
        num = int(match.group(1), 16)
        return cls((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        return cls(*hsl_to_rgb(h, s, l))

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


ColorLike = Union[str, Color]


def as_color(value: ColorLike) -> Color:
    """Coerce a hex string or Color into a Color."""
    if isinstance(value, Color):
        return value
    return Color.parse(value)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert a hex color to an (r, g, b) tuple.

    Args:
        hex_color: Color in format #RRGGBB (leading '#' optional, any case)

    Returns:
        Tuple of byte channels

    Raises:
        FormatError: if the string is not six hex digits
    """
    return Color.parse(hex_color).rgb


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert byte channels to an uppercase #RRGGBB string."""
    return Color(r, g, b).hex


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert byte channels to HSL.

    Hue ties between equal maximal channels resolve in R, G, B order.
    """
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return HSL(h, s, l)


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL back to byte channels, rounding half-up."""
    r, g, b = colorsys.hls_to_rgb(h % 1.0, l, s)
    return (
        max(0, min(255, round_half_up(r * 255))),
        max(0, min(255, round_half_up(g * 255))),
        max(0, min(255, round_half_up(b * 255))),
    )


def hex_to_hsl(hex_color: ColorLike) -> HSL:
    """Convert a hex string or Color to HSL."""
    return as_color(hex_color).hsl


def normalize_hex(hex_color: str) -> str:
    """Validate and canonicalize a hex string to uppercase #RRGGBB."""
    return Color.parse(hex_color).hex
