"""
HueForge Color Harmony Engine

Generates hue-wheel companions for a base color: complementary, triadic,
analogous and split-complementary. Companions keep the base saturation and
lightness; only the hue is rotated.
"""

from enum import Enum
from typing import Dict, List, Tuple

from .color import Color, ColorLike, as_color


class HarmonyScheme(str, Enum):
    """Supported harmony rules."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"


# Companion hue offsets in degrees, applied to the base hue (or, for
# split-complementary, to the complement of the base hue)
_SCHEME_OFFSETS: Dict[HarmonyScheme, Tuple[float, ...]] = {
    HarmonyScheme.COMPLEMENTARY: (180,),
    HarmonyScheme.TRIADIC: (120, 240),
    HarmonyScheme.ANALOGOUS: (-30, 30),
    HarmonyScheme.SPLIT_COMPLEMENTARY: (-30, 30),
}


def rotate_hue(h: float, degrees: float) -> float:
    """Turn a [0, 1) hue by `degrees` around the wheel, wrapping into [0, 1)."""
    return (h + degrees / 360.0) % 1.0


def generate_harmony(base: ColorLike,
                     scheme: HarmonyScheme = HarmonyScheme.TRIADIC) -> List[Color]:
    """
    Generate the harmony palette for a base color.

    Args:
        base: Base color (#RRGGBB or Color)
        scheme: Harmony rule, enum member or its string value

    Returns:
        Palette with the base at index 0 followed by its companions
    """
    base_color = as_color(base)
    scheme = HarmonyScheme(scheme)
    h, s, l = base_color.hsl

    anchor = rotate_hue(h, 180) if scheme == HarmonyScheme.SPLIT_COMPLEMENTARY else h

    colors = [base_color]
    for offset in _SCHEME_OFFSETS[scheme]:
        colors.append(Color.from_hsl(rotate_hue(anchor, offset), s, l))

    return colors
