"""
Palette sorting by hue, saturation, lightness or luminance.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence

from .color import Color, ColorLike, as_color
from .perceptual import relative_luminance


class SortMethod(str, Enum):
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"
    LUMINANCE = "luminance"
    NONE = "none"


@dataclass(frozen=True)
class SortResult:
    colors: List[Color]
    # True when the palette was already in sorted order
    unchanged: bool


_SORT_KEYS: Dict[SortMethod, Callable[[Color], float]] = {
    SortMethod.HUE: lambda c: c.hsl.h,
    SortMethod.SATURATION: lambda c: -c.hsl.s,  # most saturated first
    SortMethod.LIGHTNESS: lambda c: c.hsl.l,
    SortMethod.LUMINANCE: relative_luminance,
}


def sort_colors(colors: Sequence[ColorLike], method: SortMethod = SortMethod.HUE) -> SortResult:
    """Stable sort of a palette; `none` returns the input as is."""
    method = SortMethod(method)
    palette = [as_color(c) for c in colors]

    if method == SortMethod.NONE:
        return SortResult(colors=palette, unchanged=False)

    ordered = sorted(palette, key=_SORT_KEYS[method])
    unchanged = bool(palette) and ordered == palette
    return SortResult(colors=ordered, unchanged=unchanged)
