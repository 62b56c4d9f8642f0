"""
Perceptual Metrics Module

WCAG luminance and contrast, a cheap brightness heuristic for choosing
lighten/darken direction, and Euclidean RGB distance.

rgb_distance is plain Euclidean distance over 0-255 channels. It is not a
perceptual metric (no CIE Lab / Delta-E); it is cheap and discriminating enough
for diversity selection but does not track human similarity judgements near
the extremes of the gamut.
"""

import math
from typing import Sequence

import numpy as np

from .color import Color, ColorLike, as_color

WCAG_WEIGHTS = (0.2126, 0.7152, 0.0722)
MAX_RGB_DISTANCE = math.sqrt(3 * 255 ** 2)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """WCAG 2.0 relative luminance in [0, 1]."""
    c = as_color(color)
    wr, wg, wb = WCAG_WEIGHTS
    return wr * _linearize(c.r) + wg * _linearize(c.g) + wb * _linearize(c.b)


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """WCAG contrast ratio, symmetric, in [1, 21]."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    hi, lo = (l1, l2) if l1 > l2 else (l2, l1)
    return (hi + 0.05) / (lo + 0.05)


def is_dark(color: ColorLike) -> bool:
    """Fast perceived-brightness test used to pick lighten vs darken."""
    c = as_color(color)
    brightness = (c.r * 299 + c.g * 587 + c.b * 114) / 255000
    return brightness < 0.5


def rgb_distance(color1: ColorLike, color2: ColorLike) -> float:
    """Euclidean distance in raw RGB space, range [0, ~441.7]."""
    a = as_color(color1)
    b = as_color(color2)
    dr = a.r - b.r
    dg = a.g - b.g
    db = a.b - b.b
    return math.sqrt(dr * dr + dg * dg + db * db)


def pairwise_distances(colors: Sequence[Color]) -> np.ndarray:
    """
    Compute the full RGB distance matrix for a palette.

    Args:
        colors: Palette of Color values

    Returns:
        Array of shape (n, n) with Euclidean distances
    """
    if not colors:
        return np.zeros((0, 0), dtype=np.float64)
    points = np.array([c.rgb for c in colors], dtype=np.float64)  # Shape (n, 3)
    # Broadcasting: (n, 1, 3) - (1, n, 3) -> (n, n, 3) -> (n, n)
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=2)


def darken(color: ColorLike, percent: float) -> Color:
    """Scale every channel toward 0 by `percent` (0..1), floored."""
    c = as_color(color)
    factor = 1 - percent
    return Color(*(max(0, min(255, math.floor(ch * factor))) for ch in c.rgb))


def lighten(color: ColorLike, percent: float) -> Color:
    """Move every channel toward 255 by `percent` (0..1), floored."""
    c = as_color(color)
    return Color(*(max(0, min(255, math.floor(ch + (255 - ch) * percent))) for ch in c.rgb))


def add_alpha(color: ColorLike, alpha: str) -> str:
    """Append a two-digit hex alpha, producing #RRGGBBAA."""
    if len(alpha) != 2 or any(ch not in "0123456789abcdefABCDEF" for ch in alpha):
        raise ValueError(f"Invalid alpha component: {alpha!r}")
    return f"{as_color(color).hex}{alpha.upper()}"
