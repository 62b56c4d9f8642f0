"""
HueForge Colors Module

Color space conversion, perceptual metrics, diversity selection, quality
scoring, harmony generation, contrast repair and palette optimization.
"""

from .color import (
    HSL, Color, ColorLike, as_color, hex_to_hsl, hex_to_rgb, hsl_to_rgb,
    normalize_hex, rgb_to_hex, rgb_to_hsl,
)
from .contrast import adjust_for_contrast, ensure_readable_contrast
from .diversity import select_diverse
from .harmony import HarmonyScheme, generate_harmony, rotate_hue
from .optimizer import OptimizerPolicy, improve_quality
from .perceptual import (
    add_alpha, contrast_ratio, darken, is_dark, lighten, relative_luminance, rgb_distance,
)
from .quality import PaletteQualityScore, PoorPair, QualityPolicy, calculate_quality
from .sorting import SortMethod, SortResult, sort_colors

__version__ = "1.0.0"

__all__ = [
    "HSL", "Color", "ColorLike", "as_color", "hex_to_hsl", "hex_to_rgb", "hsl_to_rgb",
    "normalize_hex", "rgb_to_hex", "rgb_to_hsl",
    "adjust_for_contrast", "ensure_readable_contrast",
    "select_diverse",
    "HarmonyScheme", "generate_harmony", "rotate_hue",
    "OptimizerPolicy", "improve_quality",
    "add_alpha", "contrast_ratio", "darken", "is_dark", "lighten", "relative_luminance",
    "rgb_distance",
    "PaletteQualityScore", "PoorPair", "QualityPolicy", "calculate_quality",
    "SortMethod", "SortResult", "sort_colors",
]
