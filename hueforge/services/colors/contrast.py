"""
Contrast Repair Module

Two tiers: adjust_for_contrast nudges a color step by step and may still fall
short; ensure_readable_contrast always returns a passing color by falling back
to pure black or white.
"""

from loguru import logger

from .color import Color, ColorLike, as_color
from .perceptual import contrast_ratio, darken, is_dark, lighten

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

ADJUST_STEP = 0.1


def adjust_for_contrast(color: ColorLike,
                        background: ColorLike,
                        min_contrast: float = 4.5,
                        max_iterations: int = 10) -> Color:
    """
    Lighten (dark background) or darken (light background) until the contrast
    target is met or the iteration budget runs out.

    Args:
        color: Color to adjust
        background: Background it is drawn on
        min_contrast: Target WCAG contrast ratio
        max_iterations: Maximum number of 10% steps

    Returns:
        Best-effort adjusted color; may still be below `min_contrast`
    """
    current = as_color(color)
    bg = as_color(background)
    step = lighten if is_dark(bg) else darken

    iterations = 0
    while contrast_ratio(current, bg) < min_contrast and iterations < max_iterations:
        current = step(current, ADJUST_STEP)
        iterations += 1

    if iterations == max_iterations and contrast_ratio(current, bg) < min_contrast:
        logger.debug(f"Contrast target {min_contrast} not reached for {as_color(color).hex} "
                     f"on {bg.hex}; best effort {current.hex}")

    return current


def ensure_readable_contrast(proposed: ColorLike,
                             background: ColorLike,
                             min_contrast: float = 4.5) -> Color:
    """
    Return `proposed` if it meets `min_contrast`, otherwise white or black,
    whichever contrasts more with the background (white on ties).
    """
    proposed_color = as_color(proposed)
    bg = as_color(background)

    if contrast_ratio(proposed_color, bg) >= min_contrast:
        return proposed_color

    if contrast_ratio(WHITE, bg) >= contrast_ratio(BLACK, bg):
        return WHITE
    return BLACK
