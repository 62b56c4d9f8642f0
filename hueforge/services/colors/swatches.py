"""
HueForge Palette Swatches

Draws an optimized palette as one row of square chips and returns it as a
base64 PNG, so API clients can preview a palette without rendering it.
"""

import base64
import io
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw
from loguru import logger

from .color import ColorLike, as_color


def render_swatch_strip(colors: Sequence[ColorLike],
                        chip_size: int = 40,
                        highlight_index: Optional[int] = None,
                        border_color: Tuple[int, int, int] = (0, 0, 0),
                        border_width: int = 2) -> str:
    """
    Render a horizontal strip of color swatches.

    Args:
        colors: Palette to render
        chip_size: Size of each color chip in pixels
        highlight_index: Index of color to outline (e.g. the theme base color)
        border_color: RGB color for highlight border
        border_width: Width of highlight border in pixels

    Returns:
        Base64-encoded PNG image string
    """
    if not colors:
        raise ValueError("Empty colors list provided")
    if chip_size <= 0:
        raise ValueError(f"Invalid chip size: {chip_size}")

    palette = [as_color(c) for c in colors]
    k = len(palette)
    logger.debug(f"Rendering swatch strip with {k} colors, chip_size={chip_size}")

    img = Image.new("RGB", (chip_size * k, chip_size))
    draw = ImageDraw.Draw(img)

    for i, color in enumerate(palette):
        x_start = i * chip_size
        draw.rectangle([x_start, 0, x_start + chip_size - 1, chip_size - 1], fill=color.rgb)

    if highlight_index is not None and 0 <= highlight_index < k:
        x_start = highlight_index * chip_size
        draw.rectangle(
            [x_start, 0, x_start + chip_size - 1, chip_size - 1],
            outline=border_color,
            width=border_width
        )

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    b64_string = base64.b64encode(buffer.getvalue()).decode("ascii")
    logger.debug(f"Encoded swatch strip: {img.width}x{img.height} -> {len(b64_string)} chars")

    return b64_string
