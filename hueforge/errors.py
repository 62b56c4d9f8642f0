"""
HueForge Errors
Typed failures raised at the color-parsing and theme boundaries.
"""
from typing import Any


class HueForgeError(Exception):
    """Base class for all HueForge errors."""


class FormatError(HueForgeError, ValueError):
    """A color value could not be parsed or is out of range."""

    def __init__(self, value: Any, reason: str = "expected #RRGGBB"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid hex color format: {value!r} ({reason})")


class InsufficientPaletteError(HueForgeError):
    """Too few usable colors reached the theme mapper."""

    def __init__(self, actual: int, required: int):
        self.actual = actual
        self.required = required
        super().__init__(
            f"Not enough colors to generate theme. Got {actual}, need at least {required}. "
            "Select more or larger image regions."
        )
