"""
HueForge

Palette optimization and editor theme generation service.
"""

__version__ = "1.0.0"
