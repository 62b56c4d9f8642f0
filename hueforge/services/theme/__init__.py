"""
HueForge Theme Module

Turns a palette into an editor color theme document. Roles are derived once
(`derive_roles`) and then serialized for the requested schema.
"""

import json
from typing import Any, Callable, Dict, Optional, Sequence, Union

from hueforge.services.colors.color import ColorLike
from hueforge.services.colors.harmony import HarmonyScheme
from hueforge.services.colors.optimizer import OptimizerPolicy

from .roles import ThemeConfig, ThemeRoles, ThemeSchema, derive_roles, prepare_palette
from .traverse import collect_theme_colors, find_invalid_colors, iter_theme_colors
from .vscode import build_vscode_theme
from .zed import build_zed_theme

ThemeDocument = Dict[str, Any]

SERIALIZERS: Dict[ThemeSchema, Callable[[ThemeRoles, Optional[ThemeConfig]], ThemeDocument]] = {
    ThemeSchema.VSCODE: build_vscode_theme,
    ThemeSchema.ZED: build_zed_theme,
}


def map_to_theme(palette: Sequence[ColorLike],
                 schema: Union[ThemeSchema, str] = ThemeSchema.VSCODE,
                 strict: Optional[bool] = None,
                 scheme: Optional[HarmonyScheme] = None,
                 theme_config: Optional[ThemeConfig] = None,
                 policy: Optional[OptimizerPolicy] = None) -> ThemeDocument:
    """
    Generate a theme document from a palette.

    Args:
        palette: Source colors (hex strings or Color)
        schema: Output schema, `vscode` or `zed`
        strict: Use the palette as-is instead of optimizing it first
        scheme: Harmony rule used by the optimizer
        theme_config: Contrast targets, name and author
        policy: Optimizer bounds

    Returns:
        Theme document as a JSON-serializable dict

    Raises:
        InsufficientPaletteError: fewer than 8 usable colors
        FormatError: a palette entry is not a valid hex color
        ValueError: unknown schema
    """
    serializer = SERIALIZERS[ThemeSchema(schema)]
    roles = derive_roles(palette, strict, scheme, theme_config, policy)
    return serializer(roles, theme_config)


def generate_vscode_theme(palette: Sequence[ColorLike], **kwargs) -> ThemeDocument:
    return map_to_theme(palette, ThemeSchema.VSCODE, **kwargs)


def generate_zed_theme(palette: Sequence[ColorLike], **kwargs) -> ThemeDocument:
    return map_to_theme(palette, ThemeSchema.ZED, **kwargs)


def dump_theme(document: ThemeDocument) -> str:
    """Serialize a theme document as indented JSON."""
    return json.dumps(document, indent=2)


__all__ = [
    "ThemeConfig", "ThemeDocument", "ThemeRoles", "ThemeSchema",
    "derive_roles", "prepare_palette",
    "build_vscode_theme", "build_zed_theme",
    "map_to_theme", "generate_vscode_theme", "generate_zed_theme", "dump_theme",
    "iter_theme_colors", "collect_theme_colors", "find_invalid_colors",
]
