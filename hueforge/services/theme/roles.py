"""
HueForge Theme Roles

Derives the named UI color roles shared by every theme schema from an
8-color base palette: appearance, background, foreground, two accents and
five semantic colors. Schema serializers only apply fixed transforms on top
of these roles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from loguru import logger

from hueforge.config import config
from hueforge.errors import InsufficientPaletteError
from hueforge.services.colors.color import Color, ColorLike, as_color
from hueforge.services.colors.contrast import adjust_for_contrast, ensure_readable_contrast
from hueforge.services.colors.harmony import HarmonyScheme
from hueforge.services.colors.optimizer import OptimizerPolicy, improve_quality
from hueforge.services.colors.perceptual import (
    add_alpha, darken, lighten, relative_luminance, rgb_distance,
)


class ThemeSchema(str, Enum):
    """Supported output theme schemas."""
    VSCODE = "vscode"
    ZED = "zed"


@dataclass
class ThemeConfig:
    """Named options for theme generation."""

    target_count: int = 12
    harmony_scheme: HarmonyScheme = HarmonyScheme.TRIADIC
    strict_mode: bool = False

    # WCAG targets: AAA for body text, AA for accents, looser for semantic roles
    foreground_contrast: float = 7.0
    accent_contrast: float = 4.5
    semantic_contrast: float = 3.5

    # Accents closer than these RGB distances get one corrective step
    accent_foreground_min_distance: float = 60.0
    accent_pair_min_distance: float = 50.0
    accent_nudge: float = 0.15

    min_colors: int = 8
    name: str = "Custom Palette Theme"
    author: str = "Image to Palette Generator"

    @classmethod
    def from_env(cls) -> "ThemeConfig":
        """
        Build a config from the HUEFORGE_* environment defaults.

        Raises:
            ValueError: if an environment value is out of range
        """
        if not config.validate_scheme(config.HARMONY_SCHEME):
            raise ValueError(f"Invalid HUEFORGE_HARMONY_SCHEME: {config.HARMONY_SCHEME}")
        if not config.validate_target_count(config.TARGET_COUNT):
            raise ValueError(f"Invalid HUEFORGE_TARGET_COUNT: {config.TARGET_COUNT}")
        for key in ("FOREGROUND_CONTRAST", "ACCENT_CONTRAST", "SEMANTIC_CONTRAST"):
            if not config.validate_contrast(getattr(config, key)):
                raise ValueError(f"Invalid HUEFORGE_{key}: {getattr(config, key)}")
        if not config.validate_accent_nudge(config.ACCENT_NUDGE):
            raise ValueError(f"Invalid HUEFORGE_ACCENT_NUDGE: {config.ACCENT_NUDGE}")

        return cls(
            target_count=config.TARGET_COUNT,
            harmony_scheme=HarmonyScheme(config.HARMONY_SCHEME),
            strict_mode=config.STRICT_MODE,
            foreground_contrast=config.FOREGROUND_CONTRAST,
            accent_contrast=config.ACCENT_CONTRAST,
            semantic_contrast=config.SEMANTIC_CONTRAST,
            accent_foreground_min_distance=config.ACCENT_FOREGROUND_MIN_DISTANCE,
            accent_pair_min_distance=config.ACCENT_PAIR_MIN_DISTANCE,
            accent_nudge=config.ACCENT_NUDGE,
            min_colors=config.MIN_THEME_COLORS,
            name=config.THEME_NAME,
            author=config.THEME_AUTHOR,
        )


@dataclass(frozen=True)
class ThemeRoles:
    """Role colors derived once per theme generation call."""
    dark_base: bool
    average_luminance: float
    base: Color         # c0, source of all surfaces
    background: Color
    foreground: Color
    accent1: Color      # c1: properties, icons, borders
    accent2: Color      # c2: primary accent, functions, blue
    green: Color        # c3: strings, success, added
    red: Color          # c4: errors, deleted
    yellow: Color       # c5: numbers, warnings, modified
    magenta: Color      # c6: keywords
    cyan: Color         # c7: types, operators

    @property
    def appearance(self) -> str:
        return "dark" if self.dark_base else "light"

    def recede(self, color: Color, percent: float) -> Color:
        """Move toward the background side (darken on dark themes)."""
        return darken(color, percent) if self.dark_base else lighten(color, percent)

    def emphasize(self, color: Color, percent: float) -> Color:
        """Move away from the background side (lighten on dark themes)."""
        return lighten(color, percent) if self.dark_base else darken(color, percent)

    @staticmethod
    def alpha(color: Color, alpha: str) -> str:
        return add_alpha(color, alpha)


def prepare_palette(palette: Sequence[ColorLike],
                    strict: Optional[bool] = None,
                    scheme: Optional[HarmonyScheme] = None,
                    theme_config: Optional[ThemeConfig] = None,
                    policy: Optional[OptimizerPolicy] = None) -> List[Color]:
    """
    Optimize the palette unless strict mode asks for it to be used as-is.

    `strict` and `scheme` default to the values in `theme_config`.
    """
    cfg = theme_config or ThemeConfig()
    strict = cfg.strict_mode if strict is None else strict
    scheme = cfg.harmony_scheme if scheme is None else HarmonyScheme(scheme)

    if strict:
        return [as_color(c) for c in palette]
    return improve_quality(palette, cfg.target_count, scheme, policy)


def derive_roles(palette: Sequence[ColorLike],
                 strict: Optional[bool] = None,
                 scheme: Optional[HarmonyScheme] = None,
                 theme_config: Optional[ThemeConfig] = None,
                 policy: Optional[OptimizerPolicy] = None) -> ThemeRoles:
    """
    Derive theme roles from a palette.

    Args:
        palette: Source colors
        strict: Use the palette as-is instead of optimizing it first
        scheme: Harmony rule for the optimizer
        theme_config: Contrast targets and limits
        policy: Optimizer bounds

    Returns:
        ThemeRoles for the first 8 colors of the (optimized) palette

    Raises:
        InsufficientPaletteError: fewer than `min_colors` usable colors
    """
    cfg = theme_config or ThemeConfig()
    colors = prepare_palette(palette, strict, scheme, cfg, policy)

    required = max(8, cfg.min_colors)
    if len(colors) < required:
        raise InsufficientPaletteError(len(colors), required)

    c0, c1_raw, c2_raw, c3_raw, c4_raw, c5_raw, c6_raw, c7_raw = colors[:8]

    average_luminance = sum(relative_luminance(c) for c in colors[:8]) / 8
    dark_base = average_luminance < 0.5

    # Darker palettes need less darkening (and lighter ones less lightening)
    if dark_base:
        background = darken(c0, 0.825 + average_luminance * 0.2)
        proposed_foreground = lighten(c0, 0.7)
    else:
        background = lighten(c0, 0.7 + (1 - average_luminance) * 0.25)
        proposed_foreground = darken(c0, 0.8)

    foreground = ensure_readable_contrast(proposed_foreground, background, cfg.foreground_contrast)

    def nudge(color: Color) -> Color:
        return lighten(color, cfg.accent_nudge) if dark_base else darken(color, cfg.accent_nudge)

    c1 = adjust_for_contrast(c1_raw, background, cfg.accent_contrast)
    c2 = adjust_for_contrast(c2_raw, background, cfg.accent_contrast)

    if rgb_distance(c1, foreground) < cfg.accent_foreground_min_distance:
        c1 = nudge(c1)
    if rgb_distance(c2, foreground) < cfg.accent_foreground_min_distance:
        c2 = nudge(c2)
    if rgb_distance(c1, c2) < cfg.accent_pair_min_distance:
        c2 = nudge(c2)

    c3, c4, c5, c6, c7 = (
        adjust_for_contrast(c, background, cfg.semantic_contrast)
        for c in (c3_raw, c4_raw, c5_raw, c6_raw, c7_raw)
    )

    logger.debug(f"Theme roles: appearance={'dark' if dark_base else 'light'} "
                 f"avg_lum={average_luminance:.3f} bg={background.hex} fg={foreground.hex}")

    return ThemeRoles(
        dark_base=dark_base,
        average_luminance=average_luminance,
        base=c0,
        background=background,
        foreground=foreground,
        accent1=c1,
        accent2=c2,
        green=c3,
        red=c4,
        yellow=c5,
        magenta=c6,
        cyan=c7,
    )
