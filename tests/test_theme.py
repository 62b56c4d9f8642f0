"""
Tests for theme role derivation and the VS Code / Zed serializers.
"""

import json

import pytest

from hueforge.errors import InsufficientPaletteError
from hueforge.services.colors import (
    Color, contrast_ratio, darken, lighten, relative_luminance,
)
from hueforge.services.theme import (
    ThemeConfig, ThemeSchema, collect_theme_colors, derive_roles, dump_theme,
    find_invalid_colors, generate_vscode_theme, generate_zed_theme, iter_theme_colors,
    map_to_theme,
)
from hueforge.services.theme.zed import variant_name


class TestDeriveRoles:
    """Test the roles shared by every schema."""

    def test_too_few_colors_in_strict_mode(self, dark_palette):
        with pytest.raises(InsufficientPaletteError) as exc_info:
            derive_roles(dark_palette[:7], strict=True)

        assert exc_info.value.actual == 7
        assert exc_info.value.required == 8
        assert "Got 7, need at least 8" in str(exc_info.value)
        assert "Select more or larger image regions" in str(exc_info.value)

    def test_too_few_colors_after_optimization(self):
        with pytest.raises(InsufficientPaletteError) as exc_info:
            derive_roles(["#FF0000", "#00FF00", "#0000FF"], strict=False)
        assert exc_info.value.actual == 3

    def test_min_colors_never_below_eight(self, dark_palette):
        with pytest.raises(InsufficientPaletteError) as exc_info:
            derive_roles(dark_palette[:7], strict=True, theme_config=ThemeConfig(min_colors=4))
        assert exc_info.value.required == 8

    def test_dark_palette(self, dark_palette):
        roles = derive_roles(dark_palette, strict=True)

        average = sum(relative_luminance(c) for c in dark_palette) / 8
        assert roles.dark_base
        assert roles.appearance == "dark"
        assert roles.average_luminance == pytest.approx(average)
        assert roles.base.hex == "#101020"
        assert roles.background == darken("#101020", 0.825 + average * 0.2)

    def test_light_palette(self, light_palette):
        roles = derive_roles(light_palette, strict=True)

        average = sum(relative_luminance(c) for c in light_palette) / 8
        assert not roles.dark_base
        assert roles.appearance == "light"
        assert roles.background == lighten("#F0F0F0", 0.7 + (1 - average) * 0.25)

    @pytest.mark.parametrize("palette_fixture", ["dark_palette", "light_palette"])
    def test_foreground_is_readable(self, palette_fixture, request):
        roles = derive_roles(request.getfixturevalue(palette_fixture), strict=True)
        assert contrast_ratio(roles.foreground, roles.background) >= 7.0

    def test_accent_and_semantic_contrast_on_dark(self, dark_palette):
        roles = derive_roles(dark_palette, strict=True)

        for accent in (roles.accent1, roles.accent2):
            assert contrast_ratio(accent, roles.background) >= 4.5
        for semantic in (roles.green, roles.red, roles.yellow, roles.magenta, roles.cyan):
            assert contrast_ratio(semantic, roles.background) >= 3.5

    def test_recede_and_emphasize_follow_appearance(self, dark_palette, light_palette):
        dark = derive_roles(dark_palette, strict=True)
        light = derive_roles(light_palette, strict=True)
        gray = Color.parse("#808080")

        assert dark.recede(gray, 0.5) == darken(gray, 0.5)
        assert dark.emphasize(gray, 0.5) == lighten(gray, 0.5)
        assert light.recede(gray, 0.5) == lighten(gray, 0.5)
        assert light.emphasize(gray, 0.5) == darken(gray, 0.5)

    def test_strict_defaults_from_config(self, dark_palette):
        with pytest.raises(InsufficientPaletteError):
            derive_roles(dark_palette[:7], theme_config=ThemeConfig(strict_mode=True))

    def test_non_strict_uses_optimized_palette(self, well_separated):
        roles = derive_roles(well_separated, strict=False)
        assert roles.base.hex == "#000000"


DARK_SEMANTICS = ["#208020", "#C03030", "#C0C020", "#A040A0", "#20A0A0"]
LIGHT_SEMANTICS = ["#F0F0F0", "#FFE0E0", "#E0FFE0", "#E0E0FF", "#FFFFD0"]


class TestAccentNudges:
    """Test the single corrective step applied to crowded accents."""

    def test_dark_accent1_near_foreground(self):
        roles = derive_roles(["#000000", "#B4B4B4", "#FF0000"] + DARK_SEMANTICS, strict=True)

        assert roles.dark_base
        assert roles.foreground.hex == "#B2B2B2"
        assert roles.accent1 == lighten("#B4B4B4", 0.15)
        assert roles.accent2.hex == "#FF0000"

    def test_dark_accent2_near_foreground(self):
        roles = derive_roles(["#000000", "#FF0000", "#B4B4B4"] + DARK_SEMANTICS, strict=True)

        assert roles.accent1.hex == "#FF0000"
        assert roles.accent2 == lighten("#B4B4B4", 0.15)

    def test_dark_accents_close_to_each_other(self):
        roles = derive_roles(["#000000", "#FF0000", "#F01010"] + DARK_SEMANTICS, strict=True)

        assert roles.accent1.hex == "#FF0000"
        assert roles.accent2 == lighten("#F01010", 0.15)

    def test_light_accent1_near_foreground(self):
        roles = derive_roles(["#FFFFFF", "#303030", "#0000C0"] + LIGHT_SEMANTICS, strict=True)

        assert not roles.dark_base
        assert roles.foreground == darken("#FFFFFF", 0.8)
        assert roles.accent1 == darken("#303030", 0.15)
        assert roles.accent2.hex == "#0000C0"

    def test_light_accents_close_to_each_other(self):
        roles = derive_roles(["#FFFFFF", "#0000C0", "#0808C8"] + LIGHT_SEMANTICS, strict=True)

        assert roles.accent1.hex == "#0000C0"
        assert roles.accent2 == darken("#0808C8", 0.15)

    def test_well_separated_accents_untouched(self):
        roles = derive_roles(["#000000", "#FF0000", "#6080FF"] + DARK_SEMANTICS, strict=True)

        assert roles.accent1.hex == "#FF0000"
        assert roles.accent2.hex == "#6080FF"

    def test_nudge_size_is_configurable(self):
        theme_config = ThemeConfig(accent_nudge=0.3)
        roles = derive_roles(["#000000", "#B4B4B4", "#FF0000"] + DARK_SEMANTICS,
                             strict=True, theme_config=theme_config)

        assert roles.accent1 == lighten("#B4B4B4", 0.3)


class TestVSCodeTheme:
    """Test the VS Code color theme document."""

    def test_document_shape(self, dark_palette):
        theme = map_to_theme(dark_palette, ThemeSchema.VSCODE, strict=True)

        assert theme["$schema"] == "vscode://schemas/color-theme"
        assert theme["name"] == "Custom Palette Theme"
        assert theme["type"] == "dark"
        assert isinstance(theme["colors"], dict)
        assert isinstance(theme["tokenColors"], list)
        assert all("scope" in rule and "settings" in rule for rule in theme["tokenColors"])

    def test_core_colors_follow_roles(self, dark_palette):
        roles = derive_roles(dark_palette, strict=True)
        theme = map_to_theme(dark_palette, "vscode", strict=True)
        colors = theme["colors"]

        assert colors["editor.background"] == roles.background.hex
        assert colors["editor.foreground"] == roles.foreground.hex
        assert colors["terminal.ansiRed"] == roles.red.hex
        assert colors["focusBorder"] == roles.accent2.hex + "60"

    def test_light_theme_type(self, light_palette):
        theme = generate_vscode_theme(light_palette, strict=True)
        assert theme["type"] == "light"

    @pytest.mark.parametrize("palette_fixture", ["dark_palette", "light_palette"])
    def test_every_color_is_valid_hex(self, palette_fixture, request):
        theme = generate_vscode_theme(request.getfixturevalue(palette_fixture), strict=True)
        assert find_invalid_colors(theme) == {}
        assert len(list(iter_theme_colors(theme))) > 100

    def test_custom_name(self, dark_palette):
        theme = map_to_theme(dark_palette, strict=True, theme_config=ThemeConfig(name="Dusk"))
        assert theme["name"] == "Dusk"

    def test_deterministic(self, dark_palette):
        assert map_to_theme(dark_palette, strict=True) == map_to_theme(dark_palette, strict=True)


class TestZedTheme:
    """Test the Zed theme family document."""

    def test_document_shape(self, dark_palette):
        theme = generate_zed_theme(dark_palette, strict=True)

        assert theme["$schema"] == "https://zed.dev/schema/themes/v0.2.0.json"
        assert theme["author"] == "Image to Palette Generator"
        assert len(theme["themes"]) == 1

        variant = theme["themes"][0]
        assert variant["name"] == "Custom Palette Dark"
        assert variant["appearance"] == "dark"

    def test_style_contents(self, dark_palette):
        roles = derive_roles(dark_palette, strict=True)
        style = generate_zed_theme(dark_palette, strict=True)["themes"][0]["style"]

        assert style["editor.background"] == roles.background.hex
        assert style["text"] == roles.foreground.hex
        assert style["panel.focused_border"] is None
        assert style["border.transparent"] == "#00000000"
        assert len(style["players"]) == 8
        assert style["players"][0]["cursor"] == roles.accent2.hex
        assert style["players"][0]["selection"] == roles.accent2.hex + "3D"
        assert style["syntax"]["string"]["color"] == roles.green.hex
        assert style["syntax"]["keyword"]["color"] == roles.magenta.hex
        assert style["syntax"]["emphasis.strong"]["font_weight"] == 700

    def test_light_variant(self, light_palette):
        variant = generate_zed_theme(light_palette, strict=True)["themes"][0]
        assert variant["appearance"] == "light"
        assert variant["name"] == "Custom Palette Light"

    @pytest.mark.parametrize("palette_fixture", ["dark_palette", "light_palette"])
    def test_every_color_is_valid_hex(self, palette_fixture, request):
        theme = generate_zed_theme(request.getfixturevalue(palette_fixture), strict=True)
        assert find_invalid_colors(theme) == {}

    def test_variant_name(self):
        assert variant_name("Custom Palette Theme", "dark") == "Custom Palette Dark"
        assert variant_name("Dusk", "light") == "Dusk Light"


class TestMapToTheme:
    """Test schema dispatch and serialization."""

    def test_unknown_schema(self, dark_palette):
        with pytest.raises(ValueError):
            map_to_theme(dark_palette, "sublime", strict=True)

    def test_insufficient_palette_for_both_schemas(self, dark_palette):
        for schema in ThemeSchema:
            with pytest.raises(InsufficientPaletteError):
                map_to_theme(dark_palette[:7], schema, strict=True)

    def test_non_strict_theme_is_valid(self, well_separated):
        theme = map_to_theme(well_separated, ThemeSchema.ZED, strict=False)
        assert find_invalid_colors(theme) == {}

    def test_dump_theme(self, dark_palette):
        theme = generate_vscode_theme(dark_palette, strict=True)
        dumped = dump_theme(theme)
        assert json.loads(dumped) == theme
        assert '\n  "$schema"' in dumped


class TestThemeTraversal:
    """Test color extraction from theme documents."""

    DOCUMENT = {
        "name": "Sample",
        "colors": {"editor.background": "#101010", "editor.foreground": "#EEEEEE"},
        "themes": [{"style": {"players": [{"cursor": "#FF000080"}, {"cursor": "#101010"}]}}],
        "broken": "#12",
        "hash_text": "#not-a-color",
        "empty": None,
    }

    def test_paths_and_values(self):
        found = list(iter_theme_colors(self.DOCUMENT))
        assert found == [
            ("colors.editor.background", "#101010"),
            ("colors.editor.foreground", "#EEEEEE"),
            ("themes[0].style.players[0].cursor", "#FF000080"),
            ("themes[0].style.players[1].cursor", "#101010"),
        ]

    def test_collect_distinct_values(self):
        assert collect_theme_colors(self.DOCUMENT) == ["#101010", "#EEEEEE", "#FF000080"]

    def test_find_invalid(self):
        assert find_invalid_colors(self.DOCUMENT) == {"broken": "#12", "hash_text": "#not-a-color"}
