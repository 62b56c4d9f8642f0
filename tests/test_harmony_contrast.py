"""
Unit tests for harmony generation and contrast repair.

Tests the hue wheel math and the two contrast tiers (best-effort adjustment and
the black/white readability guarantee).
"""

import pytest

from hueforge.services.colors import (
    HarmonyScheme, adjust_for_contrast, contrast_ratio, ensure_readable_contrast,
    generate_harmony, hex_to_hsl, relative_luminance, rotate_hue,
)
from hueforge.services.colors.contrast import BLACK, WHITE


def hue_distance(h1, h2):
    diff = abs(h1 - h2) % 1.0
    return min(diff, 1.0 - diff) * 360.0


class TestHueRotation:
    """Test hue rotation mathematics."""

    def test_complementary_rotation(self):
        assert rotate_hue(0.0, 180) == pytest.approx(0.5)
        assert rotate_hue(0.75, 180) == pytest.approx(0.25)

    def test_negative_rotation_wraps(self):
        assert rotate_hue(0.0, -30) == pytest.approx(11 / 12)


class TestGenerateHarmony:
    """Test harmony palettes for each scheme."""

    def test_complementary_of_red_is_cyan(self):
        colors = generate_harmony("#FF0000", HarmonyScheme.COMPLEMENTARY)
        assert [c.hex for c in colors] == ["#FF0000", "#00FFFF"]

    def test_triadic_of_red(self):
        colors = generate_harmony("#FF0000", HarmonyScheme.TRIADIC)
        assert [c.hex for c in colors] == ["#FF0000", "#00FF00", "#0000FF"]

    def test_default_scheme_is_triadic(self):
        assert generate_harmony("#FF0000") == generate_harmony("#FF0000", "triadic")

    def test_analogous_neighbours(self):
        colors = generate_harmony("#FF0000", HarmonyScheme.ANALOGOUS)
        assert len(colors) == 3
        hues = [hex_to_hsl(c).h for c in colors[1:]]
        assert hue_distance(hues[0], 0.0) == pytest.approx(30.0, abs=1.0)
        assert hue_distance(hues[1], 0.0) == pytest.approx(30.0, abs=1.0)

    def test_split_complementary_flanks_the_complement(self):
        colors = generate_harmony("#FF0000", HarmonyScheme.SPLIT_COMPLEMENTARY)
        assert len(colors) == 3
        for companion in colors[1:]:
            separation = hue_distance(hex_to_hsl(companion).h, 0.5)
            assert separation == pytest.approx(30.0, abs=1.0)

    def test_base_first_and_saturation_lightness_kept(self):
        base = "#336699"
        _, s, l = hex_to_hsl(base)
        for scheme in HarmonyScheme:
            colors = generate_harmony(base, scheme)
            assert colors[0].hex == base
            for companion in colors[1:]:
                _, cs, cl = hex_to_hsl(companion)
                assert cs == pytest.approx(s, abs=0.01)
                assert cl == pytest.approx(l, abs=0.01)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            generate_harmony("#FF0000", "tetradic")


class TestAdjustForContrast:
    """Test best-effort contrast adjustment."""

    def test_already_passing_is_unchanged(self):
        assert adjust_for_contrast("#FFFFFF", "#000000").hex == "#FFFFFF"

    def test_lightens_on_dark_background(self):
        adjusted = adjust_for_contrast("#202020", "#000000", 4.5)
        assert relative_luminance(adjusted) > relative_luminance("#202020")
        assert contrast_ratio(adjusted, "#000000") >= 4.5

    def test_darkens_on_light_background(self):
        adjusted = adjust_for_contrast("#EEEEEE", "#FFFFFF", 4.5)
        assert relative_luminance(adjusted) < relative_luminance("#EEEEEE")
        assert contrast_ratio(adjusted, "#FFFFFF") >= 4.5

    def test_zero_iterations_returns_input(self):
        assert adjust_for_contrast("#202020", "#000000", 4.5, max_iterations=0).hex == "#202020"

    def test_may_fall_short_with_small_budget(self):
        adjusted = adjust_for_contrast("#101010", "#000000", 15.0, max_iterations=1)
        assert adjusted.hex == "#272727"
        assert contrast_ratio(adjusted, "#000000") < 15.0


class TestEnsureReadableContrast:
    """Test the black/white readability guarantee."""

    def test_keeps_passing_color(self):
        assert ensure_readable_contrast("#FFFFFF", "#202020", 7.0) == WHITE
        assert ensure_readable_contrast("#E0E0E0", "#101010", 7.0).hex == "#E0E0E0"

    def test_falls_back_to_black_on_mid_gray(self):
        assert ensure_readable_contrast("#777777", "#808080", 4.5) == BLACK

    def test_falls_back_to_white_on_dark(self):
        assert ensure_readable_contrast("#222222", "#101010", 4.5) == WHITE

    @pytest.mark.parametrize("background", ["#000000", "#404040", "#808080", "#C0C0C0",
                                            "#FFFFFF", "#FF0000", "#0000FF", "#00FF00"])
    def test_result_always_meets_target(self, background):
        result = ensure_readable_contrast(background, background, 4.5)
        assert contrast_ratio(result, background) >= 4.5
