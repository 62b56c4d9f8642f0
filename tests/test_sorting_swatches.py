"""
Unit tests for palette sorting and swatch strip rendering.
"""

import base64
import io

import pytest
from PIL import Image

from hueforge.services.colors import SortMethod, sort_colors
from hueforge.services.colors.swatches import render_swatch_strip


class TestSortColors:
    """Test palette sort orders."""

    def test_hue_ascending(self):
        result = sort_colors(["#0000FF", "#FF0000", "#00FF00"], SortMethod.HUE)
        assert [c.hex for c in result.colors] == ["#FF0000", "#00FF00", "#0000FF"]
        assert not result.unchanged

    def test_saturation_descending(self):
        result = sort_colors(["#808080", "#FF0000", "#BF4040"], "saturation")
        assert [c.hex for c in result.colors] == ["#FF0000", "#BF4040", "#808080"]

    def test_lightness_ascending(self):
        result = sort_colors(["#FFFFFF", "#000000", "#808080"], SortMethod.LIGHTNESS)
        assert [c.hex for c in result.colors] == ["#000000", "#808080", "#FFFFFF"]

    def test_luminance_ascending(self):
        # Same HSL lightness, different luminance
        result = sort_colors(["#00FF00", "#FF0000", "#0000FF"], SortMethod.LUMINANCE)
        assert [c.hex for c in result.colors] == ["#0000FF", "#FF0000", "#00FF00"]

    def test_already_sorted_reports_unchanged(self):
        result = sort_colors(["#000000", "#808080", "#FFFFFF"], SortMethod.LIGHTNESS)
        assert result.unchanged

    def test_none_is_identity(self):
        palette = ["#FFFFFF", "#000000"]
        result = sort_colors(palette, SortMethod.NONE)
        assert [c.hex for c in result.colors] == palette
        assert not result.unchanged

    def test_empty(self):
        result = sort_colors([], SortMethod.HUE)
        assert result.colors == []
        assert not result.unchanged

    def test_stable_for_equal_keys(self):
        # All achromatic: hue 0 for every color
        palette = ["#FFFFFF", "#000000", "#808080"]
        result = sort_colors(palette, SortMethod.HUE)
        assert [c.hex for c in result.colors] == palette
        assert result.unchanged

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            sort_colors(["#FFFFFF"], "brightness")


class TestSwatchStrip:
    """Test PNG swatch strip rendering."""

    def _decode(self, b64_string):
        return Image.open(io.BytesIO(base64.b64decode(b64_string)))

    def test_strip_dimensions_and_colors(self):
        b64_string = render_swatch_strip(["#FF0000", "#00FF00", "#0000FF"], chip_size=20)
        img = self._decode(b64_string).convert("RGB")

        assert img.size == (60, 20)
        assert img.getpixel((10, 10)) == (255, 0, 0)
        assert img.getpixel((30, 10)) == (0, 255, 0)
        assert img.getpixel((50, 10)) == (0, 0, 255)

    def test_png_signature(self):
        raw = base64.b64decode(render_swatch_strip(["#123456"]))
        assert raw[:8] == b"\x89PNG\r\n\x1a\n"

    def test_highlight_border(self):
        b64_string = render_swatch_strip(["#FF0000", "#00FF00"], chip_size=20, highlight_index=1)
        img = self._decode(b64_string).convert("RGB")

        assert img.getpixel((20, 0)) == (0, 0, 0)
        assert img.getpixel((30, 10)) == (0, 255, 0)
        assert img.getpixel((0, 0)) == (255, 0, 0)

    def test_empty_palette(self):
        with pytest.raises(ValueError):
            render_swatch_strip([])

    def test_invalid_chip_size(self):
        with pytest.raises(ValueError):
            render_swatch_strip(["#FFFFFF"], chip_size=0)
