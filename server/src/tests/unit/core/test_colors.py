"""
Unit tests for dye color presentation.
"""

import pytest

from server.src.core.colors import FALLBACK_RGB, get_display_rgb, rgb_to_hex
from server.src.schemas.catalog import CatalogColor


def color(**materials):
    data = {"id": 10, "name": "Sky", "base_rgb": [128, 26, 26]}
    data.update({name: {"rgb": list(rgb)} for name, rgb in materials.items()})
    return CatalogColor.model_validate(data)


class TestGetDisplayRgb:
    """Material channels win over the shared base RGB."""

    def test_base_rgb_is_the_fallback(self):
        assert get_display_rgb(color()) == (128, 26, 26)

    def test_cloth_preferred_over_everything(self):
        c = color(cloth=(1, 1, 1), leather=(2, 2, 2), metal=(3, 3, 3), fur=(4, 4, 4))
        assert get_display_rgb(c) == (1, 1, 1)

    def test_leather_over_metal_and_fur(self):
        assert get_display_rgb(color(leather=(2, 2, 2), metal=(3, 3, 3), fur=(4, 4, 4))) == (2, 2, 2)

    def test_metal_over_fur(self):
        assert get_display_rgb(color(metal=(3, 3, 3), fur=(4, 4, 4))) == (3, 3, 3)

    def test_fur_over_base(self):
        assert get_display_rgb(color(fur=(4, 4, 4))) == (4, 4, 4)

    def test_material_without_rgb_is_skipped(self):
        c = CatalogColor.model_validate({
            "id": 1, "name": "Odd", "base_rgb": [9, 9, 9],
            "cloth": {"brightness": 3}, "metal": {"rgb": [5, 6, 7]},
        })
        assert get_display_rgb(c) == (5, 6, 7)


class TestRgbToHex:
    """Tests for hex formatting."""

    def test_black(self):
        assert rgb_to_hex([0, 0, 0]) == "#000000"

    def test_white(self):
        assert rgb_to_hex([255, 255, 255]) == "#ffffff"

    def test_mixed_channels_are_zero_padded(self):
        assert rgb_to_hex((122, 26, 5)) == "#7a1a05"

    @pytest.mark.parametrize("rgb, expected", [
        ((-10, 0, 0), "#000000"),
        ((300, 255, 256), "#ffffff"),
        ((-1, 128, 999), "#0080ff"),
    ])
    def test_out_of_range_channels_are_clamped(self, rgb, expected):
        assert rgb_to_hex(rgb) == expected

    def test_fallback_rgb(self):
        assert rgb_to_hex(FALLBACK_RGB) == "#808080"
