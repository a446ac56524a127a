"""
Dye color presentation.

The catalog's ``base_rgb`` is a shared placeholder for many dyes (often
[128, 26, 26]); the material specific RGB is what the game renders, so it
wins whenever the catalog provides one.
"""

from typing import Sequence, Tuple

from server.src.schemas.catalog import CatalogColor

RgbTuple = Tuple[int, int, int]

# Shown for dye ids the catalog did not return
FALLBACK_RGB: RgbTuple = (128, 128, 128)

# Material channels in display preference order
MATERIAL_PREFERENCE = ("cloth", "leather", "metal", "fur")


def get_display_rgb(color: CatalogColor) -> RgbTuple:
    """Return the RGB to show for a dye: cloth > leather > metal > fur > base."""
    for material in MATERIAL_PREFERENCE:
        channel = getattr(color, material, None)
        if channel is not None and channel.rgb is not None:
            return tuple(channel.rgb)
    return tuple(color.base_rgb)


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Convert an RGB triple to ``#rrggbb``, clamping each channel to 0-255."""
    return "#" + "".join(f"{_clamp_channel(channel):02x}" for channel in rgb)
