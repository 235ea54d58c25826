import warnings
from typing import Iterable, List

from ..conversions import hex_to_rgb255, rgb255_to_hsl, hsl_to_rgb255, rgb255_to_hex
from ..types.color_types import HexColor, HUE_360
from ..types.palette_type import PaletteType, HUE_OFFSETS, DEFAULT_PALETTE_TYPE


def normalize_palette_type(value: PaletteType | str | None) -> PaletteType:
    """Resolve a palette type, falling back to complementary for missing or unknown values."""
    if not value:
        return DEFAULT_PALETTE_TYPE
    try:
        return PaletteType(value)
    except ValueError:
        warnings.warn(
            f"Unknown palette type {value!r}; using {DEFAULT_PALETTE_TYPE.value!r}",
            UserWarning,
            stacklevel=2,
        )
        return DEFAULT_PALETTE_TYPE


def rotate_hue(hex_color: HexColor, offset: float) -> HexColor:
    """Rotate the hue of a validated hex color, keeping saturation and lightness."""
    hue, saturation, lightness = rgb255_to_hsl(hex_to_rgb255(hex_color))
    rotated = (hue + offset + HUE_360) % HUE_360
    return rgb255_to_hex(*hsl_to_rgb255((rotated, saturation, lightness)))


def calculate_related_hexes(hex_color: HexColor, palette_type: PaletteType | str | None) -> List[HexColor]:
    """
    Related base colors for one hex color.

    Offsets (degrees) per palette type:
        complementary       -> 180
        split-complementary -> 150, 210
        analogous           -> -30, 30
        triadic             -> 120, 240
    """
    offsets = HUE_OFFSETS[normalize_palette_type(palette_type)]
    return [rotate_hue(hex_color, offset) for offset in offsets]


def expand_related_hexes(hex_colors: Iterable[HexColor], palette_type: PaletteType | str | None) -> List[HexColor]:
    """Each input color followed immediately by its own related colors."""
    resolved = normalize_palette_type(palette_type)
    expanded: List[HexColor] = []
    for hex_color in hex_colors:
        expanded.append(hex_color)
        expanded.extend(calculate_related_hexes(hex_color, resolved))
    return expanded
