from .palette_type import PaletteType, HUE_OFFSETS
from .role import SwatchRole
from .color_types import HexColor, RGB255, HSL

__all__ = [
    "PaletteType",
    "HUE_OFFSETS",
    "SwatchRole",
    "HexColor",
    "RGB255",
    "HSL",
]
