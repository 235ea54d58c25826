# No dependencies
from enum import Enum


class PaletteType(str, Enum):
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"


DEFAULT_PALETTE_TYPE = PaletteType.COMPLEMENTARY

HUE_OFFSETS: dict[PaletteType, tuple[int, ...]] = {
    PaletteType.COMPLEMENTARY: (180,),
    PaletteType.SPLIT_COMPLEMENTARY: (180 - 30, 180 + 30),
    PaletteType.ANALOGOUS: (-30, 30),
    PaletteType.TRIADIC: (120, 240),
}
