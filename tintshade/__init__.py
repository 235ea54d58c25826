"""
Tintshade - Tint, Shade and Harmony Palettes
============================================

Generate tint/shade palettes from one or more base hex colors, optionally
expanded with harmonic hues, and render them as swatch sheets.

Key Features
------------
- Hex normalization and validation (3- or 6-digit, ``#`` optional)
- hex <-> RGB255 <-> HSL conversions, scalar and vectorized
- Tints blended toward white, shades darkened multiplicatively
- Complementary, split-complementary, analogous and triadic expansion
- Immutable Swatch and Palette values
- Pillow rendering of the swatch layout

Quick Start
-----------
>>> from tintshade import generate_palettes, PaletteSettings, PaletteType
>>>
>>> palettes = generate_palettes(
...     "#ff0000, 0af",
...     PaletteSettings(step_count=10, include_palette=True,
...                     palette_type=PaletteType.TRIADIC),
... )
>>> [p.base_hex for p in palettes][:3]
['#ff0000', '#00ff00', '#0000ff']
>>> palettes[0].shades[0].hex
'#e60000'

Modules
-------
- conversions: hex, RGB255 and HSL conversion functions
- palettes: tint/shade generation and harmony expansion
- request: input validation and palette orchestration
- render: Pillow rendering of palettes
"""

from .conversions import (
    normalize_hex,
    is_valid_hex,
    hex_to_rgb255,
    rgb255_to_hex,
    rgb255_to_hsl,
    hsl_to_rgb255,
    np_hex_to_rgb255,
    np_rgb255_to_hex,
    np_rgb255_to_hsl,
    np_hsl_to_rgb255,
)
from .palettes import (
    Swatch,
    Palette,
    generate_palette,
    generate_palette_model,
    sorted_shades,
    sorted_tints,
    calculate_related_hexes,
    expand_related_hexes,
    normalize_palette_type,
    palette_style_names,
)
from .request import (
    PaletteSettings,
    GenerationRequest,
    build_request,
    generate_palettes,
    parse_hex_list,
)
from .render import render_palette, render_palettes, collect_styles, frame_names
from .errors import (
    PaletteRequestError,
    EmptyInputError,
    InvalidHexTokenError,
    InvalidStepCountError,
)
from .types import PaletteType, SwatchRole

__version__ = "1.0.0"

__all__ = [
    # Conversions
    "normalize_hex", "is_valid_hex",
    "hex_to_rgb255", "rgb255_to_hex",
    "rgb255_to_hsl", "hsl_to_rgb255",
    "np_hex_to_rgb255", "np_rgb255_to_hex",
    "np_rgb255_to_hsl", "np_hsl_to_rgb255",

    # Palettes
    "Swatch", "Palette",
    "generate_palette", "generate_palette_model",
    "sorted_shades", "sorted_tints",
    "calculate_related_hexes", "expand_related_hexes",
    "normalize_palette_type", "palette_style_names",

    # Requests
    "PaletteSettings", "GenerationRequest",
    "build_request", "generate_palettes", "parse_hex_list",

    # Rendering
    "render_palette", "render_palettes", "collect_styles", "frame_names",

    # Errors
    "PaletteRequestError", "EmptyInputError",
    "InvalidHexTokenError", "InvalidStepCountError",

    # Types
    "PaletteType", "SwatchRole",

    # Version
    "__version__",
]
