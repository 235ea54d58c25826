"""
Tintshade Color Space Conversions
=================================

Hex, integer RGB and HSL conversions used by the palette generator, with both
scalar and vectorized (numpy) implementations.

Features
--------
- Hex normalization (``fff``, ``#FFF``, ``ffffff`` -> ``#ffffff``) and validation
- Bidirectional conversions: hex <-> RGB255 <-> HSL
- Scalar functions for single color conversions
- Vectorized numpy functions for batch processing
- Half-up rounding everywhere a channel becomes an integer

Conversion Functions
-------------------

Hex:
    normalize_hex(value)
        Canonical ``#rrggbb`` form, no validation
    is_valid_hex(value)
        ``#`` plus exactly six hex digits
    hex_to_rgb255(hex_color) / np_hex_to_rgb255(hex_colors)
        Parse into integer channels
    rgb255_to_hex(r, g, b) / np_rgb255_to_hex(rgb)
        Clamp, round and encode
    hex_to_unit_rgb(hex_color)
        Channels in [0, 1]

RGB → HSL:
    rgb255_to_hsl(rgb)
        Scalar RGB255 to HSL conversion
    np_rgb255_to_hsl(r, g, b)
        Vectorized RGB255 to HSL conversion

HSL → RGB:
    hsl_to_rgb255(hsl)
        Scalar HSL to RGB255 conversion
    np_hsl_to_rgb255(h, s, l)
        Vectorized HSL to RGB255 conversion

Examples
--------
>>> from tintshade.conversions import hex_to_rgb255, rgb255_to_hsl, hsl_to_rgb255
>>>
>>> hsl = rgb255_to_hsl(hex_to_rgb255("#ff8000"))
>>> hsl_to_rgb255(hsl)
(255, 128, 0)
>>>
>>> import numpy as np
>>> from tintshade.conversions import np_rgb255_to_hsl
>>> rgb = np.array([[255, 128, 0], [0, 255, 128]])
>>> hsl = np_rgb255_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
"""

from .hex import (
    normalize_hex,
    is_valid_hex,
    hex_to_rgb255,
    hex_to_unit_rgb,
    rgb255_to_hex,
    np_hex_to_rgb255,
    np_rgb255_to_hex,
)

# RGB → HSL conversions
from .to_hsl import rgb255_to_hsl, np_rgb255_to_hsl

# HSL → RGB conversions
from .to_rgb import hue_to_channel, hsl_to_rgb255, np_hsl_to_rgb255

from .numbers import round_half_up, np_round_half_up

__all__ = [
    # Hex
    'normalize_hex',
    'is_valid_hex',
    'hex_to_rgb255',
    'hex_to_unit_rgb',
    'rgb255_to_hex',
    'np_hex_to_rgb255',
    'np_rgb255_to_hex',

    # RGB → HSL
    'rgb255_to_hsl',
    'np_rgb255_to_hsl',

    # HSL → RGB
    'hue_to_channel',
    'hsl_to_rgb255',
    'np_hsl_to_rgb255',

    # Rounding
    'round_half_up',
    'np_round_half_up',
]
