"""Tint/shade generation and harmonic hue expansion."""

from .swatch import (
    Swatch,
    Palette,
    sorted_shades,
    sorted_tints,
    format_step_label,
    format_hex_label,
    palette_style_names,
)
from .generator import generate_palette, generate_palette_model, max_steps, STEP_CEILING
from .harmony import (
    calculate_related_hexes,
    expand_related_hexes,
    normalize_palette_type,
    rotate_hue,
)

__all__ = [
    "Swatch",
    "Palette",
    "sorted_shades",
    "sorted_tints",
    "format_step_label",
    "format_hex_label",
    "palette_style_names",
    "generate_palette",
    "generate_palette_model",
    "max_steps",
    "STEP_CEILING",
    "calculate_related_hexes",
    "expand_related_hexes",
    "normalize_palette_type",
    "rotate_hue",
]
