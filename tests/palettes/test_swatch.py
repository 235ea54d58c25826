import pytest

from tintshade.palettes import (
    Swatch,
    Palette,
    format_step_label,
    format_hex_label,
    palette_style_names,
)
from tintshade.palettes.swatch import format_number
from tintshade.types import SwatchRole


def test_format_number():
    assert format_number(10.0) == "10"
    assert format_number(0) == "0"
    assert format_number(12.5) == "12.5"
    assert format_number(100 / 3) == "33.333333333333336"


def test_format_step_label():
    assert format_step_label(10) == "100"
    assert format_step_label(0) == "0"
    assert format_step_label(2.5) == "25"
    assert format_step_label(0.05) == "1"


def test_format_hex_label():
    assert format_hex_label("#ABCDEF", include_hashtag=True) == "#abcdef"
    assert format_hex_label("#ABCDEF", include_hashtag=False) == "abcdef"


def test_swatch_default_labels():
    assert Swatch(SwatchRole.BASE, 0, "#808080").label == "base"
    assert Swatch(SwatchRole.SHADE, 20.0, "#666666").label == "shade-20"
    assert Swatch("tint", 12.5, "#999999").label == "tint-12.5"


def test_swatch_is_immutable():
    swatch = Swatch(SwatchRole.TINT, 10, "#8d8d8d")
    with pytest.raises(AttributeError, match="immutable"):
        swatch._hex = "#000000"
    with pytest.raises(AttributeError):
        swatch.hex = "#000000"


def test_swatch_equality_and_hash():
    a = Swatch(SwatchRole.TINT, 10, "#8d8d8d")
    b = Swatch("tint", 10.0, "#8d8d8d")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Swatch(SwatchRole.SHADE, 10, "#8d8d8d")


def test_swatch_rejects_unknown_role():
    with pytest.raises(ValueError):
        Swatch("midtone", 10, "#808080")


def test_palette_is_immutable(gray_palette):
    with pytest.raises(AttributeError, match="immutable"):
        gray_palette._swatches = ()


def test_palette_sorting_ignores_input_order():
    swatches = [
        Swatch(SwatchRole.TINT, 20, "#a6a6a6"),
        Swatch(SwatchRole.SHADE, 20, "#666666"),
        Swatch(SwatchRole.BASE, 0, "#808080"),
        Swatch(SwatchRole.TINT, 10, "#8d8d8d"),
        Swatch(SwatchRole.SHADE, 10, "#737373"),
    ]
    palette = Palette("#808080", swatches)
    assert [s.hex for s in palette.shades] == ["#737373", "#666666"]
    assert [s.hex for s in palette.tints] == ["#8d8d8d", "#a6a6a6"]


def test_palette_requires_one_base():
    shade = Swatch(SwatchRole.SHADE, 10, "#737373")
    with pytest.raises(ValueError, match="exactly one base swatch, got 0"):
        Palette("#808080", [shade])

    base = Swatch(SwatchRole.BASE, 0, "#808080")
    with pytest.raises(ValueError, match="exactly one base swatch, got 2"):
        Palette("#808080", [base, shade, base])


def test_palette_style_names(gray_palette):
    names = palette_style_names(gray_palette)
    assert len(names) == 19
    assert names[0] == "Tints & Shades/808080/Base"
    assert names[1] == "Tints & Shades/808080/Shades/100"
    assert names[9] == "Tints & Shades/808080/Shades/900"
    assert names[10] == "Tints & Shades/808080/Tints/100"

    with_hash = palette_style_names(gray_palette, include_hashtag=True)
    assert with_hash[0] == "Tints & Shades/#808080/Base"
