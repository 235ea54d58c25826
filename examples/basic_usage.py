"""Basic Tintshade usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tintshade import (
    PaletteSettings,
    PaletteType,
    generate_palettes,
    render_palettes,
    rgb255_to_hsl,
    hex_to_rgb255,
)


def demonstrate_conversions() -> None:
    # Parse a hex color and look at it in HSL.
    accent = hex_to_rgb255("#ff8000")
    print("RGB255:", accent)
    print("HSL:", rgb255_to_hsl(accent))


def demonstrate_palettes() -> None:
    # Five steps per side with triadic companions for every input color.
    settings = PaletteSettings(
        step_count=5,
        include_palette=True,
        palette_type=PaletteType.TRIADIC,
    )
    palettes = generate_palettes("#336699, f80", settings)
    for palette in palettes:
        print(palette.base_hex, [s.hex for s in palette.shades], [s.hex for s in palette.tints])

    sheet = render_palettes(palettes, settings)
    sheet.show()


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_palettes()
