"""
Rasterise palettes the way the design-editor plugin laid them out.

Each palette becomes one frame: the base block on the left, and on the right
a row of shades (lightest first) above a row of tints (darkest first). Every
swatch carries its hex label underneath. Frames are stacked vertically.
"""
from __future__ import annotations
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .conversions import hex_to_rgb255
from .palettes import Palette, Swatch, format_hex_label, palette_style_names
from .request import PaletteSettings
from .types.color_types import HexColor

SWATCH_SIZE = 64
ITEM_SPACING = 8
ROW_GAP = 8
FRAME_PADDING = 16
LABEL_SPACING = 4
LABEL_HEIGHT = 12

DARK_BACKGROUND = (26, 26, 26)     # #1a1a1a
LIGHT_BACKGROUND = (255, 255, 255)
DARK_LABEL = (230, 230, 230)       # #e6e6e6
LIGHT_LABEL = (0, 0, 0)


def _row_width(count: int) -> int:
    if count == 0:
        return 0
    return count * SWATCH_SIZE + (count - 1) * ITEM_SPACING


def frame_geometry(palette: Palette) -> Tuple[int, int, int]:
    """
    Size of one palette frame.

    Returns:
        (width, height, base_rect_height)
    """
    count = max(len(palette.shades), len(palette.tints))
    rows_width = _row_width(count)
    row_height = SWATCH_SIZE + LABEL_SPACING + LABEL_HEIGHT if count else 0
    rows_height = 2 * row_height + ROW_GAP if count else 0

    # base block stretches to match both rows, minus its own label
    base_rect_height = rows_height - LABEL_HEIGHT - LABEL_SPACING
    if base_rect_height <= 0:
        base_rect_height = 2 * SWATCH_SIZE
    base_height = base_rect_height + LABEL_SPACING + LABEL_HEIGHT

    width = 2 * FRAME_PADDING + 2 * SWATCH_SIZE
    if rows_width:
        width += ITEM_SPACING + rows_width
    height = 2 * FRAME_PADDING + max(rows_height, base_height)
    return width, height, base_rect_height


def _draw_label(draw: ImageDraw.ImageDraw, text: str, center_x: float, top: int, fill, font) -> None:
    text_width = draw.textlength(text, font=font)
    draw.text((center_x - text_width / 2, top), text, fill=fill, font=font)


def _draw_swatch(
    draw: ImageDraw.ImageDraw,
    swatch: Swatch,
    left: int,
    top: int,
    settings: PaletteSettings,
    font,
    label_fill,
) -> None:
    draw.rectangle(
        [left, top, left + SWATCH_SIZE - 1, top + SWATCH_SIZE - 1],
        fill=hex_to_rgb255(swatch.hex),
    )
    _draw_label(
        draw,
        format_hex_label(swatch.hex, settings.include_hashtag),
        left + SWATCH_SIZE / 2,
        top + SWATCH_SIZE + LABEL_SPACING,
        label_fill,
        font,
    )


def render_palette(palette: Palette, settings: PaletteSettings | None = None) -> Image.Image:
    """Render one palette frame as an RGB image."""
    settings = settings or PaletteSettings()
    width, height, base_rect_height = frame_geometry(palette)
    background = DARK_BACKGROUND if settings.dark_background else LIGHT_BACKGROUND
    label_fill = DARK_LABEL if settings.dark_background else LIGHT_LABEL

    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    # Left: base block
    base_width = 2 * SWATCH_SIZE
    draw.rectangle(
        [
            FRAME_PADDING,
            FRAME_PADDING,
            FRAME_PADDING + base_width - 1,
            FRAME_PADDING + base_rect_height - 1,
        ],
        fill=hex_to_rgb255(palette.base_hex),
    )
    _draw_label(
        draw,
        format_hex_label(palette.base_hex, settings.include_hashtag),
        FRAME_PADDING + base_width / 2,
        FRAME_PADDING + base_rect_height + LABEL_SPACING,
        label_fill,
        font,
    )

    # Right: shades row above tints row
    rows_left = FRAME_PADDING + base_width + ITEM_SPACING
    row_height = SWATCH_SIZE + LABEL_SPACING + LABEL_HEIGHT
    for row_index, row in enumerate((palette.shades, palette.tints)):
        top = FRAME_PADDING + row_index * (row_height + ROW_GAP)
        for i, swatch in enumerate(row):
            left = rows_left + i * (SWATCH_SIZE + ITEM_SPACING)
            _draw_swatch(draw, swatch, left, top, settings, font, label_fill)

    return img


def render_palettes(palettes: Sequence[Palette], settings: PaletteSettings | None = None) -> Image.Image:
    """Stack palette frames vertically, in palette order."""
    if not palettes:
        raise ValueError("At least one palette is required")
    settings = settings or PaletteSettings()
    frames = [render_palette(p, settings) for p in palettes]

    background = DARK_BACKGROUND if settings.dark_background else LIGHT_BACKGROUND
    width = max(f.width for f in frames)
    height = sum(f.height for f in frames)
    sheet = Image.new("RGB", (width, height), background)
    top = 0
    for frame in frames:
        sheet.paste(frame, (0, top))
        top += frame.height
    return sheet


def frame_names(palettes: Sequence[Palette], settings: PaletteSettings | None = None) -> List[str]:
    """Label of each rendered frame, top to bottom: the base hex of its palette."""
    settings = settings or PaletteSettings()
    return [format_hex_label(p.base_hex, settings.include_hashtag) for p in palettes]


def collect_styles(palettes: Sequence[Palette], settings: PaletteSettings) -> List[Tuple[str, HexColor]]:
    """
    Named paint styles for the palettes as (style name, hex) pairs.

    Empty unless ``settings.create_styles`` is set. Every palette contributes
    its own styles, so repeated base colors yield repeated entries.
    """
    if not settings.create_styles:
        return []
    styles: List[Tuple[str, HexColor]] = []
    for palette in palettes:
        names = palette_style_names(palette, settings.include_hashtag)
        ordered = [palette.base, *palette.shades, *palette.tints]
        styles.extend(zip(names, (s.hex for s in ordered)))
    return styles
