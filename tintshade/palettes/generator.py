import math
from typing import Tuple
import numpy as np

from ..conversions import normalize_hex, is_valid_hex, hex_to_rgb255, np_rgb255_to_hex
from ..errors import InvalidHexTokenError
from ..types.color_types import HexColor, CHANNEL_MAX
from ..types.role import SwatchRole
from .swatch import Swatch, Palette

# Steps that reach 95% or beyond are dropped so no swatch collapses to pure black/white.
STEP_CEILING = 95


def max_steps(step_percent: float) -> int:
    if step_percent <= 0:
        raise ValueError(f"step_percent must be positive, got {step_percent}")
    return math.floor(STEP_CEILING / step_percent)


def _resolve_base(base_hex: str) -> HexColor:
    normalized = normalize_hex(base_hex)
    if not is_valid_hex(normalized):
        raise InvalidHexTokenError(base_hex)
    return normalized


def generate_palette(base_hex: HexColor, step_percent: float) -> Tuple[Swatch, ...]:
    """
    Generate shades, the base and tints for one color.

    Shades multiply every channel by ``1 - step/100``; tints move every
    channel toward 255 by ``step/100`` of the remaining distance. Step ``i``
    sits at ``step_percent * i`` for ``i`` in ``1..max_steps(step_percent)``.

    Args:
        base_hex: Base color, any form accepted by ``normalize_hex``
        step_percent: Percent distance between neighbouring steps

    Returns:
        Swatches ordered shades (i ascending), base, tints (i ascending)
    """
    base = _resolve_base(base_hex)
    count = max_steps(step_percent)
    rgb = np.array(hex_to_rgb255(base), dtype=float)

    steps = [step_percent * i for i in range(1, count + 1)]
    factors = np.array(steps, dtype=float).reshape(-1, 1) / 100

    shade_hexes = np_rgb255_to_hex(rgb * (1 - factors))
    tint_hexes = np_rgb255_to_hex(rgb + (CHANNEL_MAX - rgb) * factors)

    swatches = [Swatch(SwatchRole.SHADE, step, hx) for step, hx in zip(steps, shade_hexes)]
    swatches.append(Swatch(SwatchRole.BASE, 0, base))
    swatches.extend(Swatch(SwatchRole.TINT, step, hx) for step, hx in zip(steps, tint_hexes))
    return tuple(swatches)


def generate_palette_model(base_hex: HexColor, step_percent: float) -> Palette:
    swatches = generate_palette(base_hex, step_percent)
    base = next(s for s in swatches if s.role == SwatchRole.BASE)
    return Palette(base.hex, swatches)
