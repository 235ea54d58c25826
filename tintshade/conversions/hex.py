import re
from typing import Iterable, List
import numpy as np
from numpy import ndarray as NDArray

from .numbers import round_half_up, np_round_half_up, clamp
from ..types.color_types import HexColor, RGB255, CHANNEL_MAX

_HEX_PATTERN = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)


def normalize_hex(value: str) -> HexColor:
    """
    Bring user input into ``#rrggbb`` form.

    Trims whitespace, strips one leading ``#``, expands the 3-digit shorthand
    by doubling each digit and lowercases. Digit content is not validated,
    so the result must still go through :func:`is_valid_hex`.
    """
    cleaned = value.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if len(cleaned) == 3:
        cleaned = "".join(ch + ch for ch in cleaned)
    return "#" + cleaned.lower()


def is_valid_hex(value: str) -> bool:
    """True iff value is ``#`` followed by exactly six hex digits (any case)."""
    return _HEX_PATTERN.fullmatch(value) is not None


def hex_to_rgb255(hex_color: HexColor) -> RGB255:
    """Parse a validated hex color into integer channels in [0, 255]."""
    cleaned = hex_color.replace("#", "", 1)
    return (
        int(cleaned[0:2], 16),
        int(cleaned[2:4], 16),
        int(cleaned[4:6], 16),
    )


def hex_to_unit_rgb(hex_color: HexColor) -> tuple[float, float, float]:
    r, g, b = hex_to_rgb255(hex_color)
    return r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX


def component_to_hex(component: float) -> str:
    # clamp first, then round: tint/shade math yields fractional and out-of-range values
    value = round_half_up(clamp(component, 0, CHANNEL_MAX))
    return f"{value:02x}"


def rgb255_to_hex(r: float, g: float, b: float) -> HexColor:
    return "#" + component_to_hex(r) + component_to_hex(g) + component_to_hex(b)


## Vectorized variants

def np_hex_to_rgb255(hex_colors: Iterable[HexColor]) -> NDArray:
    """
    Vectorized: parse validated hex colors.

    Args:
        hex_colors: iterable of ``#rrggbb`` strings

    Returns:
        int array of shape (n, 3)
    """
    digits = "".join(h.replace("#", "", 1) for h in hex_colors)
    if not digits:
        return np.empty((0, 3), dtype=np.int64)
    raw = np.frombuffer(bytes.fromhex(digits), dtype=np.uint8)
    return raw.reshape(-1, 3).astype(np.int64)


def np_rgb255_to_hex(rgb: NDArray) -> List[HexColor]:
    """
    Vectorized: encode an array of shape (..., 3) as hex strings.

    Channels are clamped to [0, 255] and rounded half-up, same as
    :func:`rgb255_to_hex`. The result is flattened in C order.
    """
    arr = np.clip(np.asarray(rgb, dtype=float), 0, CHANNEL_MAX)
    ints = np_round_half_up(arr).reshape(-1, 3)
    return [f"#{r:02x}{g:02x}{b:02x}" for r, g, b in ints.tolist()]
