import numpy as np
from numpy import ndarray as NDArray

from .numbers import round_half_up, np_round_half_up, clamp
from ..types.color_types import RGB255, HSL, CHANNEL_MAX, HUE_360


def hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise-linear channel value for hue position ``t`` between ``p`` and ``q``."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb255(hsl: HSL) -> RGB255:
    """
    Convert HSL to integer RGB.

    Hue is wrapped into [0, 360); saturation and lightness are clamped to
    [0, 1]. Every channel is rounded half-up.

    Args:
        hsl: (hue, saturation, lightness)

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    hue, saturation, lightness = hsl
    # double wrap shifts low float bits for hues near 360; channel rounding depends on it
    h = ((hue % HUE_360) + HUE_360) % HUE_360 / HUE_360
    s = clamp(saturation, 0.0, 1.0)
    l = clamp(lightness, 0.0, 1.0)

    if s == 0:
        gray = round_half_up(l * CHANNEL_MAX)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return (
        round_half_up(hue_to_channel(p, q, h + 1 / 3) * CHANNEL_MAX),
        round_half_up(hue_to_channel(p, q, h) * CHANNEL_MAX),
        round_half_up(hue_to_channel(p, q, h - 1 / 3) * CHANNEL_MAX),
    )


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_rgb255(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to integer RGB.

    Args:
        h: array-like or scalar, hue in degrees (any range)
        s: array-like or scalar, saturation (clamped to [0, 1])
        l: array-like or scalar, lightness (clamped to [0, 1])

    Returns:
        rgb: int array of shape (..., 3) in [0, 255]
    """
    h = np.mod(np.mod(np.asarray(h, dtype=float), HUE_360) + HUE_360, HUE_360) / HUE_360
    s = np.clip(np.asarray(s, dtype=float), 0.0, 1.0)
    l = np.clip(np.asarray(l, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    rgb = np.stack(
        [
            np_hue_to_channel(p, q, h + 1 / 3),
            np_hue_to_channel(p, q, h),
            np_hue_to_channel(p, q, h - 1 / 3),
        ],
        axis=-1,
    )
    gray = np.repeat(l[..., None], 3, axis=-1)
    rgb = np.where((s == 0)[..., None], gray, rgb)
    return np_round_half_up(rgb * CHANNEL_MAX)
