import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB255, HSL, CHANNEL_MAX, HUE_360


def rgb255_to_hsl(rgb: RGB255) -> HSL:
    """
    Convert integer RGB to HSL.

    Args:
        rgb: (r, g, b) with channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = (c / CHANNEL_MAX for c in rgb)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    hue = 0.0
    saturation = 0.0
    lightness = (max_c + min_c) / 2

    if max_c != min_c:
        delta = max_c - min_c
        # branch keeps the denominator away from zero near black and white
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)

        if max_c == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) * 60
        elif max_c == g:
            hue = ((b - r) / delta + 2) * 60
        else:
            hue = ((r - g) / delta + 4) * 60

    return (hue + HUE_360) % HUE_360, saturation, lightness


def np_rgb255_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert integer RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float) / CHANNEL_MAX
    g = np.asarray(g, dtype=float) / CHANNEL_MAX
    b = np.asarray(b, dtype=float) / CHANNEL_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    chromatic = delta > 0
    light = chromatic & (lightness > 0.5)
    dark = chromatic & ~light

    saturation = np.zeros(out_shape)
    saturation[light] = delta[light] / (2 - max_c[light] - min_c[light])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # first matching channel wins, same as the scalar branch order
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    wrap = np.where(g < b, 6.0, 0.0)
    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r] + wrap[mask_r]) * 60
    hue[mask_g] = ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2) * 60
    hue[mask_b] = ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4) * 60
    hue = (hue + HUE_360) % HUE_360

    return np.stack([hue, saturation, lightness], axis=-1)
