from __future__ import annotations
from typing import Tuple

HexColor = str
RGB255 = Tuple[int, int, int]
HSL = Tuple[float, float, float]  # hue [0, 360), saturation [0, 1], lightness [0, 1]
HUE_360 = 360
CHANNEL_MAX = 255
