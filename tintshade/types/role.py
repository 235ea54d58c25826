from enum import Enum


class SwatchRole(str, Enum):
    SHADE = "shade"
    BASE = "base"
    TINT = "tint"
