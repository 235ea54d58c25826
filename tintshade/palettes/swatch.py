from __future__ import annotations
from typing import Iterator, Sequence, Tuple

from ..conversions.numbers import round_half_up
from ..types.color_types import HexColor
from ..types.role import SwatchRole

STYLE_ROOT = "Tints & Shades"


def format_number(value: float) -> str:
    """Shortest round-tripping text for a number, without a trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_step_label(step: float) -> str:
    """Display number for a step: ``round(step * 10)``, so step 10 reads as ``100``."""
    return str(round_half_up(step * 10))


def format_hex_label(hex_color: HexColor, include_hashtag: bool) -> str:
    normalized = hex_color.lower()
    return normalized if include_hashtag else normalized.replace("#", "", 1)


class Swatch:
    """A single generated color. Immutable once constructed."""

    __slots__ = ('_role', '_step', '_hex', '_label', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, role: SwatchRole, step: float, hex_color: HexColor, label: str | None = None) -> None:
        self._role = SwatchRole(role)
        self._step = step
        self._hex = hex_color
        if label is None:
            label = "base" if self._role == SwatchRole.BASE else f"{self._role.value}-{format_number(step)}"
        self._label = label
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def role(self) -> SwatchRole:
        return self._role

    @property
    def step(self) -> float:
        return self._step

    @property
    def hex(self) -> HexColor:
        return self._hex

    @property
    def label(self) -> str:
        return self._label

    @property
    def display_step(self) -> str:
        return format_step_label(self._step)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Swatch):
            return NotImplemented
        return (
            self._role == other._role
            and self._step == other._step
            and self._hex == other._hex
            and self._label == other._label
        )

    def __hash__(self) -> int:
        return hash((self._role, self._step, self._hex, self._label))

    def __repr__(self) -> str:
        return f"Swatch(role={self._role.value!r}, step={self._step!r}, hex={self._hex!r}, label={self._label!r})"


def sorted_by_role(swatches: Sequence[Swatch], role: SwatchRole) -> Tuple[Swatch, ...]:
    return tuple(sorted((s for s in swatches if s.role == role), key=lambda s: s.step))


def sorted_shades(swatches: Sequence[Swatch]) -> Tuple[Swatch, ...]:
    """Shades ordered lightest first (smallest step)."""
    return sorted_by_role(swatches, SwatchRole.SHADE)


def sorted_tints(swatches: Sequence[Swatch]) -> Tuple[Swatch, ...]:
    """Tints ordered darkest first (smallest step)."""
    return sorted_by_role(swatches, SwatchRole.TINT)


class Palette:
    """
    Swatches generated for one base color.

    ``swatches`` keeps generation order (shades, base, tints). Use
    :attr:`shades` and :attr:`tints` for display order.
    """

    __slots__ = ('_base_hex', '_swatches', '_base', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, base_hex: HexColor, swatches: Sequence[Swatch]) -> None:
        self._base_hex = base_hex
        self._swatches = tuple(swatches)
        bases = [s for s in self._swatches if s.role == SwatchRole.BASE]
        if len(bases) != 1:
            raise ValueError(f"Palette expects exactly one base swatch, got {len(bases)}")
        self._base = bases[0]
        super().__setattr__('_is_frozen', True)

    @property
    def base_hex(self) -> HexColor:
        return self._base_hex

    @property
    def swatches(self) -> Tuple[Swatch, ...]:
        return self._swatches

    @property
    def base(self) -> Swatch:
        return self._base

    @property
    def shades(self) -> Tuple[Swatch, ...]:
        return sorted_shades(self._swatches)

    @property
    def tints(self) -> Tuple[Swatch, ...]:
        return sorted_tints(self._swatches)

    def __iter__(self) -> Iterator[Swatch]:
        return iter(self._swatches)

    def __len__(self) -> int:
        return len(self._swatches)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._base_hex == other._base_hex and self._swatches == other._swatches

    def __hash__(self) -> int:
        return hash((self._base_hex, self._swatches))

    def __repr__(self) -> str:
        return f"Palette(base_hex={self._base_hex!r}, swatches={len(self._swatches)})"


def palette_style_names(palette: Palette, include_hashtag: bool = False) -> list[str]:
    """
    Paint-style names for a palette, in display order.

    Returns:
        ``[".../Base", ".../Shades/<n>", ..., ".../Tints/<n>", ...]``
    """
    root = f"{STYLE_ROOT}/{format_hex_label(palette.base_hex, include_hashtag)}"
    names = [f"{root}/Base"]
    names.extend(f"{root}/Shades/{s.display_step}" for s in palette.shades)
    names.extend(f"{root}/Tints/{s.display_step}" for s in palette.tints)
    return names
