"""
Turn raw multi-color text plus explicit settings into palettes.

The host passes free text (``"#f00, 0af 123456"``) and a settings mapping;
everything is validated here before any color math runs. The first bad
token aborts the whole request, so callers never get a partial result.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .conversions import normalize_hex, is_valid_hex
from .errors import EmptyInputError, InvalidHexTokenError, InvalidStepCountError
from .palettes import Palette, generate_palette_model, expand_related_hexes, normalize_palette_type
from .types.color_types import HexColor
from .types.palette_type import PaletteType, DEFAULT_PALETTE_TYPE

DEFAULT_STEP_COUNT = 10
MIN_STEP_COUNT = 1
MAX_STEP_COUNT = 50

_TOKEN_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class PaletteSettings:
    """Per-request options. Mirrors what the host persists for the user."""
    step_count: Optional[int] = None
    palette_type: PaletteType = DEFAULT_PALETTE_TYPE
    include_palette: bool = False
    include_hashtag: bool = False
    dark_background: bool = False
    create_styles: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> PaletteSettings:
        """Build settings from a loosely typed host message (camelCase or snake_case keys)."""
        data = data or {}

        def pick(snake: str, camel: str) -> Any:
            return data[snake] if snake in data else data.get(camel)

        return cls(
            step_count=pick("step_count", "stepCount"),
            palette_type=normalize_palette_type(pick("palette_type", "paletteType")),
            include_palette=bool(pick("include_palette", "includePalette")),
            include_hashtag=bool(pick("include_hashtag", "includeHashtag")),
            dark_background=bool(pick("dark_background", "darkBackground")),
            create_styles=bool(pick("create_styles", "createStyles")),
        )


@dataclass(frozen=True)
class GenerationRequest:
    hexes: Tuple[HexColor, ...]
    step_count: int
    palette_type: PaletteType = DEFAULT_PALETTE_TYPE
    include_palette: bool = False

    @property
    def step_percent(self) -> float:
        return step_percent_for(self.step_count)

    def resolved_hexes(self) -> List[HexColor]:
        """Base colors in render order, harmonies interleaved when requested."""
        if self.include_palette:
            return expand_related_hexes(self.hexes, self.palette_type)
        return list(self.hexes)


def split_tokens(raw: str) -> List[str]:
    return [token for token in _TOKEN_SEPARATORS.split(raw) if token]


def parse_hex_list(raw: str) -> List[HexColor]:
    """
    Normalize and validate every color in ``raw``.

    Raises:
        EmptyInputError: no tokens at all
        InvalidHexTokenError: first token that is not a 3- or 6-digit hex
    """
    tokens = split_tokens(raw or "")
    if not tokens:
        raise EmptyInputError()

    hexes = []
    for token in tokens:
        normalized = normalize_hex(token)
        if not is_valid_hex(normalized):
            raise InvalidHexTokenError(token)
        hexes.append(normalized)
    return hexes


def resolve_step_count(value: Optional[int]) -> int:
    if value is None:
        return DEFAULT_STEP_COUNT
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"step_count must be an int, got {type(value).__name__}")
    # 0 means "not set"
    if value == 0:
        return DEFAULT_STEP_COUNT
    if not MIN_STEP_COUNT <= value <= MAX_STEP_COUNT:
        raise InvalidStepCountError(value, MIN_STEP_COUNT, MAX_STEP_COUNT)
    return value


def step_percent_for(step_count: int) -> float:
    return 100 / step_count


def build_request(raw: str, settings: PaletteSettings | Mapping[str, Any] | None = None) -> GenerationRequest:
    if not isinstance(settings, PaletteSettings):
        settings = PaletteSettings.from_mapping(settings)
    return GenerationRequest(
        hexes=tuple(parse_hex_list(raw)),
        step_count=resolve_step_count(settings.step_count),
        palette_type=settings.palette_type,
        include_palette=settings.include_palette,
    )


def generate_palettes(raw: str, settings: PaletteSettings | Mapping[str, Any] | None = None) -> List[Palette]:
    """
    Generate one palette per resolved base color.

    Args:
        raw: Free text holding one or more colors separated by whitespace and/or commas
        settings: ``PaletteSettings`` or a mapping accepted by ``PaletteSettings.from_mapping``

    Returns:
        Palettes in input order; with ``include_palette`` each color is
        followed by the palettes of its related hues.
    """
    request = build_request(raw, settings)
    return [generate_palette_model(hx, request.step_percent) for hx in request.resolved_hexes()]
