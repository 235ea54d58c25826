import numpy as np
import pytest

from tintshade.conversions import (
    normalize_hex,
    is_valid_hex,
    hex_to_rgb255,
    hex_to_unit_rgb,
    rgb255_to_hex,
    np_hex_to_rgb255,
    np_rgb255_to_hex,
)
from ..samples import samples_hex_rgb


@pytest.mark.parametrize("raw, expected", [
    ("#FFAA00", "#ffaa00"),
    ("ffaa00", "#ffaa00"),
    ("  #fa0 ", "#ffaa00"),
    ("FA0", "#ffaa00"),
    ("#12345", "#12345"),
    ("zzz", "#zzzzzz"),
    ("##fff", "##fff"),
])
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["#FFAA00", "fa0", " 123456 ", "zzz", "#1234"])
def test_normalize_hex_idempotent(raw):
    once = normalize_hex(raw)
    assert normalize_hex(once) == once


def test_is_valid_hex():
    assert is_valid_hex("#a1b2c3")
    assert is_valid_hex("#A1B2C3")
    assert not is_valid_hex("a1b2c3")
    assert not is_valid_hex("#a1b2c")
    assert not is_valid_hex("#a1b2c3d")
    assert not is_valid_hex("#a1b2cg")
    assert not is_valid_hex("#a1b2c3\n")
    assert not is_valid_hex(normalize_hex("zzz"))


def test_hex_to_rgb255():
    for hex_color, rgb in samples_hex_rgb.items():
        assert hex_to_rgb255(hex_color) == rgb


def test_hex_to_unit_rgb():
    r, g, b = hex_to_unit_rgb("#ff8000")
    assert r == 1.0
    assert abs(g - 128 / 255) < 1e-12
    assert b == 0.0


def test_rgb255_to_hex():
    for hex_color, rgb in samples_hex_rgb.items():
        assert rgb255_to_hex(*rgb) == hex_color


def test_rgb255_to_hex_pads_single_digits():
    assert rgb255_to_hex(0, 5, 15) == "#00050f"


def test_rgb255_to_hex_clamps_and_rounds():
    assert rgb255_to_hex(-20, 300, 127.5) == "#00ff80"
    assert rgb255_to_hex(115.2, 140.7, 254.6) == "#738dff"
    # halves round up, not to even
    assert rgb255_to_hex(62.5, 0.5, 1.5) == "#3f0102"


def test_np_hex_to_rgb255():
    hexes = list(samples_hex_rgb.keys())
    expected = np.array(list(samples_hex_rgb.values()))
    result = np_hex_to_rgb255(hexes)
    assert result.shape == (len(hexes), 3)
    assert np.array_equal(result, expected)


def test_np_hex_to_rgb255_empty():
    assert np_hex_to_rgb255([]).shape == (0, 3)


def test_np_rgb255_to_hex_matches_scalar():
    values = np.array([[-20, 300, 127.5], [115.2, 140.7, 254.6], [62.5, 0.5, 1.5]])
    expected = [rgb255_to_hex(*row) for row in values.tolist()]
    assert np_rgb255_to_hex(values) == expected
