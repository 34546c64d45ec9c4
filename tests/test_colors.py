"""
Tests for accent color helpers.
"""

import pytest

from colors import (
    DEFAULT_ACCENT_COLOR,
    DerivedPalette,
    derive_palette,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_hex,
    mix_hex_colors,
    normalize_hex_color,
    rgb_to_hex,
    shade_hex_color,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#AABBCC", "#aabbcc"),
        ("a1b2c3", "#a1b2c3"),
        ("#abc", "#aabbcc"),
        ("ABC", "#aabbcc"),
        ("  #Fa0  ", "#ffaa00"),
    ],
)
def test_normalize_hex_color_valid(value, expected):
    assert normalize_hex_color(value) == expected


@pytest.mark.parametrize("value", ["", "#ab", "#abcd", "zzzzzz", "#1234567", "rgb(0,0,0)", None, 123])
def test_normalize_hex_color_falls_back_to_default(value):
    assert normalize_hex_color(value) == DEFAULT_ACCENT_COLOR == "#667eea"


def test_hex_to_rgb():
    assert hex_to_rgb("#667eea") == (102, 126, 234)
    assert hex_to_rgb("fff") == (255, 255, 255)


def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex((255.6, -3, 127.5)) == "#ff0080"
    assert rgb_to_hex((0, 0, 0)) == "#000000"


def test_hex_to_rgba_clamps_alpha():
    assert hex_to_rgba("#667eea", 0.25) == "rgba(102, 126, 234, 0.25)"
    assert hex_to_rgba("#000", 3) == "rgba(0, 0, 0, 1)"
    assert hex_to_rgba("#000", -1) == "rgba(0, 0, 0, 0)"


def test_hex_to_rgba_keeps_full_alpha_precision():
    assert hex_to_rgba("#000", 1 / 3) == "rgba(0, 0, 0, 0.3333333333333333)"
    assert hex_to_rgba("#000", 0.1) == "rgba(0, 0, 0, 0.1)"


def test_mix_hex_colors_endpoints():
    assert mix_hex_colors("#ABC", "#123456", 0) == "#aabbcc"
    assert mix_hex_colors("#ABC", "#123456", 1) == "#123456"


def test_mix_hex_colors_clamps_weight():
    assert mix_hex_colors("#000000", "#ffffff", -2) == "#000000"
    assert mix_hex_colors("#000000", "#ffffff", 5) == "#ffffff"


def test_mix_hex_colors_midpoint_rounds_half_up():
    assert mix_hex_colors("#000000", "#ffffff", 0.5) == "#808080"


@pytest.mark.parametrize("value", ["#ABC", "667EEA", "not a color", None])
def test_shade_zero_is_normalize(value):
    assert shade_hex_color(value, 0) == normalize_hex_color(value)


def test_shade_darker_and_lighter():
    assert shade_hex_color("#667eea", -0.18) == "#5467c0"
    assert shade_hex_color("#667eea", 0.18) == "#8295ee"


def test_shade_amount_is_capped():
    assert shade_hex_color("#667eea", 2) == "#ffffff"
    assert shade_hex_color("#667eea", -5) == "#000000"


@pytest.mark.parametrize(
    "h, s, l, expected",
    [
        (0, 100, 50, "#ff0000"),
        (120, 100, 50, "#00ff00"),
        (240, 100, 50, "#0000ff"),
        (360, 100, 50, "#ff0000"),
        (-120, 100, 50, "#0000ff"),
        (0, 0, 100, "#ffffff"),
        (0, 0, 50, "#808080"),
    ],
)
def test_hsl_to_hex(h, s, l, expected):
    assert hsl_to_hex(h, s, l) == expected


def test_hsl_to_hex_clamps_percentages():
    assert hsl_to_hex(0, 150, 50) == hsl_to_hex(0, 100, 50)
    assert hsl_to_hex(0, 100, -10) == "#000000"


def test_derive_palette_defaults():
    assert derive_palette(None) == DerivedPalette("#667eea", "#5467c0", "#8295ee")
    assert derive_palette("#bogus").accent == DEFAULT_ACCENT_COLOR
