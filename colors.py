"""Accent color helpers: hex normalization, mixing, shading and HSL conversion."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Tuple

DEFAULT_ACCENT_COLOR = "#667eea"
GRADIENT_SHADE = 0.18
HEX_PATTERN = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{6})", re.I)

Rgb = Tuple[float, float, float]


@dataclass(frozen=True)
class DerivedPalette:
    accent: str
    gradient_from: str
    gradient_to: str


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize_hex_color(value: object) -> str:
    """Return ``#rrggbb`` for a 3 or 6 digit hex string, else the default accent."""
    if not isinstance(value, str):
        return DEFAULT_ACCENT_COLOR
    m = HEX_PATTERN.fullmatch(value.strip())
    if not m:
        return DEFAULT_ACCENT_COLOR
    h = m.group(1)
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    return "#" + h.lower()


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    h = normalize_hex_color(value)[1:]
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_hex(rgb: Rgb) -> str:
    r, g, b = (int(clamp(round_half_up(ch), 0, 255)) for ch in rgb)
    return "#%02x%02x%02x" % (r, g, b)


def hex_to_rgba(value: str, alpha: float) -> str:
    r, g, b = hex_to_rgb(value)
    # shortest round-trip repr, printed like a JS number
    a = repr(float(clamp(alpha, 0.0, 1.0)))
    if a.endswith(".0"):
        a = a[:-2]
    return f"rgba({r}, {g}, {b}, {a})"


def mix_hex_colors(base: str, mix: str, weight: float) -> str:
    # weight 0 keeps base, weight 1 yields mix
    w = clamp(weight, 0.0, 1.0)
    base_rgb = hex_to_rgb(base)
    mix_rgb = hex_to_rgb(mix)
    return rgb_to_hex(tuple(b * (1 - w) + m * w for b, m in zip(base_rgb, mix_rgb)))


def shade_hex_color(value: str, amount: float) -> str:
    """Lighten (positive amount) or darken (negative amount) a hex color."""
    if amount == 0:
        return normalize_hex_color(value)
    if amount > 0:
        return mix_hex_colors(value, "#ffffff", min(1.0, amount))
    return mix_hex_colors(value, "#000000", min(1.0, abs(amount)))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    hue = h % 360
    saturation = clamp(s, 0, 100) / 100
    lightness = clamp(l, 0, 100) / 100
    a = saturation * min(lightness, 1 - lightness)

    def channel(n: int) -> float:
        k = (n + hue / 30) % 12
        return lightness - a * clamp(min(k - 3, 9 - k), -1, 1)

    return rgb_to_hex(tuple(clamp(channel(n), 0.0, 1.0) * 255 for n in (0, 8, 4)))


def derive_palette(accent: object) -> DerivedPalette:
    base = normalize_hex_color(accent)
    return DerivedPalette(
        accent=base,
        gradient_from=shade_hex_color(base, -GRADIENT_SHADE),
        gradient_to=shade_hex_color(base, GRADIENT_SHADE),
    )
