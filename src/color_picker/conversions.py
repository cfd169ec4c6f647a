# conversions.py – RGB ↔ HSL / HSV on normalized [0,1] triples
#   - hue is a fraction of a full turn (degrees / 360)
#   - derived channels that are mathematically undefined come back as None,
#     which tells the caller to keep whatever value it already had

from __future__ import annotations

import math
from typing import Optional, Tuple

Triple = Tuple[float, float, float]
# None = "retain the previously stored value" (achromatic / zero-value colors)
Derived = Tuple[Optional[float], Optional[float], Optional[float]]

ACHROMATIC_EPSILON = 1e-6


# --- 1) RGB (identity) --------------------------------------------------------
def rgb_to_rgb(r: float, g: float, b: float) -> Triple:
    return r, g, b


# --- 2) shared hue ------------------------------------------------------------
def _hue(r: float, g: float, b: float, mx: float, delta: float) -> Optional[float]:
    if delta < ACHROMATIC_EPSILON:
        return None
    # tie-break when two channels share the max: r, then g, then b
    if mx == r:
        h = (g - b) / delta / 6 + 1
    elif mx == g:
        h = (b - r) / delta / 6 + 1 / 3
    else:
        h = (r - g) / delta / 6 + 2 / 3
    return h % 1.0


# --- 3) HSL -------------------------------------------------------------------
def rgb_to_hsl(r: float, g: float, b: float) -> Derived:
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    l = (mx + mn) / 2
    denom = mx + mn if l <= 0.5 else 2 - (mx + mn)
    # denom only reaches zero for out-of-range RGB; keep the stored saturation
    if delta < ACHROMATIC_EPSILON or abs(denom) < ACHROMATIC_EPSILON:
        s = None
    else:
        s = delta / denom

    return _hue(r, g, b, mx, delta), s, l


def _hsl_channel(t: float, p: float, q: float) -> float:
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * 6 * (2 / 3 - t)
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    # http://en.wikipedia.org/wiki/HSL_and_HSV
    if l < 0.5:
        q = l * (1 + s)
    else:
        q = l + s - l * s
    p = 2 * l - q

    return (
        _hsl_channel((h + 1 / 3) % 1.0, p, q),
        _hsl_channel(h % 1.0, p, q),
        _hsl_channel((h + 2 / 3) % 1.0, p, q),
    )


# --- 4) HSV -------------------------------------------------------------------
def rgb_to_hsv(r: float, g: float, b: float) -> Derived:
    mx = max(r, g, b)
    mn = min(r, g, b)
    s = None if mx == 0 else 1 - mn / mx
    return _hue(r, g, b, mx, mx - mn), s, mx


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    u = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        return v, u, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, u
    if sector == 3:
        return p, q, v
    if sector == 4:
        return u, p, v
    return v, p, q


__all__ = [
    "ACHROMATIC_EPSILON",
    "Derived",
    "Triple",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_rgb",
]
