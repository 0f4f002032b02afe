"""
convert.py
==========

Does: Convert numeric colors between sRGB, HSL, HSV and OKLCH (via OKLab),
      plus CSS angle units to degrees.
Used By: parse (model -> RGBA), formatting (RGBA -> model), rgb_distance.
Returns: Color-model tuples from color.types; never strings.
"""

from __future__ import annotations

import colorsys
import math

from color_palette_builder.color.constants import HUE_UNITS, PERCENT_MAX, RGB_MAX
from color_palette_builder.color.types import HSLA, HSVA, OKLCHA, RGBA

__all__ = [
    "angle_to_degrees",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "to_model",
]
__docformat__ = "google"


# =============================================================================
# 1) ANGLES
# =============================================================================

def angle_to_degrees(value: float, unit: str = "deg") -> float:
    """Does: Convert a CSS angle to degrees in [0, 360)."""
    try:
        factor = HUE_UNITS[unit or "deg"]
    except KeyError:
        raise ValueError(f"Unknown angle unit: {unit!r}") from None
    return (value * factor) % 360.0


# =============================================================================
# 2) HSL / HSV (colorsys works on [0, 1] floats)
# =============================================================================

def hsl_to_rgb(hsl: HSLA) -> RGBA:
    r, g, b = colorsys.hls_to_rgb(
        (hsl.h % 360.0) / 360.0, hsl.l / PERCENT_MAX, hsl.s / PERCENT_MAX
    )
    return RGBA(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX, hsl.a)


def rgb_to_hsl(rgba: RGBA) -> HSLA:
    h, l, s = colorsys.rgb_to_hls(*(c / RGB_MAX for c in rgba[:3]))
    return HSLA(h * 360.0, s * PERCENT_MAX, l * PERCENT_MAX, rgba.a)


def rgb_to_hsv(rgba: RGBA) -> HSVA:
    h, s, v = colorsys.rgb_to_hsv(*(c / RGB_MAX for c in rgba[:3]))
    return HSVA(h * 360.0, s * PERCENT_MAX, v * PERCENT_MAX, rgba.a)


# =============================================================================
# 3) OKLCH (Ottosson OKLab, sRGB D65)
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    v = v / RGB_MAX
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(v: float) -> float:
    v = min(max(v, 0.0), 1.0)  # clip to gamut
    v = 12.92 * v if v <= 0.0031308 else 1.055 * v ** (1 / 2.4) - 0.055
    return v * RGB_MAX


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def rgb_to_oklch(rgba: RGBA) -> OKLCHA:
    r, g, b = (_srgb_to_linear(c) for c in rgba[:3])

    l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    bb = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    c = math.hypot(a, bb)
    h = math.degrees(math.atan2(bb, a)) % 360.0
    return OKLCHA(L, c, h, rgba.a)


def oklch_to_rgb(lch: OKLCHA) -> RGBA:
    """Does: Convert OKLCH to sRGB, clipping out-of-gamut channels."""
    hr = math.radians(lch.h)
    a, b = lch.c * math.cos(hr), lch.c * math.sin(hr)

    l_ = lch.l + 0.3963377774 * a + 0.2158037573 * b
    m_ = lch.l - 0.1055613458 * a - 0.0638541728 * b
    s_ = lch.l - 0.0894841775 * a - 1.2914855480 * b
    l, m, s = l_ ** 3, m_ ** 3, s_ ** 3  # noqa: E741

    r = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    bl = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s
    return RGBA(_linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(bl), lch.a)


# =============================================================================
# 4) DISPATCH
# =============================================================================

_FROM_RGB = {
    "rgb": lambda c: c,
    "hsl": rgb_to_hsl,
    "hsv": rgb_to_hsv,
    "oklch": rgb_to_oklch,
}


def to_model(rgba: RGBA, model: str) -> RGBA | HSLA | HSVA | OKLCHA:
    """Does: Project an RGBA color into 'rgb', 'hsl', 'hsv' or 'oklch'."""
    try:
        return _FROM_RGB[model](rgba)
    except KeyError:
        raise ValueError(f"Unknown color model: {model!r}") from None
