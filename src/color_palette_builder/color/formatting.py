"""
formatting.py
=============

Does: Render a canonical color in a requested color model (hex, rgb, hsl,
      hsv, oklch).
Used By: palette.export, demo, any display code.
Returns: Strings. Pure and total over valid canonical colors.
"""

from __future__ import annotations

from color_palette_builder.color.convert import rgb_to_hsl, rgb_to_hsv, rgb_to_oklch
from color_palette_builder.color.parse import parse_color
from color_palette_builder.color.types import COLOR_MODELS, RGBA, ColorModel
from color_palette_builder.errors import InvalidColorError

__all__ = [
    "format_color",
    "get_color_formats",
    "to_hex",
    "to_rgb_string",
    "to_hsl_string",
    "to_hsv_string",
    "to_oklch_string",
]
__docformat__ = "google"


def _num(value: float, digits: int = 3) -> str:
    """Round and print without trailing zeros ('0.5', '1', '29.23')."""
    out = f"{round(value, digits):.{digits}f}".rstrip("0").rstrip(".")
    return "0" if out in ("-0", "") else out


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


# ── Per-model renderers ──────────────────────────────────────────────────────
def to_hex(rgba: RGBA) -> str:
    """Does: '#rrggbb', or '#rrggbbaa' when the alpha byte is below ff; lower-case."""
    r, g, b = (int(_clamp(round(c), 0, 255)) for c in rgba[:3])
    out = f"#{r:02x}{g:02x}{b:02x}"
    alpha_byte = int(_clamp(round(rgba.a * 255), 0, 255))
    if alpha_byte < 255:
        out += f"{alpha_byte:02x}"
    return out


def to_rgb_string(rgba: RGBA) -> str:
    r, g, b = rgba.rgb()
    if rgba.a < 1:
        return f"rgba({r}, {g}, {b}, {_num(rgba.a)})"
    return f"rgb({r}, {g}, {b})"


def to_hsl_string(rgba: RGBA) -> str:
    hsl = rgb_to_hsl(rgba)
    h, s, l = round(hsl.h) % 360, round(hsl.s), round(hsl.l)  # noqa: E741
    if rgba.a < 1:
        return f"hsla({h}, {s}%, {l}%, {_num(rgba.a)})"
    return f"hsl({h}, {s}%, {l}%)"


def to_hsv_string(rgba: RGBA) -> str:
    """
    Does: 'HSV(h°, s%, v%)' with ' / a' appended when alpha != 1.
    Hue is rounded modulo 360 (a 360 hue reads as 0); saturation and value
    are rounded and clamped to [0, 100].
    """
    hsv = rgb_to_hsv(rgba)
    h = round(hsv.h) % 360
    s = int(_clamp(round(hsv.s), 0, 100))
    v = int(_clamp(round(hsv.v), 0, 100))
    alpha = f" / {_num(hsv.a)}" if hsv.a != 1 else ""
    return f"HSV({h}°, {s}%, {v}%{alpha})"


def to_oklch_string(rgba: RGBA) -> str:
    lch = rgb_to_oklch(rgba)
    c = round(lch.c, 4)
    h = round(lch.h, 2) % 360 if c > 0 else 0.0  # achromatic: hue is noise
    alpha = f" / {_num(lch.a)}" if lch.a != 1 else ""
    return f"oklch({_num(lch.l, 4)} {_num(c, 4)} {_num(h, 2)}{alpha})"


_RENDERERS = {
    "hex": to_hex,
    "rgb": to_rgb_string,
    "hsl": to_hsl_string,
    "hsv": to_hsv_string,
    "oklch": to_oklch_string,
}


# ── Public API ───────────────────────────────────────────────────────────────
def _parse_or_raise(color: str) -> RGBA:
    rgba = parse_color(color)
    if rgba is None:
        raise InvalidColorError(color)
    return rgba


def format_color(color: str, model: ColorModel = "hex") -> str:
    """
    Does: Render one canonical color in `model`.
    Raises: ValueError for an unknown model, InvalidColorError for text the
            parser rejects (never the case for palette entries).
    """
    try:
        render = _RENDERERS[model]
    except KeyError:
        raise ValueError(f"Unknown color model: {model!r}") from None
    return render(_parse_or_raise(color))


def get_color_formats(color: str) -> dict[str, str]:
    """Does: Render one canonical color in every model, keyed by model name."""
    rgba = _parse_or_raise(color)
    return {model: _RENDERERS[model](rgba) for model in COLOR_MODELS}
