"""
parse.py
========

Does: General-purpose CSS color parser used to validate normalized candidates
      and to recover numeric channels from canonical strings.
Accepts: '#rgb', '#rgba', '#rrggbb', '#rrggbbaa', rgb()/rgba(), hsl()/hsla()
         (legacy comma or modern space syntax with '/ alpha'), oklch(),
         CSS named colors and 'transparent'.
Returns: RGBA or None. Out-of-range channels are rejected, not clamped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from color_palette_builder.color.constants import (
    OKLCH_CHROMA_PERCENT_REF,
    PERCENT_MAX,
    RGB_MAX,
)
from color_palette_builder.color.convert import angle_to_degrees, hsl_to_rgb, oklch_to_rgb
from color_palette_builder.color.types import HSLA, OKLCHA, RGBA
from color_palette_builder.color.vocab import TRANSPARENT, named_color_hex

__all__ = ["parse_color", "is_valid_color", "parse_hex"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNC_RE = re.compile(r"^(rgba?|hsla?|oklch)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_TOKEN_RE = re.compile(
    r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg|grad|rad|turn)?$", re.IGNORECASE
)


# ── Tokens ───────────────────────────────────────────────────────────────────
def _token(raw: str) -> tuple[float, str] | None:
    """Split '12.5%' into (12.5, '%'); None when not a number."""
    m = _TOKEN_RE.match(raw.strip())
    if not m:
        return None
    return float(m.group(1)), (m.group(2) or "").lower()


def _split_args(body: str) -> list[str] | None:
    """Split a functional body in legacy (commas) or modern (spaces + '/') syntax."""
    if "," in body:
        if "/" in body:
            return None
        parts = [p.strip() for p in body.split(",")]
        return parts if all(parts) else None
    main, slash, alpha = body.partition("/")
    parts = main.split()
    if slash:
        if len(parts) != 3 or not alpha.strip():
            return None
        parts.append(alpha.strip())
    elif len(parts) != 3:
        return None
    return parts


def _alpha(raw: str | None) -> float | None:
    if raw is None:
        return 1.0
    tok = _token(raw)
    if tok is None:
        return None
    value, unit = tok
    if unit == "%":
        value /= PERCENT_MAX
    elif unit:
        return None
    return value if 0.0 <= value <= 1.0 else None


def _in_range(value: float, upper: float) -> bool:
    return 0.0 <= value <= upper


# ── Per-model channel readers ────────────────────────────────────────────────
def _read_rgb(args: list[str], alpha: float) -> RGBA | None:
    channels: list[float] = []
    for raw in args:
        tok = _token(raw)
        if tok is None:
            return None
        value, unit = tok
        if unit == "%":
            if not _in_range(value, PERCENT_MAX):
                return None
            value = value * RGB_MAX / PERCENT_MAX
        elif unit or not _in_range(value, RGB_MAX):
            return None
        channels.append(value)
    return RGBA(*channels, alpha)


def _read_hsl(args: list[str], alpha: float) -> RGBA | None:
    hue, sat, light = (_token(a) for a in args)
    if hue is None or sat is None or light is None or hue[1] == "%":
        return None
    for value, unit in (sat, light):
        if unit not in ("", "%") or not _in_range(value, PERCENT_MAX):
            return None
    h = angle_to_degrees(hue[0], hue[1] or "deg")
    return hsl_to_rgb(HSLA(h, sat[0], light[0], alpha))


def _read_oklch(args: list[str], alpha: float) -> RGBA | None:
    light, chroma, hue = (_token(a) for a in args)
    if light is None or chroma is None or hue is None or hue[1] == "%":
        return None
    l_value, l_unit = light
    if l_unit == "%":
        l_value /= PERCENT_MAX
    elif l_unit:
        return None
    c_value, c_unit = chroma
    if c_unit == "%":
        c_value = c_value / PERCENT_MAX * OKLCH_CHROMA_PERCENT_REF
    elif c_unit:
        return None
    if not _in_range(l_value, 1.0) or c_value < 0.0:
        return None
    h = angle_to_degrees(hue[0], hue[1] or "deg")
    return oklch_to_rgb(OKLCHA(l_value, c_value, h, alpha))


_READERS: dict[str, Callable[[list[str], float], RGBA | None]] = {
    "rgb": _read_rgb,
    "hsl": _read_hsl,
    "oklch": _read_oklch,
}


# ── Entry points ─────────────────────────────────────────────────────────────
def parse_hex(text: str) -> RGBA | None:
    """Does: Parse '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa'."""
    m = _HEX_RE.match(text)
    if not m:
        return None
    body = m.group(1)
    if len(body) <= 4:
        body = "".join(ch * 2 for ch in body)
    r, g, b = (int(body[i:i + 2], 16) for i in (0, 2, 4))
    a = int(body[6:8], 16) / RGB_MAX if len(body) == 8 else 1.0
    return RGBA(r, g, b, a)


def _parse_functional(text: str) -> RGBA | None:
    m = _FUNC_RE.match(text)
    if not m:
        return None
    name = m.group(1).lower()
    args = _split_args(m.group(2))
    if args is None or len(args) not in (3, 4):
        return None
    alpha = _alpha(args[3] if len(args) == 4 else None)
    if alpha is None:
        return None
    reader = _READERS[name.rstrip("a")]
    return reader(args[:3], alpha)


def parse_color(text: str) -> RGBA | None:
    """
    Does: Parse any supported CSS color notation.
    Returns: RGBA with channels in [0, 255] and alpha in [0, 1], or None.
    """
    if not isinstance(text, str):
        return None
    s = text.strip()
    if not s:
        return None
    if s.startswith("#"):
        return parse_hex(s)
    if "(" in s:
        return _parse_functional(s)
    if s.lower() == TRANSPARENT:
        return RGBA(0, 0, 0, 0.0)
    hx = named_color_hex(s)
    if hx is None:
        logger.debug("Unrecognized color text: %r", s)
        return None
    return parse_hex(hx)


def is_valid_color(text: str) -> bool:
    """Does: True when parse_color() accepts the text."""
    return parse_color(text) is not None
