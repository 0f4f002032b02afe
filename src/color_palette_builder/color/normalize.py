# color/normalize.py
# ──────────────────────────────────────────────────────────────
# Raw shorthand -> canonical color string
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Classify the shape of raw user color text (bare OKLCH/HSL/RGB triples,
      bare hex), wrap it in its functional notation, and validate the result
      with the generic parser.
Returns: normalize_color() -> canonical string (raises InvalidColorError),
         try_normalize() -> canonical string or None, classify_shape().
Used by: PaletteStore.add_color (manual entry and extracted colors).

The canonical string is the wrapped text itself, never a re-serialization:
'255 0 0' and '#ff0000' are different canonical entries.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import NamedTuple

from color_palette_builder.color.constants import (
    HEX_BODY_LENGTHS,
    HEX_SHAPE_RE,
    HSL_SHAPE_RE,
    OKLCH_SHAPE_RE,
    RGB_SHAPE_RE,
)
from color_palette_builder.color.parse import is_valid_color
from color_palette_builder.color.suggest import suggest_color_name
from color_palette_builder.errors import InvalidColorError
from color_palette_builder.utils.log import debug

__all__ = [
    "ShapeMatcher",
    "SHAPE_MATCHERS",
    "classify_shape",
    "wrap_shorthand",
    "normalize_color",
    "try_normalize",
]

_SEPARATORS_RE = re.compile(r"[,\s]+")
_HSL_MARKER_RE = re.compile(r"%|deg|turn|rad|grad")


class ShapeMatcher(NamedTuple):
    """One tagged variant: a predicate over the trimmed text and its wrapper."""

    name: str
    matches: Callable[[str], bool]
    wrap: Callable[[str], str]


# ──────────────────────────────────────────────────────────────
# 1) Predicates
# ──────────────────────────────────────────────────────────────


def _is_oklch_triple(s: str) -> bool:
    # Plain numbers only; a decimal point marks them as proportions
    return bool(OKLCH_SHAPE_RE.match(s)) and "." in s


def _is_hsl_triple(s: str) -> bool:
    # A unit or '%' is required; unmarked integer triples are RGB
    return bool(HSL_SHAPE_RE.match(s)) and bool(_HSL_MARKER_RE.search(s))


def _is_rgb_triple(s: str) -> bool:
    return bool(RGB_SHAPE_RE.match(s))


def _is_hex_body(s: str) -> bool:
    return bool(HEX_SHAPE_RE.match(s)) and len(s) in HEX_BODY_LENGTHS


def _collapse_separators(s: str) -> str:
    return " ".join(p for p in _SEPARATORS_RE.split(s) if p)


# ──────────────────────────────────────────────────────────────
# 2) Ordered matchers (first match wins)
# ──────────────────────────────────────────────────────────────

SHAPE_MATCHERS: tuple[ShapeMatcher, ...] = (
    ShapeMatcher("oklch", _is_oklch_triple, lambda s: f"oklch({s})"),
    ShapeMatcher("hsl", _is_hsl_triple, lambda s: f"hsl({s})"),
    ShapeMatcher("rgb", _is_rgb_triple, lambda s: f"rgb({_collapse_separators(s)})"),
    ShapeMatcher("hex", _is_hex_body, lambda s: f"#{s}"),
)


def classify_shape(text: str) -> str | None:
    """Return the matcher name for raw text, or None when it passes through."""
    s = text.strip()
    for matcher in SHAPE_MATCHERS:
        if matcher.matches(s):
            return matcher.name
    return None


def wrap_shorthand(text: str) -> str:
    """Wrap a bare numeric/hex body in its notation; other text is returned trimmed."""
    s = text.strip()
    for matcher in SHAPE_MATCHERS:
        if matcher.matches(s):
            wrapped = matcher.wrap(s)
            debug(f"shape={matcher.name} {s!r} -> {wrapped!r}", topic="normalize")
            return wrapped
    return s


# ──────────────────────────────────────────────────────────────
# 3) Normalization
# ──────────────────────────────────────────────────────────────


def normalize_color(text: str) -> str:
    """
    Does: Turn raw text into a canonical color string.
    Returns: The wrapped candidate when the generic parser accepts it.
    Raises: InvalidColorError (with an optional name suggestion) otherwise.
    """
    if not isinstance(text, str):
        raise InvalidColorError(repr(text))
    candidate = wrap_shorthand(text)
    if not candidate or not is_valid_color(candidate):
        debug(f"rejected {text!r} (candidate {candidate!r})", topic="normalize")
        raise InvalidColorError(text, candidate, suggest_color_name(candidate))
    return candidate


def try_normalize(text: str) -> str | None:
    """Does: normalize_color() that returns None instead of raising."""
    try:
        return normalize_color(text)
    except InvalidColorError:
        return None
