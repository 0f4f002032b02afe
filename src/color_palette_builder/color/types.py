"""
types.
======

Does: Define the numeric color-model tuples derived on demand from a canonical
      color string, plus the literal set of export models.
Used By: parse, convert, formatting, rgb_distance, extraction.
Returns: Plain NamedTuples (never stored in the palette).
"""

from __future__ import annotations

from typing import Literal, NamedTuple

__all__ = ["ColorModel", "COLOR_MODELS", "RGB", "RGBA", "HSLA", "HSVA", "OKLCHA"]
__docformat__ = "google"

ColorModel = Literal["hex", "rgb", "hsl", "hsv", "oklch"]
COLOR_MODELS: tuple[ColorModel, ...] = ("hex", "rgb", "hsl", "hsv", "oklch")

RGB = tuple[int, int, int]


class RGBA(NamedTuple):
    """sRGB channels in [0, 255] (floats allowed), alpha in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def rgb(self) -> RGB:
        """Does: Round channels to an int triple (alpha dropped)."""
        return (round(self.r), round(self.g), round(self.b))


class HSLA(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1.0


class HSVA(NamedTuple):
    h: float
    s: float
    v: float
    a: float = 1.0


class OKLCHA(NamedTuple):
    """OKLCH with lightness in [0, 1], chroma >= 0, hue in degrees."""

    l: float  # noqa: E741
    c: float
    h: float
    a: float = 1.0
