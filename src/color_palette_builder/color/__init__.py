"""
color.
=====

Does: Aggregate the color-domain layer: parsing, model conversion, shorthand
      normalization and per-model formatting.
Used By: palette store, export templates, image extraction, demo CLI.
Returns: Pure functions; no palette state lives here.
"""

from .formatting import format_color, get_color_formats
from .normalize import classify_shape, normalize_color, try_normalize, wrap_shorthand
from .parse import is_valid_color, parse_color
from .types import COLOR_MODELS, HSLA, HSVA, OKLCHA, RGBA, ColorModel

__all__ = [
    # normalize
    "normalize_color",
    "try_normalize",
    "classify_shape",
    "wrap_shorthand",
    # parse
    "parse_color",
    "is_valid_color",
    # formatting
    "format_color",
    "get_color_formats",
    # types
    "ColorModel",
    "COLOR_MODELS",
    "RGBA",
    "HSLA",
    "HSVA",
    "OKLCHA",
]
