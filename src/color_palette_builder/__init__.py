"""
color_palette_builder
=====================

Does: Root package for the palette builder: shorthand color normalization,
      per-model formatting, image palette extraction and CSS/Tailwind export.
Returns: Re-exports the two pipeline entry points and the palette store.
Used by: Applications embedding the palette, the `palette-demo` CLI, tests.
"""

from .color import format_color, get_color_formats, normalize_color
from .extraction import extract_colors_from_image
from .palette import PaletteStore, generate_css_variables, generate_tailwind_config

__all__: list[str] = [
    "normalize_color",
    "format_color",
    "get_color_formats",
    "extract_colors_from_image",
    "PaletteStore",
    "generate_css_variables",
    "generate_tailwind_config",
]
__docformat__ = "google"
