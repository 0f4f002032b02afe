"""
export.py

Does: Template the palette into a CSS custom-property block or a Tailwind
      config, using format_color() for each entry.
Returns: Strings; "" for an empty palette.
"""

from __future__ import annotations

from collections.abc import Sequence

from color_palette_builder.color.formatting import format_color
from color_palette_builder.color.types import ColorModel

__all__ = ["generate_css_variables", "generate_tailwind_config"]


def generate_css_variables(colors: Sequence[str], model: ColorModel = "hex") -> str:
    """':root { --color-N: ...; }' in palette order, N starting at 1."""
    if not colors:
        return ""
    lines = [f"  --color-{i}: {format_color(c, model)};" for i, c in enumerate(colors, start=1)]
    return ":root {\n" + "\n".join(lines) + "\n}"


def generate_tailwind_config(colors: Sequence[str]) -> str:
    """module.exports with theme.extend.colors.colorN set to each hex value."""
    if not colors:
        return ""
    entries = [
        f'        color{i}: "{format_color(c, "hex")}"' for i, c in enumerate(colors, start=1)
    ]
    return (
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        + ",\n".join(entries)
        + "\n      },\n"
        "    },\n"
        "  },\n"
        "}"
    )
