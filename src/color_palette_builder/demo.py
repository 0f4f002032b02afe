# src/color_palette_builder/demo.py
import argparse
import asyncio
import json
import logging
import sys


def main():
    """CLI demo: add shorthand colors and/or extract from an image, then print exports."""
    from .color import COLOR_MODELS, get_color_formats
    from .extraction import extract_colors_from_image
    from .palette import PaletteStore, generate_css_variables, generate_tailwind_config

    parser = argparse.ArgumentParser(
        prog="palette-demo",
        description="Build a palette from color values and images, print CSS/Tailwind exports.",
    )
    parser.add_argument(
        "colors",
        nargs="*",
        help="Color values (e.g. '255 0 0' 'ffaa00' '0.7 0.15 180' rebeccapurple)",
    )
    parser.add_argument("--image", action="append", default=[], help="Image file to extract from")
    parser.add_argument(
        "--format",
        choices=COLOR_MODELS,
        default="hex",
        dest="model",
        help="Color model for CSS variables",
    )
    parser.add_argument("--tailwind", action="store_true", help="Also print a Tailwind config")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = PaletteStore()
    for text in args.colors:
        store.add_color(text)
    for path in args.image:
        asyncio.run(extract_colors_from_image(path, store))

    if not len(store):
        print("❌ Palette is empty", file=sys.stderr)
        sys.exit(1)

    print("\n🎨 Palette:\n")
    print(json.dumps({c: get_color_formats(c) for c in store.colors}, indent=2, ensure_ascii=False))
    print()
    print(generate_css_variables(store.colors, args.model))
    if args.tailwind:
        print()
        print(generate_tailwind_config(store.colors))


if __name__ == "__main__":
    main()
