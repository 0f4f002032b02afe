"""
store.py
========

Does: Own the palette (ordered, duplicate-free canonical color strings) and
      the UI flags around it, behind an explicit mutation interface.
Returns: PaletteStore and AddResult.
Used By: Manual color entry, image extraction, export templates, demo.

All mutation goes through append/remove_at/clear/add_color/remove_all. The
store is meant to be driven from one event loop; it holds no lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from color_palette_builder.color.normalize import normalize_color
from color_palette_builder.errors import InvalidColorError
from color_palette_builder.palette.notify import LoggingNotifier, Notifier
from color_palette_builder.utils.log import debug

__all__ = ["AddResult", "PaletteStore"]

logger = logging.getLogger(__name__)


class AddResult(str, Enum):
    ADDED = "added"
    DUPLICATE = "duplicate"
    INVALID = "invalid"


class PaletteStore:
    """Palette collection plus current input text, uploaded image and UI flags."""

    def __init__(self, notifier: Notifier | None = None):
        self.notifier: Notifier = notifier or LoggingNotifier()
        self._colors: list[str] = []
        self.current_color: str = ""
        self.uploaded_image: str | None = None
        self.is_extracting: bool = False
        self.show_export: bool = False

    # ── Read side ────────────────────────────────────────────────────────────
    @property
    def colors(self) -> tuple[str, ...]:
        """Snapshot of the palette in insertion order."""
        return tuple(self._colors)

    def contains(self, color: str) -> bool:
        """Canonical-string equality only; equal-looking notations are distinct."""
        return color in self._colors

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._colors))

    # ── Raw mutations ────────────────────────────────────────────────────────
    def append(self, color: str) -> bool:
        """Append an already-canonical color; False when it is present."""
        if color in self._colors:
            return False
        self._colors.append(color)
        debug(f"append {color!r} -> {len(self._colors)} colors", topic="palette")
        return True

    def remove_at(self, index: int) -> str:
        """Remove and return the color at `index` (IndexError when out of range)."""
        if not 0 <= index < len(self._colors):
            raise IndexError(f"palette index out of range: {index}")
        color = self._colors.pop(index)
        debug(f"remove_at {index} ({color!r})", topic="palette")
        return color

    def clear(self) -> None:
        self._colors.clear()

    # ── Flags ────────────────────────────────────────────────────────────────
    def set_current_color(self, text: str) -> None:
        self.current_color = text

    def set_uploaded_image(self, image: str | None) -> None:
        self.uploaded_image = image

    def set_is_extracting(self, value: bool) -> None:
        self.is_extracting = value

    def set_show_export(self, value: bool) -> None:
        self.show_export = value

    # ── Pipeline entry points ────────────────────────────────────────────────
    def add_color(self, text: str) -> AddResult:
        """
        Normalize raw text and append it.

        Invalid text and duplicates are reported through the notifier and
        leave the palette untouched; success clears `current_color`.
        """
        try:
            color = normalize_color(text)
        except InvalidColorError as e:
            detail = "Please enter a valid color code"
            if e.suggestion:
                detail += f". Did you mean '{e.suggestion}'?"
            self.notifier.error("Invalid color", detail)
            logger.debug("Rejected color input %r", text)
            return AddResult.INVALID

        if not self.append(color):
            self.notifier.info("Color already exists", "This color is already in your list")
            return AddResult.DUPLICATE

        self.current_color = ""
        return AddResult.ADDED

    def remove_all(self) -> None:
        """Clear every color and the uploaded image reference."""
        self._colors.clear()
        self.uploaded_image = None
        debug("remove_all", topic="palette")
