# tests/conftest.py
"""Shared fixtures: a recording notification sink and tiny in-memory images."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image


class RecordingNotifier:
    """Collect (kind, message, detail) tuples instead of showing toasts."""

    def __init__(self):
        self.events: list[tuple[str, str | None, str | None]] = []

    def info(self, message, detail=None):
        self.events.append(("info", message, detail))

    def success(self, message, detail=None):
        self.events.append(("success", message, detail))

    def error(self, message, detail=None):
        self.events.append(("error", message, detail))

    def loading(self, message):
        self.events.append(("loading", message, None))

    def dismiss(self):
        self.events.append(("dismiss", None, None))

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.events]

    def last(self, kind: str):
        for event in reversed(self.events):
            if event[0] == kind:
                return event
        return None


def make_png(blocks, size=(8, 8), mode="RGB") -> bytes:
    """Build a PNG whose rows are split among `blocks` [(color, n_rows), ...]."""
    img = Image.new(mode, size)
    y = 0
    for color, rows in blocks:
        for yy in range(y, min(y + rows, size[1])):
            for x in range(size[0]):
                img.putpixel((x, yy), color)
        y += rows
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def red_blue_png() -> bytes:
    """8x8: six rows of red, two rows of blue."""
    return make_png([((255, 0, 0), 6), ((0, 0, 255), 2)])
