"""
notify.py

Does: Define the fire-and-forget notification sink used for user feedback
      (info / success / error / loading / dismiss).
Returns: The Notifier protocol and LoggingNotifier, the default sink.
Used by: PaletteStore.add_color and the image extraction pipeline.
"""

from __future__ import annotations

import logging
from typing import Protocol

__all__ = ["Notifier", "LoggingNotifier"]


class Notifier(Protocol):
    """Minimal surface of a toast/notification layer. Return values are ignored."""

    def info(self, message: str, detail: str | None = None) -> None: ...

    def success(self, message: str, detail: str | None = None) -> None: ...

    def error(self, message: str, detail: str | None = None) -> None: ...

    def loading(self, message: str) -> None: ...

    def dismiss(self) -> None: ...


class LoggingNotifier:
    """Route notifications to the 'color_palette_builder.notify' logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("color_palette_builder.notify")

    @staticmethod
    def _line(message: str, detail: str | None) -> str:
        return f"{message}: {detail}" if detail else message

    def info(self, message: str, detail: str | None = None) -> None:
        self.logger.info(self._line(message, detail))

    def success(self, message: str, detail: str | None = None) -> None:
        self.logger.info(self._line(message, detail))

    def error(self, message: str, detail: str | None = None) -> None:
        self.logger.error(self._line(message, detail))

    def loading(self, message: str) -> None:
        self.logger.info(message)

    def dismiss(self) -> None:
        self.logger.debug("dismiss")
