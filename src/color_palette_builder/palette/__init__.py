"""
palette
=======

Does: Palette state (store), user notification sink and export templates.
"""

from __future__ import annotations

from .export import generate_css_variables, generate_tailwind_config
from .notify import LoggingNotifier, Notifier
from .store import AddResult, PaletteStore

__all__ = [
    "PaletteStore",
    "AddResult",
    "Notifier",
    "LoggingNotifier",
    "generate_css_variables",
    "generate_tailwind_config",
]

__docformat__ = "google"
