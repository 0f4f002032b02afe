"""
vocab
=====

Does: Expose the CSS named-color vocabulary (CSS3 via webcolors) and a safe
      name -> hex lookup.
Used By: Generic parsing of named colors and fuzzy suggestions for rejects.
Returns: Frozen sets and lookup helpers (no side effects beyond lazy caching).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import FrozenSet

import webcolors

__all__ = ["TRANSPARENT", "get_css_color_names", "named_color_hex"]

log = logging.getLogger(__name__)

# CSS keyword that is not part of the webcolors name tables
TRANSPARENT = "transparent"


@lru_cache(maxsize=1)
def get_css_color_names() -> FrozenSet[str]:
    """Does: Return all CSS3 color names (lowercase), loaded once."""
    names = frozenset(n.lower() for n in webcolors.names(webcolors.CSS3))
    log.debug("Loaded %d CSS color names", len(names))
    return names


def named_color_hex(name: str) -> str | None:
    """Does: Resolve a CSS color name to '#rrggbb'; None when unknown."""
    try:
        return webcolors.name_to_hex(name.strip(), spec=webcolors.CSS3)
    except ValueError:
        return None
