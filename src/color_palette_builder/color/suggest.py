"""
suggest.py

Does: Offer a close CSS color name for rejected alphabetic input
      ('gren' -> 'green').
Returns: The best name above the similarity cutoff, or None.
Used by: normalize_color() when building InvalidColorError.
"""

from __future__ import annotations

import logging
import re

from rapidfuzz import fuzz, process

from color_palette_builder.color.vocab import get_css_color_names

__all__ = ["suggest_color_name", "SUGGEST_CUTOFF"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_CUTOFF = 80
_WORD_RE = re.compile(r"^[a-z][a-z\s-]*$")


def suggest_color_name(text: str, cutoff: int = SUGGEST_CUTOFF) -> str | None:
    """
    Does: Fuzzy-match text against CSS color names (rapidfuzz ratio).
    Returns: Closest name or None (numeric/functional text never gets a hint).
    """
    q = " ".join((text or "").lower().split())
    if not q or not _WORD_RE.match(q):
        return None
    q = q.replace(" ", "").replace("-", "")
    hit = process.extractOne(q, get_css_color_names(), scorer=fuzz.ratio, score_cutoff=cutoff)
    if hit is None:
        return None
    name, score, _ = hit
    log.debug("Suggestion for %r: %s (%.1f)", text, name, score)
    return name
