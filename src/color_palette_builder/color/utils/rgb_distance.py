"""
rgb_distance.py
===============

Does: Compute Euclidean sRGB distances between RGB triples and between
      canonical color strings, and test candidates against a palette.
Used By: Image extraction de-duplication.
Returns: Distances (float) and near-duplicate booleans.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from color_palette_builder.color.constants import DEDUP_THRESHOLD
from color_palette_builder.color.parse import parse_color
from color_palette_builder.color.types import RGB

# Public surface
__all__ = [
    "RGB",
    "rgb_distance",
    "is_within_rgb_margin",
    "color_to_rgb",
    "is_near_existing",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) CORE DISTANCES
# =============================================================================

def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space."""
    _validate_rgb(rgb1); _validate_rgb(rgb2)
    return sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)) ** 0.5


def is_within_rgb_margin(rgb1: RGB, rgb2: RGB, margin: float = DEDUP_THRESHOLD) -> bool:
    """Does: Check if two RGB colors are strictly closer than `margin`."""
    return rgb_distance(rgb1, rgb2) < margin


# =============================================================================
# 2) CANONICAL STRINGS
# =============================================================================

def color_to_rgb(color: str) -> RGB:
    """Does: Resolve any supported notation to an int RGB triple (alpha ignored)."""
    rgba = parse_color(color)
    if rgba is None:
        raise ValueError(f"Cannot resolve RGB for color: {color!r}")
    return rgba.rgb()


def is_near_existing(
    candidate: str,
    existing: Iterable[str],
    threshold: float = DEDUP_THRESHOLD,
) -> bool:
    """Does: True if `candidate` is closer than `threshold` to ANY existing color."""
    cand_rgb = color_to_rgb(candidate)
    for color in existing:
        if is_within_rgb_margin(cand_rgb, color_to_rgb(color), threshold):
            logger.debug("Candidate %s within %.1f of %s", candidate, threshold, color)
            return True
    return False
