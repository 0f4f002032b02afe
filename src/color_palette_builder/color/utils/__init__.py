"""
utils package.
=============

Does: Provide distance calculations shared across palette and extraction
      modules.
"""

from .rgb_distance import (
    color_to_rgb,
    is_near_existing,
    is_within_rgb_margin,
    rgb_distance,
)

__all__ = [
    "rgb_distance",
    "is_within_rgb_margin",
    "color_to_rgb",
    "is_near_existing",
]

__docformat__ = "google"
