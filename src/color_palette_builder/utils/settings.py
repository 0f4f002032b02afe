"""
settings.py

Does: Build the extraction settings (dedup threshold, max colors, sampling
      quality, quantizer name) from data/palette_settings.json.
Returns: A frozen PaletteSettings; defaults when no config file is found.
Used by: extraction.image_palette, demo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from color_palette_builder.color.constants import (
    DEDUP_THRESHOLD,
    DEFAULT_QUALITY,
    DEFAULT_QUANTIZER,
    MAX_EXTRACTED_COLORS,
)
from color_palette_builder.utils.load_config import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

__all__ = ["PaletteSettings", "QUANTIZER_NAMES", "get_settings", "validate_settings"]

log = logging.getLogger(__name__)

SETTINGS_FILE = "palette_settings"
QUANTIZER_NAMES = frozenset({"median_cut", "kmeans"})


@dataclass(frozen=True)
class PaletteSettings:
    dedup_threshold: float = DEDUP_THRESHOLD
    max_colors: int = MAX_EXTRACTED_COLORS
    quality: int = DEFAULT_QUALITY
    quantizer: str = DEFAULT_QUANTIZER


def validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Does: Reject unknown keys and out-of-range values (raises ValueError/TypeError)."""
    known = {f.name for f in fields(PaletteSettings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown settings: {sorted(unknown)}")

    out = dict(data)
    if "dedup_threshold" in out:
        out["dedup_threshold"] = float(out["dedup_threshold"])
        if out["dedup_threshold"] < 0:
            raise ValueError("dedup_threshold must be >= 0")
    for key in ("max_colors", "quality"):
        if key in out:
            if isinstance(out[key], bool) or not isinstance(out[key], int):
                raise TypeError(f"{key} must be an integer")
    # colorthief's MMCQ only quantizes into 2..256 boxes
    if "max_colors" in out and not 2 <= out["max_colors"] <= 256:
        raise ValueError("max_colors must be within 2..256")
    if "quality" in out and out["quality"] < 1:
        raise ValueError("quality must be >= 1")
    if "quantizer" in out and out["quantizer"] not in QUANTIZER_NAMES:
        raise ValueError(f"quantizer must be one of {sorted(QUANTIZER_NAMES)}")
    return out


def get_settings(base_dir: Path | None = None) -> PaletteSettings:
    """Load palette_settings.json; missing file or data dir falls back to defaults."""
    try:
        data = load_config(SETTINGS_FILE, base_dir=base_dir, validator=validate_settings)
    except (DataDirNotFound, ConfigFileNotFound) as e:
        log.debug("Using default palette settings (%s)", e)
        return PaletteSettings()
    return PaletteSettings(**data)
