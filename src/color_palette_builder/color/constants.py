# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants: hue units, channel bounds,
      extraction defaults and the raw-shape patterns used by the normalizer.
Used By: parse, convert, normalize, rgb_distance, settings.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

import math
import re

# ── 1) Angles ────────────────────────────────────────────────────────────────

# Degrees per unit for CSS <angle> values
HUE_UNITS: dict[str, float] = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# ── 2) Bounds ────────────────────────────────────────────────────────────────
RGB_MAX = 255.0
PERCENT_MAX = 100.0
# CSS Color 4: 100% chroma in oklch() maps to 0.4
OKLCH_CHROMA_PERCENT_REF = 0.4

# ── 3) Extraction defaults ───────────────────────────────────────────────────
DEDUP_THRESHOLD = 30.0  # Euclidean sRGB distance, strict "below" comparison
MAX_EXTRACTED_COLORS = 8
DEFAULT_QUALITY = 10  # pixel sampling step for the quantizers
DEFAULT_QUANTIZER = "median_cut"

# ── 4) Raw-shape patterns (bodies without a functional wrapper) ─────────────
_NUM = r"\d*\.?\d+"

OKLCH_SHAPE_RE = re.compile(rf"^{_NUM}\s+{_NUM}\s+{_NUM}$")
HSL_SHAPE_RE = re.compile(
    r"^\d+(?:\.\d+)?(?:deg|turn|rad|grad)?\s+\d+(?:\.\d+)?%?\s+\d+(?:\.\d+)?%?$"
)
RGB_SHAPE_RE = re.compile(r"^\d+\s*[,\s]\s*\d+\s*[,\s]\s*\d+$")
HEX_SHAPE_RE = re.compile(r"^[0-9a-f]{3,8}$", re.IGNORECASE)

# Only these bare hex lengths get a '#' prefix; 5/7 pass through and fail later
HEX_BODY_LENGTHS = frozenset({3, 4, 6, 8})
