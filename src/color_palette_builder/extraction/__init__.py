"""
extraction
==========

Does: Image -> palette extraction (quantizers and the async pipeline).
"""

from __future__ import annotations

from .image_palette import (
    ExtractionResult,
    ExtractionState,
    ImageSource,
    extract_colors_from_image,
)
from .quantize import KMeansQuantizer, MedianCutQuantizer, Quantizer, get_quantizer

__all__ = [
    "extract_colors_from_image",
    "ExtractionResult",
    "ExtractionState",
    "ImageSource",
    "Quantizer",
    "MedianCutQuantizer",
    "KMeansQuantizer",
    "get_quantizer",
]

__docformat__ = "google"
