"""
errors.
=======

Does: Define the failure taxonomy shared by the normalizer, the palette store
      and the image extraction pipeline.
Used By: color.normalize, palette.store, extraction.image_palette, demo.
Returns: Exception classes only. Duplicate colors are not errors (see
         palette.store.AddResult).
"""

from __future__ import annotations

__all__ = [
    "PaletteError",
    "InvalidColorError",
    "ExtractionError",
    "ExtractionBusyError",
    "FileReadError",
    "ImageDecodeError",
    "QuantizationError",
    "ImageProcessingError",
]
__docformat__ = "google"


class PaletteError(Exception):
    """Base class for every error raised by this package."""


class InvalidColorError(PaletteError, ValueError):
    """Raise when text is not a recognized color after shape classification."""

    def __init__(self, text: str, candidate: str | None = None, suggestion: str | None = None):
        self.text = text
        self.candidate = candidate if candidate is not None else text
        self.suggestion = suggestion
        super().__init__(f"not a recognized color: {text!r}")


# ── Extraction failures ──────────────────────────────────────────────────────
class ExtractionError(PaletteError):
    """Base for image extraction failures; carries the user-facing message."""

    user_message: str = "error processing image"
    user_detail: str | None = None


class ExtractionBusyError(ExtractionError):
    """Raise when an extraction is requested while another is in flight."""

    user_message = "extraction already in progress"
    user_detail = "please wait for the current image to finish"


class FileReadError(ExtractionError):
    user_message = "error reading file"


class ImageDecodeError(ExtractionError):
    user_message = "error loading image"


class QuantizationError(ExtractionError):
    user_message = "error extracting colors"
    user_detail = "please try a different image"


class ImageProcessingError(ExtractionError):
    """Raise when quantized colors cannot be filtered or appended."""
