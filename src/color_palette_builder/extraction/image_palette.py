"""
image_palette.py
================

Does: Extract dominant colors from an image and fold them into a palette:
      read -> decode -> quantize -> hex -> drop near-duplicates of the
      palette as it was before extraction -> add one at a time through
      PaletteStore.add_color.
Returns: ExtractionResult (count actually added, candidates, visited states,
         error if any). Failures are reported, never raised.
Used By: Upload handlers, demo CLI.

Near-duplicates within one image are NOT collapsed against each other; only
exact string repeats are caught by the store.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image

from color_palette_builder.color.formatting import to_hex
from color_palette_builder.color.types import RGB, RGBA
from color_palette_builder.color.utils.rgb_distance import is_near_existing
from color_palette_builder.errors import (
    ExtractionBusyError,
    ExtractionError,
    FileReadError,
    ImageDecodeError,
    ImageProcessingError,
)
from color_palette_builder.extraction.quantize import Quantizer, get_quantizer
from color_palette_builder.palette.notify import Notifier
from color_palette_builder.palette.store import AddResult, PaletteStore
from color_palette_builder.utils.load_config import ConfigParseError, ConfigTypeError
from color_palette_builder.utils.log import debug
from color_palette_builder.utils.settings import PaletteSettings, get_settings

__all__ = [
    "ImageSource",
    "ExtractionState",
    "ExtractionResult",
    "extract_colors_from_image",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, str, os.PathLike, BinaryIO]


class ExtractionState(str, Enum):
    IDLE = "idle"
    READING = "reading"
    DECODED = "decoded"
    QUANTIZED = "quantized"
    FILTERED = "filtered"
    APPENDING = "appending"
    ERROR = "error"


@dataclass
class ExtractionResult:
    added: int = 0
    candidates: tuple[str, ...] = ()
    kept: tuple[str, ...] = ()
    states: list[ExtractionState] = field(default_factory=lambda: [ExtractionState.IDLE])
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def enter(self, state: ExtractionState) -> None:
        self.states.append(state)
        debug(f"state -> {state.value}", topic="extraction")


# ── Stage helpers ────────────────────────────────────────────────────────────
def _describe_source(source: ImageSource) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    name = getattr(source, "name", None)
    return name if isinstance(name, str) else "<bytes>"


def _read_bytes(source: ImageSource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            return Path(source).read_bytes()
        return source.read()
    except OSError as e:
        raise FileReadError(f"cannot read image source: {e}") from e


def _decode(data: bytes) -> Image.Image:
    try:
        with Image.open(BytesIO(data)) as image:
            return image.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"cannot decode image: {e}") from e


def _to_candidates(triples: list[RGB]) -> list[str]:
    try:
        return [to_hex(RGBA(r, g, b)) for r, g, b in triples]
    except (TypeError, ValueError) as e:
        raise ImageProcessingError(f"bad quantizer output: {e}") from e


def _filter_candidates(
    candidates: list[str], existing: tuple[str, ...], threshold: float
) -> list[str]:
    try:
        return [c for c in candidates if not is_near_existing(c, existing, threshold)]
    except ValueError as e:
        raise ImageProcessingError(f"cannot compare against palette: {e}") from e


def _resolve_options(
    quantizer: Quantizer | None,
    max_colors: int | None,
    threshold: float | None,
    settings: PaletteSettings | None,
) -> tuple[Quantizer, int, float]:
    """Fill unset options from settings; a bad settings file is a processing error."""
    if settings is None:
        try:
            settings = get_settings()
        except (ConfigParseError, ConfigTypeError) as e:
            raise ImageProcessingError(f"invalid palette settings: {e}") from e
    if max_colors is None:
        max_colors = settings.max_colors
    if threshold is None:
        threshold = settings.dedup_threshold
    if quantizer is None:
        quantizer = get_quantizer(settings.quantizer, settings.quality)
    return quantizer, max_colors, threshold


# ── Pipeline ─────────────────────────────────────────────────────────────────
async def _run(
    source: ImageSource,
    store: PaletteStore,
    quantizer: Quantizer,
    max_colors: int,
    threshold: float,
    result: ExtractionResult,
) -> None:
    result.enter(ExtractionState.READING)
    data = await asyncio.to_thread(_read_bytes, source)

    image = await asyncio.to_thread(_decode, data)
    result.enter(ExtractionState.DECODED)

    # synchronous on the loop: CPU-heavy but not chunked
    triples = quantizer.quantize(image, max_colors)
    candidates = _to_candidates(triples[:max_colors])
    result.candidates = tuple(candidates)
    result.enter(ExtractionState.QUANTIZED)

    # compare against the palette as it stood before any append
    kept = _filter_candidates(candidates, store.colors, threshold)
    result.kept = tuple(kept)
    result.enter(ExtractionState.FILTERED)
    logger.debug("Extraction kept %d of %d candidates", len(kept), len(candidates))

    result.enter(ExtractionState.APPENDING)
    for color in kept:
        if store.add_color(color) is AddResult.ADDED:
            result.added += 1


async def extract_colors_from_image(
    source: ImageSource,
    store: PaletteStore,
    notifier: Notifier | None = None,
    *,
    quantizer: Quantizer | None = None,
    max_colors: int | None = None,
    threshold: float | None = None,
    settings: PaletteSettings | None = None,
) -> ExtractionResult:
    """
    Extract up to `max_colors` dominant colors from `source` into `store`.

    Args:
        source: Raw bytes, a filesystem path, or a binary file object.
        store: Palette to merge into; its `is_extracting` flag is the busy guard.
        notifier: Feedback sink; defaults to the store's notifier.
        quantizer: Backend override; defaults to the one named in settings.
        max_colors: Upper bound on quantized colors (settings default: 8).
        threshold: Minimum RGB distance to every pre-existing color (default 30).
        settings: Explicit settings; loaded from palette_settings.json otherwise.

    Returns:
        ExtractionResult. On failure `error` is set, `added` is 0 unless the
        failure happened mid-append, and the user has been notified.
    """
    notifier = notifier or store.notifier
    result = ExtractionResult()

    if store.is_extracting:
        busy = ExtractionBusyError("an extraction is already running")
        notifier.info(busy.user_message, busy.user_detail)
        result.error = busy
        return result

    store.set_is_extracting(True)
    notifier.loading("Extracting colors...")
    store.set_uploaded_image(_describe_source(source))
    try:
        quantizer, max_colors, threshold = _resolve_options(
            quantizer, max_colors, threshold, settings
        )
        await _run(source, store, quantizer, max_colors, threshold, result)
    except Exception as exc:
        if isinstance(exc, ExtractionError):
            e = exc
            logger.error("Image extraction failed at %s: %s", result.states[-1].value, e)
        else:
            logger.exception("Unexpected failure while processing image")
            e = ImageProcessingError(str(exc))
            e.__cause__ = exc
        result.error = e
        result.enter(ExtractionState.ERROR)
        notifier.dismiss()
        notifier.error(e.user_message, e.user_detail)
    else:
        notifier.dismiss()
        notifier.success(f"extracted {result.added} colors from image")
    finally:
        store.set_is_extracting(False)
        result.enter(ExtractionState.IDLE)

    return result
