"""
Color quantizers for palette extraction.

Two interchangeable backends reduce a decoded image to at most N
representative RGB triples, most dominant first:

- MedianCutQuantizer: modified median cut (MMCQ) via colorthief.
- KMeansQuantizer: MiniBatchKMeans clustering via scikit-learn.

Both raise QuantizationError when the image yields no usable pixels.
"""

from __future__ import annotations

import logging
from collections import Counter
from io import BytesIO
from typing import Protocol

import numpy as np
from colorthief import ColorThief
from PIL import Image
from sklearn.cluster import MiniBatchKMeans

from color_palette_builder.color.constants import DEFAULT_QUALITY
from color_palette_builder.color.types import RGB
from color_palette_builder.errors import QuantizationError

__all__ = ["Quantizer", "MedianCutQuantizer", "KMeansQuantizer", "get_quantizer"]

logger = logging.getLogger(__name__)

# Pixels more transparent than this are ignored (same cut colorthief applies)
ALPHA_CUTOFF = 125


class Quantizer(Protocol):
    def quantize(self, image: Image.Image, max_colors: int) -> list[RGB]: ...


class MedianCutQuantizer:
    """Modified median cut through colorthief (the default backend)."""

    def __init__(self, quality: int = DEFAULT_QUALITY):
        self.quality = quality

    def quantize(self, image: Image.Image, max_colors: int) -> list[RGB]:
        """Return up to `max_colors` RGB triples in colorthief order."""
        try:
            with BytesIO() as byte_stream:
                image.save(byte_stream, format="PNG")
                byte_stream.seek(0)
                color_thief = ColorThief(byte_stream)
                palette = color_thief.get_palette(color_count=max_colors, quality=self.quality)
        except Exception as e:
            # colorthief signals empty/unquantizable input with bare Exception
            logger.error("Median cut quantization failed: %s", e)
            raise QuantizationError(f"median cut failed: {e}") from e

        # MMCQ box averages can land on 256
        colors = [
            tuple(min(255, max(0, int(c))) for c in rgb) for rgb in palette[:max_colors]
        ]
        logger.info("Median cut produced %d colors", len(colors))
        return colors


class KMeansQuantizer:
    """MiniBatchKMeans over sampled opaque pixels, clusters ordered by size."""

    def __init__(self, quality: int = DEFAULT_QUALITY, rng_seed: int = 42):
        self.quality = quality
        self.rng_seed = rng_seed

    def _sample_pixels(self, image: Image.Image) -> np.ndarray:
        rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8).reshape(-1, 4)
        rgba = rgba[:: max(1, self.quality)]
        return rgba[rgba[:, 3] >= ALPHA_CUTOFF][:, :3]

    def quantize(self, image: Image.Image, max_colors: int) -> list[RGB]:
        """
        Cluster sampled pixels into at most `max_colors` centers.

        Args:
            image: Decoded image in any PIL mode.
            max_colors: Upper bound on returned colors.

        Returns:
            List of (r, g, b) ints, most populated cluster first.

        Raises:
            QuantizationError: If no opaque pixels remain or clustering fails.
        """
        pixels = self._sample_pixels(image)
        if len(pixels) == 0:
            raise QuantizationError("no opaque pixels to quantize")

        n_unique = len(np.unique(pixels, axis=0))
        k = min(max_colors, n_unique)
        logger.info("Starting clustering with k=%d, %d pixels", k, len(pixels))

        try:
            kmeans = MiniBatchKMeans(
                n_clusters=k,
                random_state=self.rng_seed,
                batch_size=min(2048, len(pixels)),
                n_init="auto",
                max_iter=100,
            )
            labels = kmeans.fit_predict(pixels.astype(np.float32))
        except ValueError as e:
            logger.error("Clustering failed: %s", e)
            raise QuantizationError(f"k-means clustering failed: {e}") from e

        centers = np.clip(np.rint(kmeans.cluster_centers_), 0, 255).astype(np.uint8)
        label_counts = Counter(labels.tolist())
        order = sorted(range(k), key=lambda i: -label_counts.get(i, 0))
        return [tuple(int(x) for x in centers[i]) for i in order if label_counts.get(i, 0)]


_QUANTIZERS = {
    "median_cut": MedianCutQuantizer,
    "kmeans": KMeansQuantizer,
}


def get_quantizer(name: str, quality: int = DEFAULT_QUALITY) -> Quantizer:
    """Build a quantizer by settings name ('median_cut' or 'kmeans')."""
    try:
        return _QUANTIZERS[name](quality=quality)
    except KeyError:
        raise ValueError(f"Unknown quantizer: {name!r}") from None
