# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Main entry point for design analysis.

Runs the five analyzers over one bitmap in a fixed order:

    colors ─┐
    spatial ├─→ effects (+colors) ─→ style (+all four)
    geometry┘

No analyzer reads the output of a later one.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colors import analyze_colors
from stylescope.analyze.config import DEFAULT_CONFIG, AnalysisConfig
from stylescope.analyze.effects import analyze_effects
from stylescope.analyze.geometry import analyze_geometry
from stylescope.analyze.loader import load_bitmap
from stylescope.analyze.spatial import analyze_spatial
from stylescope.analyze.style import analyze_style
from stylescope.schema import AnalysisMetadata, ImageAnalysisResult

logger = logging.getLogger(__name__)


def analyze_image(
    image: Union[Bitmap, str, Path, NDArray[np.uint8]],
    *,
    config: Optional[AnalysisConfig] = None,
    original_size: Optional[tuple[int, int]] = None,
    rng: Optional[np.random.Generator] = None,
) -> ImageAnalysisResult:
    """
    Analyze an image and return its design attributes.

    This is the primary public API. Deterministic: the same pixels and
    configuration (or generator state) always give the same result, apart
    from the ``analyzedAt`` and ``processingTime`` metadata.

    Args:
        image: Decoded Bitmap, image file path, or (H, W, 3|4) uint8 array.
            Paths and arrays are downscaled to ``config.max_dimension``;
            a Bitmap is analyzed as given.
        config: Pipeline configuration (defaults to AnalysisConfig())
        original_size: (width, height) to report in metadata, for callers
            that decoded and downscaled the bitmap themselves
        rng: Generator for glassmorphism probes (defaults to one seeded
            with ``config.seed``)

    Returns:
        ImageAnalysisResult

    Raises:
        ValueError: If a file cannot be decoded or an array is malformed
        TypeError: If the image type is unsupported

    Example:
        >>> from stylescope import analyze_image
        >>> result = analyze_image("screenshot.png")
        >>> result.colors.palette.primary
        '#6366f1'
    """
    if config is None:
        config = DEFAULT_CONFIG

    # Decoding is not part of the timed pipeline
    if isinstance(image, Bitmap):
        bitmap = image
        width, height = original_size or (bitmap.width, bitmap.height)
    else:
        loaded = load_bitmap(image, max_dimension=config.max_dimension)
        bitmap = loaded.bitmap
        width, height = original_size or (loaded.original_width, loaded.original_height)

    start = time.perf_counter()

    colors = analyze_colors(bitmap, config)
    spatial = analyze_spatial(bitmap)
    geometry = analyze_geometry(bitmap)
    effects = analyze_effects(bitmap, colors, rng=rng, config=config)
    style = analyze_style(colors, spatial, geometry, effects)

    processing_time = (time.perf_counter() - start) * 1000.0
    logger.debug(
        "Analyzed %dx%d bitmap in %.1f ms", bitmap.width, bitmap.height, processing_time,
    )

    return ImageAnalysisResult(
        colors=colors,
        spatial=spatial,
        geometry=geometry,
        effects=effects,
        style=style,
        metadata=AnalysisMetadata(
            width=width,
            height=height,
            aspect_ratio=width / height if height else 0.0,
            analyzed_at=datetime.now(timezone.utc).isoformat(),
            processing_time=processing_time,
        ),
    )
