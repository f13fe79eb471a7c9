# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Batch analysis across independent images.

Each image is analyzed in its own worker process; one bad file is recorded
on its BatchItem instead of aborting the batch.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.config import AnalysisConfig
from stylescope.analyze.extract import analyze_image
from stylescope.schema import ImageAnalysisResult

logger = logging.getLogger(__name__)

# Per-image failures that are recorded rather than raised
RECOVERABLE_ERRORS = (ValueError, TypeError, OSError)


@dataclass(frozen=True, slots=True)
class BatchItem:
    """Outcome for one source: exactly one of ``result`` and ``error`` is set."""
    source: Any
    result: Optional[ImageAnalysisResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze_batch(
    sources: Iterable[Any],
    *,
    max_workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> list[BatchItem]:
    """
    Analyze many images, one task per image.

    Args:
        sources: Anything ``analyze_image`` accepts (paths, arrays, bitmaps)
        max_workers: Worker processes (None = CPU count; 1 runs inline)
        config: Configuration shared by every image

    Returns:
        One BatchItem per source, in input order
    """
    sources = list(sources)
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    if max_workers == 1 or len(sources) <= 1:
        items = [_analyze_one(source, config) for source in sources]
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(_analyze_one, source, config) for source in sources]
            items = [future.result() for future in futures]

    failed = [item for item in items if not item.ok]
    for item in failed:
        logger.warning("Analysis failed for %s: %s", _describe(item.source), item.error)
    logger.debug("Batch finished: %d/%d succeeded", len(items) - len(failed), len(items))
    return items


def _analyze_one(source: Any, config: Optional[AnalysisConfig]) -> BatchItem:
    try:
        result = analyze_image(source, config=config)
    except RECOVERABLE_ERRORS as e:
        return BatchItem(source=source, error=f"{type(e).__name__}: {e}")
    return BatchItem(source=source, result=result)


def _describe(source: Any) -> str:
    if isinstance(source, Bitmap):
        return f"Bitmap({source.width}x{source.height})"
    shape = getattr(source, "shape", None)
    if shape is not None:
        return f"array{tuple(shape)}"
    return str(source)
