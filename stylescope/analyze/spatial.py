# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Spatial Analyzer.

Single full-resolution pass computing whitespace, density, per-region
visual weight, balance, a coarse column-grid estimate and focal points.

Regions overlap and are fixed, not adaptive:

    ┌───────────────────────┐
    │          top          │   top:    y < h/3
    ├──────┬─────────┬──────┤   bottom: y > 2h/3
    │ left │ (center)│ right│   left:   x < w/3
    ├──────┴─────────┴──────┤   right:  x > 2w/3
    │        bottom         │   center: disc of radius min(w, h)/4
    └───────────────────────┘
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colorspace import luma, rgb_to_hsl
from stylescope.schema import (
    Balance,
    Density,
    FocalPoint,
    GridDetection,
    SpatialAnalysis,
    VisualWeight,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Thresholds
# =============================================================================

# Whitespace: very light and nearly gray
WHITESPACE_MIN_LIGHTNESS = 90
WHITESPACE_MAX_SATURATION = 10

# 4-neighbour luma step that marks an edge pixel
EDGE_LUMA_DELTA = 30

DENSITY_BUCKETS = (
    (70, Density.DENSE),
    (40, Density.BALANCED),
)

# Balance (differences of 0-100 region weights)
BALANCED_DELTA = 15
ASYMMETRIC_DELTA = 20
CENTERED_MIN_WEIGHT = 60

# Weight assigned to every region when the whole image weighs nothing
UNIFORM_REGION_WEIGHT = 50.0

# Grid detection
GRID_SAMPLE_COLUMNS = 20
GRID_ROW_STEP = 10
GRID_MAX_CHANNEL_DELTA = 50
GRID_PEAK_FACTOR = 1.2
GRID_MAX_COLUMNS = 12
GRID_CONFIDENCE_PER_PEAK = 15

# Focal points
FOCAL_GRID = 5
FOCAL_MIN_INTENSITY = 0.6
FOCAL_SATURATION_DIVISOR = 100.0  # focal cells weigh saturation twice as much
MAX_FOCAL_POINTS = 5


def analyze_spatial(bitmap: Bitmap) -> SpatialAnalysis:
    """
    Run the Spatial Analyzer over a bitmap.

    Alpha is ignored: layout is judged on the stored RGB values.

    Args:
        bitmap: Decoded RGBA image

    Returns:
        SpatialAnalysis
    """
    height, width = bitmap.height, bitmap.width
    rgb = bitmap.to_array()[..., :3]

    lum = luma(rgb)
    hsl = rgb_to_hsl(rgb)
    sat = hsl[..., 1]
    light = hsl[..., 2]

    # Darker and more saturated pixels weigh more
    weight = (255.0 - lum) / 255.0 + sat / 200.0

    total_pixels = bitmap.pixel_count
    whitespace = (light > WHITESPACE_MIN_LIGHTNESS) & (sat < WHITESPACE_MAX_SATURATION)
    whitespace_percentage = (
        float(np.count_nonzero(whitespace)) / total_pixels * 100.0 if total_pixels else 0.0
    )

    if logger.isEnabledFor(logging.DEBUG):
        edge_share = float(np.count_nonzero(_edge_mask(lum))) / total_pixels * 100.0 if total_pixels else 0.0
        logger.debug(
            "Spatial pass: %dx%d, whitespace=%.1f%%, edges=%.1f%%",
            width, height, whitespace_percentage, edge_share,
        )

    density_score = 100.0 - whitespace_percentage
    density = Density.SPACIOUS
    for threshold, level in DENSITY_BUCKETS:
        if density_score > threshold:
            density = level
            break

    visual_weight = _region_weights(weight, width, height)

    return SpatialAnalysis(
        density=density,
        density_score=density_score,
        whitespace_percentage=whitespace_percentage,
        visual_weight=visual_weight,
        balance=classify_balance(visual_weight),
        grid_detection=_detect_grid(rgb),
        focal_points=_focal_points(lum, sat),
    )


def classify_balance(weights: VisualWeight) -> Balance:
    """
    Classify balance from left/right and top/bottom weight differences.

    Both differences under 15 → centered (center > 60) or symmetric.
    Otherwise the first difference beyond 20 picks the heavy side, checked
    left, right, top; anything else is asymmetric-bottom.
    """
    horizontal = weights.left - weights.right
    vertical = weights.top - weights.bottom

    if abs(horizontal) < BALANCED_DELTA and abs(vertical) < BALANCED_DELTA:
        if weights.center > CENTERED_MIN_WEIGHT:
            return Balance.CENTERED
        return Balance.SYMMETRIC
    if horizontal > ASYMMETRIC_DELTA:
        return Balance.ASYMMETRIC_LEFT
    if horizontal < -ASYMMETRIC_DELTA:
        return Balance.ASYMMETRIC_RIGHT
    if vertical > ASYMMETRIC_DELTA:
        return Balance.ASYMMETRIC_TOP
    return Balance.ASYMMETRIC_BOTTOM


def _edge_mask(lum: NDArray[np.float64]) -> NDArray[np.bool_]:
    """Interior pixels whose luma differs by > 30 from any 4-neighbour."""
    mask = np.zeros(lum.shape, dtype=bool)
    if lum.shape[0] < 3 or lum.shape[1] < 3:
        return mask

    inner = lum[1:-1, 1:-1]
    mask[1:-1, 1:-1] = (
        (np.abs(inner - lum[:-2, 1:-1]) > EDGE_LUMA_DELTA)
        | (np.abs(inner - lum[2:, 1:-1]) > EDGE_LUMA_DELTA)
        | (np.abs(inner - lum[1:-1, :-2]) > EDGE_LUMA_DELTA)
        | (np.abs(inner - lum[1:-1, 2:]) > EDGE_LUMA_DELTA)
    )
    return mask


def _region_weights(
    weight: NDArray[np.float64],
    width: int,
    height: int,
) -> VisualWeight:
    """Average weight per region, rescaled so the heaviest region is 100."""
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis]
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :]
    shape = (height, width)

    center_x = width / 2
    center_y = height / 2
    radius = min(width, height) / 4

    masks = {
        "top": np.broadcast_to(ys < height / 3, shape),
        "bottom": np.broadcast_to(ys > (height * 2) / 3, shape),
        "left": np.broadcast_to(xs < width / 3, shape),
        "right": np.broadcast_to(xs > (width * 2) / 3, shape),
        "center": np.sqrt((xs - center_x) ** 2 + (ys - center_y) ** 2) < radius,
    }

    averages = {}
    for name, mask in masks.items():
        count = int(np.count_nonzero(mask))
        averages[name] = float(weight[mask].sum()) / count if count else 0.0

    max_weight = max(averages.values())
    if max_weight > 0:
        scaled = {name: value / max_weight * 100.0 for name, value in averages.items()}
    else:
        scaled = {name: UNIFORM_REGION_WEIGHT for name in averages}

    return VisualWeight(**scaled)


def _detect_grid(rgb: NDArray[np.uint8]) -> GridDetection:
    """
    Estimate layout columns from vertically consistent pixel columns.

    About 20 evenly spaced x positions are scored by how many 10px vertical
    steps keep the summed RGB difference under 50. Columns scoring above
    1.2× the mean are peaks.
    """
    height, width = rgb.shape[:2]
    x_step = max(1, width // GRID_SAMPLE_COLUMNS)
    columns = np.arange(0, width, x_step)
    rows = np.arange(0, height - GRID_ROW_STEP, GRID_ROW_STEP)

    if len(columns) == 0:
        return GridDetection(possible_columns=1, confidence=0.0)

    upper = rgb[rows][:, columns].astype(np.int32)
    lower = rgb[rows + GRID_ROW_STEP][:, columns].astype(np.int32)
    delta = np.abs(upper - lower).sum(axis=-1)
    scores = np.count_nonzero(delta < GRID_MAX_CHANNEL_DELTA, axis=0)

    mean_score = scores.mean()
    peaks = int(np.count_nonzero(scores > mean_score * GRID_PEAK_FACTOR))

    return GridDetection(
        possible_columns=max(1, min(GRID_MAX_COLUMNS, peaks)),
        confidence=float(min(100, peaks * GRID_CONFIDENCE_PER_PEAK)),
    )


def _focal_points(
    lum: NDArray[np.float64],
    sat: NDArray[np.int64],
) -> tuple[FocalPoint, ...]:
    """Centers of the heaviest cells of a 5x5 grid (at most five)."""
    height, width = lum.shape
    cell_weight = (255.0 - lum) / 255.0 + sat / FOCAL_SATURATION_DIVISOR

    cell_width = width / FOCAL_GRID
    cell_height = height / FOCAL_GRID

    points = []
    for gy in range(FOCAL_GRID):
        y0 = int(np.floor(gy * cell_height))
        y1 = int(np.floor((gy + 1) * cell_height))
        for gx in range(FOCAL_GRID):
            x0 = int(np.floor(gx * cell_width))
            x1 = int(np.floor((gx + 1) * cell_width))
            cell = cell_weight[y0:y1, x0:x1]
            if cell.size == 0:
                continue

            intensity = float(cell.mean())
            if intensity > FOCAL_MIN_INTENSITY:
                points.append(FocalPoint(
                    x=(gx + 0.5) / FOCAL_GRID,
                    y=(gy + 0.5) / FOCAL_GRID,
                    intensity=intensity,
                ))

    points.sort(key=lambda p: p.intensity, reverse=True)
    return tuple(points[:MAX_FOCAL_POINTS])
