# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Geometry Analyzer.

Sobel edge map on the grey image, then a coarse grid of 5x5 probes that
classify local edge patterns as sharp corners (horizontal and vertical
runs meeting) or rounded corners (diagonal mass). The rounded share drives
the corner style and radius estimate.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colorspace import clamp, luma
from stylescope.schema import (
    CornerStyle,
    GeometryAnalysis,
    RadiusEstimate,
    ShapeCounts,
)

logger = logging.getLogger(__name__)


SOBEL_X = np.array([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], dtype=np.float64)

SOBEL_Y = np.array([
    [-1, -2, -1],
    [0, 0, 0],
    [1, 2, 1],
], dtype=np.float64)

EDGE_MAGNITUDE = 50.0

# Probe grid: ~20 steps per axis, each probe inspects a 5x5 window
PROBE_STEPS = 20
PROBE_RADIUS = 2

# Corner patterns (edge pixel counts within one probe window)
SHARP_MIN_AXIS_EDGES = 2      # H > 2 and V > 2
SHARP_MAX_DIAGONAL_EDGES = 3  # D < 3
ROUNDED_MIN_DIAGONAL_EDGES = 3  # D > 3

# Rounded share when no corner was found at all
NO_CORNER_RATIO = 0.5

# (upper bound on rounded ratio, style, average radius px)
CORNER_STYLES = (
    (0.2, CornerStyle.SHARP, 2),
    (0.4, CornerStyle.SOFT, 6),
    (0.7, CornerStyle.ROUNDED, 12),
    (0.9, CornerStyle.PILL, 24),
)
MIXED_RADIUS = 10

CIRCLE_SHARE = 0.3
ORGANIC_SHARE = 0.7


def analyze_geometry(bitmap: Bitmap) -> GeometryAnalysis:
    """
    Run the Geometry Analyzer over a bitmap.

    Args:
        bitmap: Decoded RGBA image

    Returns:
        GeometryAnalysis
    """
    height, width = bitmap.height, bitmap.width
    edges = edge_map(bitmap.to_array()[..., :3])

    total_edges = int(np.count_nonzero(edges))
    total_pixels = bitmap.pixel_count
    edge_density = total_edges / total_pixels * 100.0 if total_pixels else 0.0

    sharp, rounded = count_corners(edges)
    logger.debug(
        "Geometry pass: %dx%d, edges=%d, sharp=%d, rounded=%d",
        width, height, total_edges, sharp, rounded,
    )

    total_corners = sharp + rounded
    rounded_ratio = rounded / total_corners if total_corners > 0 else NO_CORNER_RATIO

    corner_style, radius = CornerStyle.MIXED, MIXED_RADIUS
    for upper, style, style_radius in CORNER_STYLES:
        if rounded_ratio < upper:
            corner_style, radius = style, style_radius
            break

    return GeometryAnalysis(
        corner_style=corner_style,
        estimated_radius=RadiusEstimate.around(radius),
        edge_density=edge_density,
        linearity=clamp((1.0 - rounded_ratio) * 80.0 + 20.0),
        shapes=ShapeCounts(
            rectangles=sharp,
            circles=int(np.floor(rounded * CIRCLE_SHARE)),
            organic=int(np.floor(rounded * ORGANIC_SHARE)),
        ),
    )


def edge_map(rgb: NDArray[np.uint8]) -> NDArray[np.bool_]:
    """
    Boolean Sobel edge map (magnitude > 50) of an (H, W, 3) image.

    The 1px border is never an edge: the operator is only evaluated where
    its full 3x3 window lies inside the image.
    """
    height, width = rgb.shape[:2]
    edges = np.zeros((height, width), dtype=bool)
    if height < 3 or width < 3:
        return edges

    gray = luma(rgb)
    gx = ndimage.correlate(gray, SOBEL_X, mode="nearest")
    gy = ndimage.correlate(gray, SOBEL_Y, mode="nearest")
    magnitude = np.sqrt(gx * gx + gy * gy)

    edges[1:-1, 1:-1] = magnitude[1:-1, 1:-1] > EDGE_MAGNITUDE
    return edges


def count_corners(edges: NDArray[np.bool_]) -> tuple[int, int]:
    """
    Count sharp and rounded corner probes over an edge map.

    Probes sit at multiples of max(1, floor(dim/20)) from the origin.
    Within each 5x5 window an edge pixel at offset (dx, dy) counts as
    horizontal when |dx| > |dy|, vertical when |dy| > |dx|, else diagonal.

    Returns:
        (sharp, rounded). A probe can count as both.
    """
    height, width = edges.shape
    if height == 0 or width == 0:
        return 0, 0

    probe_ys = np.arange(0, height, max(1, height // PROBE_STEPS))
    probe_xs = np.arange(0, width, max(1, width // PROBE_STEPS))

    # Padding keeps out-of-image window cells False
    padded = np.pad(edges, PROBE_RADIUS, constant_values=False)
    rows = probe_ys[:, np.newaxis] + PROBE_RADIUS
    cols = probe_xs[np.newaxis, :] + PROBE_RADIUS

    shape = (len(probe_ys), len(probe_xs))
    horizontal = np.zeros(shape, dtype=np.int64)
    vertical = np.zeros(shape, dtype=np.int64)
    diagonal = np.zeros(shape, dtype=np.int64)

    offsets = range(-PROBE_RADIUS, PROBE_RADIUS + 1)
    for dy in offsets:
        for dx in offsets:
            hits = padded[rows + dy, cols + dx]
            if abs(dx) > abs(dy):
                horizontal += hits
            elif abs(dy) > abs(dx):
                vertical += hits
            else:
                diagonal += hits

    sharp = (
        (horizontal > SHARP_MIN_AXIS_EDGES)
        & (vertical > SHARP_MIN_AXIS_EDGES)
        & (diagonal < SHARP_MAX_DIAGONAL_EDGES)
    )
    rounded = diagonal > ROUNDED_MIN_DIAGONAL_EDGES

    return int(np.count_nonzero(sharp)), int(np.count_nonzero(rounded))
