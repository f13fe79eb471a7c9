# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Effects Analyzer.

Detects surface treatments: linear gradients (10px block corner sampling),
shadows (near-black desaturated share), depth, glassmorphism (randomly
probed soft neighbourhoods) and fine noise.

Glassmorphism probes come from an explicit numpy.random.Generator so the
same seed always reproduces the same result.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colorspace import color_distance, rgb_to_hsl
from stylescope.analyze.config import DEFAULT_CONFIG, AnalysisConfig
from stylescope.schema import (
    ColorAnalysis,
    DepthStyle,
    EffectsAnalysis,
    GradientDirection,
    GradientInfo,
    GradientType,
    ShadowInfo,
    ShadowIntensity,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Thresholds
# =============================================================================

# Gradients
GRADIENT_BLOCK = 10
GRADIENT_MIN_DIFF = 20.0
GRADIENT_MAX_DIFF = 150.0
DIAGONAL_MAX_DIFF = 200.0
DIAGONAL_MAX_AXIS_DIFF = 100.0
DOMINANT_AXIS_FACTOR = 0.5
GRADIENT_MIN_REGION_RATIO = 0.1

# Shadows
SHADOW_MAX_LIGHTNESS = 15
SHADOW_MAX_SATURATION = 30
SHADOW_SCORE_FACTOR = 1000.0
SHADOW_BUCKETS = (
    (5, ShadowIntensity.NONE),
    (20, ShadowIntensity.SUBTLE),
    (50, ShadowIntensity.MEDIUM),
)
SHADOW_DIRECTION_MIN_SCORE = 10
SHADOW_DIRECTION = "bottom-right"
NO_SHADOW_DIRECTION = "none"

# Depth
DEPTH_SHADOW_WEIGHT = 0.4
DEPTH_CONTRAST_WEIGHT = 3.0
DEPTH_DARK_SHARE = 20
DEPTH_DARK_BONUS = 20.0
DEPTH_BUCKETS = (
    (20, DepthStyle.FLAT),
    (40, DepthStyle.SUBTLE),
    (70, DepthStyle.MATERIAL),
)

# Glassmorphism
GLASS_MARGIN = 5
GLASS_MIN_SIZE = 10
GLASS_RADIUS = 2
GLASS_MIN_DEVIATION = 3.0
GLASS_MAX_DEVIATION = 15.0
GLASS_SCORE_FACTOR = 150.0
GLASS_MIN_SCORE = 30

# Noise
NOISE_MIN_DELTA = 5
NOISE_MAX_DELTA = 20
NOISE_MIN_LEVEL = 10


def analyze_effects(
    bitmap: Bitmap,
    colors: ColorAnalysis,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[AnalysisConfig] = None,
) -> EffectsAnalysis:
    """
    Run the Effects Analyzer over a bitmap.

    Args:
        bitmap: Decoded RGBA image
        colors: Color analysis of the same bitmap (contrast and dark share
            feed the depth estimate)
        rng: Generator for glassmorphism probes. Defaults to a fresh
            generator seeded with ``config.seed``.
        config: Pipeline configuration (probe count, seed)

    Returns:
        EffectsAnalysis
    """
    if config is None:
        config = DEFAULT_CONFIG
    if rng is None:
        rng = np.random.default_rng(config.seed)

    rgb = bitmap.to_array()[..., :3]
    total_pixels = bitmap.pixel_count

    gradients = detect_gradients(rgb)

    hsl = rgb_to_hsl(rgb)
    shadow_mask = (hsl[..., 2] < SHADOW_MAX_LIGHTNESS) & (hsl[..., 1] < SHADOW_MAX_SATURATION)
    shadow_pixels = int(np.count_nonzero(shadow_mask))
    shadow_score = (
        min(100.0, shadow_pixels / total_pixels * SHADOW_SCORE_FACTOR) if total_pixels else 0.0
    )
    shadows = ShadowInfo(
        intensity=classify_shadow(shadow_score),
        score=shadow_score,
        direction=SHADOW_DIRECTION if shadow_score > SHADOW_DIRECTION_MIN_SCORE else NO_SHADOW_DIRECTION,
    )

    depth_score = shadow_score * DEPTH_SHADOW_WEIGHT + colors.contrast_ratio * DEPTH_CONTRAST_WEIGHT
    if colors.lightness_distribution.dark > DEPTH_DARK_SHARE:
        depth_score += DEPTH_DARK_BONUS
    depth = DepthStyle.NEUMORPHIC
    for upper, style in DEPTH_BUCKETS:
        if depth_score < upper:
            depth = style
            break

    glass_score = glassmorphism_score(rgb, rng, samples=config.glass_samples)

    noise_level = _noise_level(rgb)

    logger.debug(
        "Effects pass: gradients=%s, shadow=%.1f, depth=%.1f, glass=%.1f, noise=%.1f",
        [d.value for d in gradients.directions], shadow_score, depth_score, glass_score, noise_level,
    )

    return EffectsAnalysis(
        has_glassmorphism=glass_score > GLASS_MIN_SCORE,
        glassmorphism_score=glass_score,
        gradients=gradients,
        shadows=shadows,
        depth=depth,
        depth_score=depth_score,
        has_noise=noise_level > NOISE_MIN_LEVEL,
        noise_level=noise_level,
    )


def classify_shadow(score: float) -> ShadowIntensity:
    """Map a 0-100 shadow score to an intensity bucket."""
    for upper, intensity in SHADOW_BUCKETS:
        if score < upper:
            return intensity
    return ShadowIntensity.DRAMATIC


def detect_gradients(rgb: NDArray[np.uint8]) -> GradientInfo:
    """
    Detect linear gradients from the corners of 10px blocks.

    Blocks are visited in row-major order. Per block, with Euclidean RGB
    distances between corner colors:

        hDiff = d(tl, tr) + d(bl, br)
        vDiff = d(tl, bl) + d(tr, br)
        dDiff = d(tl, br)

    A smooth horizontal change (20 < hDiff < 150) counts as a gradient
    region and is tagged horizontal when vDiff < hDiff/2. A smooth vertical
    change counts and is tagged vertical only while no block has been
    tagged horizontal yet, or when hDiff < vDiff/2. A moderate diagonal
    change with both axis diffs under 100 is tagged diagonal.

    Gradients are detected when more than 10% of blocks count as regions.
    """
    height, width = rgb.shape[:2]
    ys = np.arange(0, height - GRADIENT_BLOCK, GRADIENT_BLOCK)
    xs = np.arange(0, width - GRADIENT_BLOCK, GRADIENT_BLOCK)
    total_blocks = len(ys) * len(xs)

    if total_blocks == 0:
        return GradientInfo(detected=False, count=0, directions=(), types=())

    rows = ys[:, np.newaxis]
    cols = xs[np.newaxis, :]
    tl = rgb[rows, cols]
    tr = rgb[rows, cols + GRADIENT_BLOCK]
    bl = rgb[rows + GRADIENT_BLOCK, cols]
    br = rgb[rows + GRADIENT_BLOCK, cols + GRADIENT_BLOCK]

    # Flatten to row-major block order
    h_diff = (color_distance(tl, tr) + color_distance(bl, br)).ravel()
    v_diff = (color_distance(tl, bl) + color_distance(tr, br)).ravel()
    d_diff = color_distance(tl, br).ravel()

    h_smooth = (h_diff > GRADIENT_MIN_DIFF) & (h_diff < GRADIENT_MAX_DIFF)
    h_tag = h_smooth & (v_diff < h_diff * DOMINANT_AXIS_FACTOR)

    # A horizontal tag in this block or any earlier one changes the vertical rule
    first_horizontal = int(np.argmax(h_tag)) if h_tag.any() else total_blocks
    before_horizontal = np.arange(total_blocks) < first_horizontal

    v_smooth = (v_diff > GRADIENT_MIN_DIFF) & (v_diff < GRADIENT_MAX_DIFF)
    v_tag = v_smooth & (before_horizontal | (h_diff < v_diff * DOMINANT_AXIS_FACTOR))

    d_tag = (
        (d_diff > GRADIENT_MIN_DIFF)
        & (d_diff < DIAGONAL_MAX_DIFF)
        & (h_diff < DIAGONAL_MAX_AXIS_DIFF)
        & (v_diff < DIAGONAL_MAX_AXIS_DIFF)
    )

    regions = int(np.count_nonzero(h_smooth)) + int(np.count_nonzero(v_tag))
    detected = regions / total_blocks > GRADIENT_MIN_REGION_RATIO

    # First-seen order; within one block: horizontal, vertical, diagonal
    seen = []
    for order, (direction, tags) in enumerate((
        (GradientDirection.HORIZONTAL, h_tag),
        (GradientDirection.VERTICAL, v_tag),
        (GradientDirection.DIAGONAL, d_tag),
    )):
        if tags.any():
            seen.append((int(np.argmax(tags)), order, direction))
    directions = tuple(direction for _, _, direction in sorted(seen))

    logger.debug(
        "Gradient blocks: %d, regions=%d, detected=%s", total_blocks, regions, detected,
    )

    return GradientInfo(
        detected=detected,
        count=len(directions),
        directions=directions,
        types=(GradientType.LINEAR,) if detected else (),
    )


def glassmorphism_score(
    rgb: NDArray[np.uint8],
    rng: np.random.Generator,
    *,
    samples: int = 50,
) -> float:
    """
    Score frosted-glass softness from random 5x5 probes.

    Each probe averages the absolute per-channel deviation from its centre
    pixel. Deviations strictly between 3 and 15 look blurred (not flat, not
    detailed). Score = min(100, blurred / samples * 150).

    Images smaller than 10px on either side are not probed (score 0).
    """
    height, width = rgb.shape[:2]
    if width < GLASS_MIN_SIZE or height < GLASS_MIN_SIZE:
        return 0.0

    xs = GLASS_MARGIN + rng.integers(0, max(1, width - 2 * GLASS_MARGIN), size=samples)
    ys = GLASS_MARGIN + rng.integers(0, max(1, height - 2 * GLASS_MARGIN), size=samples)

    image = rgb.astype(np.int32)
    centers = image[ys, xs]

    deviation = np.zeros(samples, dtype=np.int64)
    offsets = range(-GLASS_RADIUS, GLASS_RADIUS + 1)
    for dy in offsets:
        for dx in offsets:
            deviation += np.abs(image[ys + dy, xs + dx] - centers).sum(axis=-1)

    window = (2 * GLASS_RADIUS + 1) ** 2
    mean_deviation = deviation / (window * 3)
    blurred = int(np.count_nonzero(
        (mean_deviation > GLASS_MIN_DEVIATION) & (mean_deviation < GLASS_MAX_DEVIATION)
    ))

    return min(100.0, blurred / samples * GLASS_SCORE_FACTOR)


def _noise_level(rgb: NDArray[np.uint8]) -> float:
    """Percent of consecutive pixel pairs (row-major, wrapping rows) with a small RGB step."""
    flat = rgb.reshape(-1, 3).astype(np.int32)
    if len(flat) == 0:
        return 0.0

    delta = np.abs(flat[1:] - flat[:-1]).sum(axis=-1)
    noisy = int(np.count_nonzero((delta > NOISE_MIN_DELTA) & (delta < NOISE_MAX_DELTA)))
    return noisy / len(flat) * 100.0
