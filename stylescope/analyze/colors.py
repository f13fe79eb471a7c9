# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Color Analyzer.

Quantizes a strided pixel sample into 16-step RGB buckets, ranks the buckets
by frequency, and derives:
- the 5-role palette (primary, secondary, accent, background, foreground)
- top-3 proportions
- temperature, saturation and contrast classifications
- the palette type (hue relationships)
- the dark / mid / light distribution

Quantization caps the color space at 17³ buckets, which merges the
near-duplicate shades produced by anti-aliasing and photographic noise.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colorspace import (
    clamp,
    contrast_ratio,
    hue_distance,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from stylescope.analyze.config import DEFAULT_CONFIG, AnalysisConfig
from stylescope.schema import (
    ColorAnalysis,
    ColorInfo,
    ContrastLevel,
    LightnessDistribution,
    Palette,
    PaletteType,
    Proportions,
    SaturationLevel,
    Temperature,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Thresholds
# =============================================================================

ALPHA_CUTOFF = 128  # alpha below this is transparent
QUANT_STEP = 16
MAX_DOMINANT_COLORS = 20

# Only pixels above this saturation contribute to the average hue
HUE_SATURATION_FLOOR = 10

DARK_LIGHTNESS = 30   # L < 30 is dark
LIGHT_LIGHTNESS = 70  # L > 70 is light

# Palette roles
BACKGROUND_MAX_SATURATION = 20
BACKGROUND_MIN_PERCENTAGE = 30
FOREGROUND_MIN_LIGHTNESS_GAP = 40
PRIMARY_MIN_SATURATION = 30
PRIMARY_MIN_PERCENTAGE = 2
SECONDARY_MIN_SATURATION = 20
SECONDARY_MIN_HUE_GAP = 30
ACCENT_MIN_SATURATION = 40
ACCENT_MIN_HUE_GAP = 60

FALLBACK_PRIMARY = "#6366f1"
FALLBACK_SECONDARY = "#a855f7"
FALLBACK_ACCENT = "#10b981"
FALLBACK_BACKGROUND = "#ffffff"
FALLBACK_DARK_FOREGROUND = "#000000"
FALLBACK_LIGHT_FOREGROUND = "#ffffff"
FALLBACK_BACKGROUND_LIGHTNESS = 50

# 60-30-10 convention for missing proportion slots
DEFAULT_PROPORTIONS = (60.0, 30.0, 10.0)

# Temperature (hue in degrees)
WARM_HUE_MAX = 60
WARM_HUE_WRAP_MIN = 300
COOL_HUE_MIN = 180
COOL_HUE_MAX = 240
COOL_HUE_CENTER = 210
TEMPERATURE_THRESHOLD = 25

SATURATION_BUCKETS = (
    (60, SaturationLevel.VIBRANT),
    (40, SaturationLevel.MODERATE),
    (20, SaturationLevel.MUTED),
)

CONTRAST_SAMPLE_SIZE = 5
CONTRAST_BUCKETS = (
    (7, ContrastLevel.HIGH),
    (3, ContrastLevel.MEDIUM),
)

# Palette type
PALETTE_TYPE_SATURATION_FLOOR = 20
PALETTE_TYPE_SAMPLE_SIZE = 5


# =============================================================================
# Analyzer
# =============================================================================


def analyze_colors(
    bitmap: Bitmap,
    config: Optional[AnalysisConfig] = None,
) -> ColorAnalysis:
    """
    Run the Color Analyzer over a bitmap.

    Every ``config.color_stride``-th pixel (row-major) is sampled; samples
    with alpha < 128 are dropped from every count. All denominators are the
    number of remaining opaque samples, so a fully transparent bitmap
    produces the fallback palette instead of dividing by zero.

    Args:
        bitmap: Decoded RGBA image
        config: Pipeline configuration (uses defaults if None)

    Returns:
        ColorAnalysis
    """
    cfg = config or DEFAULT_CONFIG

    rgba = bitmap.to_array().reshape(-1, 4)
    sampled = rgba[::cfg.color_stride]
    opaque = sampled[sampled[:, 3] >= ALPHA_CUTOFF, :3]
    n_samples = len(opaque)

    dominant_colors = rank_colors(opaque)

    logger.debug(
        "Color pass: %d/%d samples opaque, %d dominant buckets",
        n_samples, len(sampled), len(dominant_colors),
    )

    hsl = rgb_to_hsl(opaque)
    hue = hsl[:, 0]
    sat = hsl[:, 1]
    light = hsl[:, 2]

    saturated = sat > HUE_SATURATION_FLOOR
    if not n_samples:
        avg_hue = None
    elif saturated.any():
        avg_hue = float(hue[saturated].mean())
    else:
        # Grayscale content averages to hue 0
        avg_hue = 0.0
    avg_saturation = float(sat.mean()) if n_samples else 0.0

    temperature, temperature_score = classify_temperature(avg_hue)
    saturation = classify_saturation(avg_saturation)
    ratio = _contrast_ratio(dominant_colors)
    contrast = classify_contrast(ratio)

    return ColorAnalysis(
        dominant_colors=dominant_colors,
        palette=extract_palette(dominant_colors),
        proportions=_proportions(dominant_colors),
        temperature=temperature,
        temperature_score=temperature_score,
        saturation=saturation,
        saturation_score=avg_saturation,
        contrast=contrast,
        contrast_ratio=ratio,
        palette_type=detect_palette_type(dominant_colors),
        lightness_distribution=_lightness_distribution(light),
    )


def rank_colors(
    rgb_pixels: NDArray[np.uint8],
    limit: int = MAX_DOMINANT_COLORS,
) -> tuple[ColorInfo, ...]:
    """
    Quantize pixels to 16-step buckets and rank by frequency.

    Each channel is rounded to the nearest multiple of 16 (half-up) and
    capped at 255. Ties keep first-occurrence order.

    Args:
        rgb_pixels: Array of shape (N, 3) with RGB values [0-255]
        limit: Maximum number of buckets to return

    Returns:
        Tuple of ColorInfo, most frequent first
    """
    n_pixels = len(rgb_pixels)
    if n_pixels == 0:
        return ()

    quantized = np.minimum(
        round_half_up(np.asarray(rgb_pixels, dtype=np.float64) / QUANT_STEP) * QUANT_STEP,
        255,
    ).astype(np.int64)
    keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]

    unique_keys, first_index, counts = np.unique(
        keys, return_index=True, return_counts=True
    )
    order = np.lexsort((first_index, -counts))[:limit]

    bucket_rgb = np.stack(
        [(unique_keys >> 16) & 0xFF, (unique_keys >> 8) & 0xFF, unique_keys & 0xFF],
        axis=-1,
    )[order]
    bucket_hsl = rgb_to_hsl(bucket_rgb)

    colors = []
    for (r, g, b), (h, s, l), count in zip(bucket_rgb, bucket_hsl, counts[order]):
        colors.append(ColorInfo(
            hex=rgb_to_hex(r, g, b),
            rgb=(int(r), int(g), int(b)),
            hsl=(int(h), int(s), int(l)),
            percentage=float(count) / n_pixels * 100.0,
            count=int(count),
        ))
    return tuple(colors)


# =============================================================================
# Palette Roles
# =============================================================================


def extract_palette(colors: Sequence[ColorInfo]) -> Palette:
    """
    Assign design roles to dominant colors.

    Rules, applied to ``colors`` in frequency order:
    - background: first color with S < 20 or > 30% coverage
    - foreground: first color whose lightness differs from the background's by > 40
    - primary: highest saturation × coverage among S > 30 and > 2% coverage
    - secondary: first color with S > 20, > 30° from the primary hue
    - accent: first color with S > 40, > 60° from the primary hue,
      distinct from primary and secondary

    Any role without a candidate gets its fixed fallback color.
    """
    background_color = next(
        (
            c for c in colors
            if c.saturation < BACKGROUND_MAX_SATURATION
            or c.percentage > BACKGROUND_MIN_PERCENTAGE
        ),
        colors[0] if colors else None,
    )
    if background_color is not None:
        background = background_color.hex
        background_lightness = background_color.lightness
    else:
        background = FALLBACK_BACKGROUND
        background_lightness = FALLBACK_BACKGROUND_LIGHTNESS

    foreground_color = next(
        (
            c for c in colors
            if abs(c.lightness - background_lightness) > FOREGROUND_MIN_LIGHTNESS_GAP
        ),
        None,
    )
    if foreground_color is not None:
        foreground = foreground_color.hex
    elif background_lightness > 50:
        foreground = FALLBACK_DARK_FOREGROUND
    else:
        foreground = FALLBACK_LIGHT_FOREGROUND

    primary_color: Optional[ColorInfo] = None
    best_score = -1.0
    for c in colors:
        if c.saturation > PRIMARY_MIN_SATURATION and c.percentage > PRIMARY_MIN_PERCENTAGE:
            score = c.saturation * c.percentage
            if score > best_score:
                primary_color, best_score = c, score
    primary = primary_color.hex if primary_color else FALLBACK_PRIMARY
    primary_hue = primary_color.hue if primary_color else 0

    secondary = next(
        (
            c.hex for c in colors
            if c.saturation > SECONDARY_MIN_SATURATION
            and hue_distance(c.hue, primary_hue) > SECONDARY_MIN_HUE_GAP
            and c.hex != primary
        ),
        FALLBACK_SECONDARY,
    )

    accent = next(
        (
            c.hex for c in colors
            if c.saturation > ACCENT_MIN_SATURATION
            and c.hex not in (primary, secondary)
            and hue_distance(c.hue, primary_hue) > ACCENT_MIN_HUE_GAP
        ),
        FALLBACK_ACCENT,
    )

    return Palette(
        primary=primary,
        secondary=secondary,
        accent=accent,
        background=background,
        foreground=foreground,
    )


def detect_palette_type(colors: Sequence[ColorInfo]) -> PaletteType:
    """
    Classify hue relationships among the first five saturated (S > 20) colors.

    Rules in priority order:
    fewer than 2 colors or max distance < 30 → monochromatic;
    mean distance < 40 → analogous; any pair in (150, 210) → complementary;
    two or more pairs in (100, 140) → triadic; any pair in (130, 170) →
    split-complementary; otherwise mixed.
    """
    saturated = [
        c for c in colors if c.saturation > PALETTE_TYPE_SATURATION_FLOOR
    ][:PALETTE_TYPE_SAMPLE_SIZE]
    if len(saturated) < 2:
        return PaletteType.MONOCHROMATIC

    hues = np.array([c.hue for c in saturated], dtype=np.float64)
    i, j = np.triu_indices(len(hues), k=1)
    distances = hue_distance(hues[i], hues[j])

    if distances.max() < 30:
        return PaletteType.MONOCHROMATIC
    if distances.mean() < 40:
        return PaletteType.ANALOGOUS
    if np.any((distances > 150) & (distances < 210)):
        return PaletteType.COMPLEMENTARY
    if np.count_nonzero((distances > 100) & (distances < 140)) >= 2:
        return PaletteType.TRIADIC
    if np.any((distances > 130) & (distances < 170)):
        return PaletteType.SPLIT_COMPLEMENTARY
    return PaletteType.MIXED


# =============================================================================
# Classifications
# =============================================================================


def classify_temperature(avg_hue: Optional[float]) -> tuple[Temperature, float]:
    """
    Map the average hue of saturated pixels to a temperature score.

    Warm zone (0-60°, 300-360°) scores 50 plus 0.8 per degree away from red;
    cool zone (180-240°) scores -50 down to -95 at 210°; other hues scale
    linearly around 150°. ``None`` (nothing sampled) is neutral.

    Returns:
        (Temperature, score in [-100, 100])
    """
    if avg_hue is None:
        return Temperature.NEUTRAL, 0.0

    if avg_hue <= WARM_HUE_MAX or avg_hue >= WARM_HUE_WRAP_MIN:
        distance = avg_hue if avg_hue <= WARM_HUE_MAX else 360.0 - avg_hue
        score = 50.0 + distance * 0.8
    elif COOL_HUE_MIN <= avg_hue <= COOL_HUE_MAX:
        score = -50.0 - (30.0 - abs(avg_hue - COOL_HUE_CENTER)) * 1.5
    else:
        score = (avg_hue - 150.0) * 0.5
    score = clamp(score, -100.0, 100.0)

    if score > TEMPERATURE_THRESHOLD:
        return Temperature.WARM, score
    if score < -TEMPERATURE_THRESHOLD:
        return Temperature.COOL, score
    return Temperature.NEUTRAL, score


def classify_saturation(avg_saturation: float) -> SaturationLevel:
    """Bucket average saturation at 60 / 40 / 20."""
    for threshold, level in SATURATION_BUCKETS:
        if avg_saturation > threshold:
            return level
    return SaturationLevel.DESATURATED


def classify_contrast(ratio: float) -> ContrastLevel:
    """Bucket a WCAG contrast ratio at 7 / 3."""
    for threshold, level in CONTRAST_BUCKETS:
        if ratio > threshold:
            return level
    return ContrastLevel.LOW


def _contrast_ratio(colors: Sequence[ColorInfo]) -> float:
    """Contrast between the lightest and darkest of the top five colors."""
    top = colors[:CONTRAST_SAMPLE_SIZE]
    if not top:
        return 1.0
    luminances = relative_luminance(np.array([c.rgb for c in top], dtype=np.float64))
    return contrast_ratio(float(luminances.max()), float(luminances.min()))


def _proportions(colors: Sequence[ColorInfo]) -> Proportions:
    """
    Normalize the top three colors' coverage to 100.

    Missing slots keep their 60/30/10 convention value and the colors that
    do exist share the remainder.
    """
    present = [c.percentage for c in colors[:3]]
    missing = DEFAULT_PROPORTIONS[len(present):]
    remainder = 100.0 - sum(missing)
    total = sum(present)

    values = [p / total * remainder for p in present] if total > 0 else []
    values.extend(missing)
    if len(values) < 3:
        values = list(DEFAULT_PROPORTIONS)

    return Proportions(primary=values[0], secondary=values[1], accent=values[2])


def _lightness_distribution(lightness: NDArray[np.int64]) -> LightnessDistribution:
    """Share of dark / mid / light samples; all-mid when nothing was sampled."""
    total = len(lightness)
    if total == 0:
        return LightnessDistribution(dark=0.0, mid=100.0, light=0.0)

    dark = int(np.count_nonzero(lightness < DARK_LIGHTNESS))
    light = int(np.count_nonzero(lightness > LIGHT_LIGHTNESS))
    mid = total - dark - light
    return LightnessDistribution(
        dark=dark / total * 100.0,
        mid=mid / total * 100.0,
        light=light / total * 100.0,
    )
