# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Color space helpers.

Conversions used by the analyzers:
- sRGB uint8 → HSL (integer degrees / percent, rounded half-up)
- sRGB uint8 → Rec. 601 luma (perceived brightness)
- sRGB uint8 → WCAG relative luminance
- RGB → hex

All array conversions are pure NumPy and operate on arrays of shape (..., 3).
Rounding is half-up (``floor(x + 0.5)``) everywhere, never banker's rounding,
so bucket boundaries do not move between scalar and vectorized code paths.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


# Rec. 601 luma weights (0.299, 0.587, 0.114) in per-mille
LUMA_WEIGHTS = (299, 587, 114)

# WCAG 2.x relative luminance
_WCAG_LINEAR_THRESHOLD = 0.03928
_WCAG_WEIGHTS = (0.2126, 0.7152, 0.0722)


def round_half_up(values):
    """Round to the nearest integer, with .5 going up."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


# =============================================================================
# HSL
# =============================================================================


def rgb_to_hsl(rgb: NDArray[np.uint8]) -> NDArray[np.int64]:
    """
    Convert sRGB values [0, 255] to integer HSL.

    Args:
        rgb: Array of shape (..., 3) with uint8 (or int) RGB values

    Returns:
        Array of shape (..., 3) with (H, S, L):
        - H: hue in whole degrees [0, 360), 0 for achromatic colors
        - S: saturation in whole percent [0, 100]
        - L: lightness in whole percent [0, 100]
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    c_max = np.max(rgb, axis=-1)
    c_min = np.min(rgb, axis=-1)
    lightness = (c_max + c_min) / 2.0
    delta = c_max - c_min
    chromatic = delta > 0

    # Guard the divisions; achromatic entries are masked out below
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = np.where(lightness > 0.5, 2.0 - c_max - c_min, c_max + c_min)
    safe_denom = np.where(chromatic, denom, 1.0)
    saturation = np.where(chromatic, delta / safe_denom, 0.0)

    # Channel precedence r → g → b when several channels share the max
    hue_r = ((g - b) / safe_delta + np.where(g < b, 6.0, 0.0)) / 6.0
    hue_g = ((b - r) / safe_delta + 2.0) / 6.0
    hue_b = ((r - g) / safe_delta + 4.0) / 6.0
    hue = np.where(c_max == r, hue_r, np.where(c_max == g, hue_g, hue_b))
    hue = np.where(chromatic, hue, 0.0)

    h = round_half_up(hue * 360.0) % 360
    s = round_half_up(saturation * 100.0)
    l = round_half_up(lightness * 100.0)

    return np.stack([h, s, l], axis=-1).astype(np.int64)


def hue_distance(h1, h2):
    """
    Shortest angular distance between two hues in degrees.

    Works on scalars and on broadcastable arrays.
    """
    diff = np.abs(np.asarray(h1, dtype=np.float64) - np.asarray(h2, dtype=np.float64))
    result = np.minimum(diff, 360.0 - diff)
    if np.ndim(result) == 0:
        return float(result)
    return result


# =============================================================================
# Luma / Luminance
# =============================================================================


def luma(rgb: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Perceived brightness on the 0-255 scale (Rec. 601 weights).

    Args:
        rgb: Array of shape (..., 3)

    Returns:
        Array of shape (...) with luma values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    # Integer weights keep gray exact: luma(v, v, v) == v
    return (wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]) / 1000.0


def relative_luminance(rgb: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    WCAG relative luminance of sRGB colors.

    Args:
        rgb: Array of shape (..., 3) with values [0, 255]

    Returns:
        Array of shape (...) with luminance in [0, 1]
    """
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(
        srgb <= _WCAG_LINEAR_THRESHOLD,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )
    wr, wg, wb = _WCAG_WEIGHTS
    return wr * linear[..., 0] + wg * linear[..., 1] + wb * linear[..., 2]


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """WCAG contrast ratio between two relative luminances (always >= 1)."""
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


# =============================================================================
# Hex / Distance
# =============================================================================


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format an RGB triple as a lowercase hex string.

    Returns:
        Hex string like "#3366cc"
    """
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def color_distance(c1: NDArray, c2: NDArray) -> NDArray[np.float64]:
    """
    Euclidean distance in RGB space.

    Args:
        c1, c2: Broadcastable arrays of shape (..., 3)

    Returns:
        Array of shape (...) with distances (0 to ~441.67)
    """
    delta = np.asarray(c1, dtype=np.float64) - np.asarray(c2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a scalar into [low, high]."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))
