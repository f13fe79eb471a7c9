# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Stylescope -- design system extraction from image pixels.

Turns a screenshot or mockup into structured design facts: color roles,
layout balance, corner geometry, surface effects and overall style.

Quick start::

    from stylescope import analyze_image

    result = analyze_image("screenshot.png")
    result.colors.palette.primary   # "#3b82f6"
    result.style.aesthetic_tags     # ("Modern", "Light Mode", ...)
    result.to_json()                # camelCase JSON
"""

from __future__ import annotations

__version__ = "1.0.0"

from stylescope.analyze import (
    AnalysisConfig,
    BatchItem,
    Bitmap,
    analyze_batch,
    analyze_colors,
    analyze_effects,
    analyze_geometry,
    analyze_image,
    analyze_spatial,
    analyze_style,
    load_bitmap,
)
from stylescope.schema import (
    ColorAnalysis,
    EffectsAnalysis,
    GeometryAnalysis,
    ImageAnalysisResult,
    SpatialAnalysis,
    StyleAnalysis,
)

__all__ = [
    # Core API
    "analyze_image",
    "analyze_batch",
    "ImageAnalysisResult",
    # Inputs
    "Bitmap",
    "AnalysisConfig",
    "load_bitmap",
    "BatchItem",
    # Individual analyzers
    "analyze_colors",
    "analyze_spatial",
    "analyze_geometry",
    "analyze_effects",
    "analyze_style",
    # Results (commonly needed)
    "ColorAnalysis",
    "SpatialAnalysis",
    "GeometryAnalysis",
    "EffectsAnalysis",
    "StyleAnalysis",
    # Version
    "__version__",
]
