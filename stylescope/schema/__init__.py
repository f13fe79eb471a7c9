# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Schema definitions for design analysis results.

All types in this module are immutable (frozen dataclasses).
Once an analysis is produced, it is a fact and cannot be altered.
"""

from stylescope.schema.design_analysis import (
    REGION_NAMES,
    SCHEMA_VERSION,
    STYLE_SCORE_NAMES,
    AnalysisMetadata,
    Balance,
    ColorAnalysis,
    ColorInfo,
    ContrastLevel,
    CornerStyle,
    Density,
    DepthStyle,
    EffectsAnalysis,
    Era,
    FocalPoint,
    GeometryAnalysis,
    GradientDirection,
    GradientInfo,
    GradientType,
    GridDetection,
    ImageAnalysisResult,
    Industry,
    LightnessDistribution,
    Palette,
    PaletteType,
    Proportions,
    RadiusEstimate,
    SaturationLevel,
    ShadowInfo,
    ShadowIntensity,
    ShapeCounts,
    SpatialAnalysis,
    StyleAnalysis,
    Temperature,
    VisualWeight,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Classifications
    "Temperature",
    "SaturationLevel",
    "ContrastLevel",
    "PaletteType",
    "Density",
    "Balance",
    "CornerStyle",
    "GradientDirection",
    "GradientType",
    "ShadowIntensity",
    "DepthStyle",
    "Industry",
    "Era",
    # Color analysis
    "ColorInfo",
    "Palette",
    "Proportions",
    "LightnessDistribution",
    "ColorAnalysis",
    # Spatial analysis
    "REGION_NAMES",
    "VisualWeight",
    "GridDetection",
    "FocalPoint",
    "SpatialAnalysis",
    # Geometry analysis
    "RadiusEstimate",
    "ShapeCounts",
    "GeometryAnalysis",
    # Effects analysis
    "GradientInfo",
    "ShadowInfo",
    "EffectsAnalysis",
    # Style analysis
    "STYLE_SCORE_NAMES",
    "StyleAnalysis",
    # Top-level container
    "AnalysisMetadata",
    "ImageAnalysisResult",
]
