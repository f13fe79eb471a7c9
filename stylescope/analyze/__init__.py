# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Analysis core for Stylescope.

Deterministic, pixel-level design analysis. Every operation works on a
decoded Bitmap; nothing here calls a model or the network.
"""

from stylescope.analyze.batch import BatchItem, analyze_batch
from stylescope.analyze.bitmap import Bitmap
from stylescope.analyze.colors import analyze_colors, detect_palette_type, extract_palette
from stylescope.analyze.config import AnalysisConfig
from stylescope.analyze.effects import analyze_effects
from stylescope.analyze.extract import analyze_image
from stylescope.analyze.geometry import analyze_geometry
from stylescope.analyze.loader import LoadedImage, load_bitmap
from stylescope.analyze.spatial import analyze_spatial
from stylescope.analyze.style import analyze_style

__all__ = [
    "analyze_image",
    "analyze_batch",
    "BatchItem",
    "Bitmap",
    "AnalysisConfig",
    "load_bitmap",
    "LoadedImage",
    # Individual analyzers
    "analyze_colors",
    "analyze_spatial",
    "analyze_geometry",
    "analyze_effects",
    "analyze_style",
    "extract_palette",
    "detect_palette_type",
]
