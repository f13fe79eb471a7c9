# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Style Analyzer.

Pure arithmetic over the four pixel-level analyses: five 0-100 style
scores, an industry guess, aesthetic tags and an era. No pixels are read
here. The coefficients below are part of the output contract; changing
any of them changes every downstream score.
"""

from __future__ import annotations

import logging

from stylescope.analyze.colorspace import clamp
from stylescope.schema import (
    Balance,
    ColorAnalysis,
    ContrastLevel,
    CornerStyle,
    DepthStyle,
    Density,
    EffectsAnalysis,
    Era,
    GeometryAnalysis,
    Industry,
    PaletteType,
    SaturationLevel,
    ShadowIntensity,
    SpatialAnalysis,
    StyleAnalysis,
    Temperature,
)

logger = logging.getLogger(__name__)

MAX_AESTHETIC_TAGS = 8
TAG_SCORE_THRESHOLD = 70
THEME_SHARE_THRESHOLD = 60

# Every industry starts at 0 except the fallback
GENERAL_BASE_SCORE = 50.0


def analyze_style(
    colors: ColorAnalysis,
    spatial: SpatialAnalysis,
    geometry: GeometryAnalysis,
    effects: EffectsAnalysis,
) -> StyleAnalysis:
    """
    Run the Style Analyzer over completed pixel analyses.

    Args:
        colors: Color analysis
        spatial: Spatial analysis
        geometry: Geometry analysis
        effects: Effects analysis

    Returns:
        StyleAnalysis
    """
    corner = geometry.corner_style
    saturation = colors.saturation

    minimalism = clamp(
        spatial.whitespace_percentage * 0.4
        + (100 - geometry.edge_density) * 0.3
        + (20 if corner in (CornerStyle.ROUNDED, CornerStyle.SOFT) else 0)
        + (20 if colors.palette_type is PaletteType.MONOCHROMATIC else 0)
    )

    complexity = clamp(
        geometry.edge_density * 0.5
        + effects.gradients.count * 10
        + effects.shadows.score * 0.3
        + (100 - spatial.whitespace_percentage) * 0.2
    )

    if saturation is SaturationLevel.VIBRANT:
        saturation_modernness = 25
    elif saturation is SaturationLevel.MODERATE:
        saturation_modernness = 15
    else:
        saturation_modernness = 5

    modernness = clamp(
        (30 if corner in (CornerStyle.ROUNDED, CornerStyle.PILL) else 10)
        + saturation_modernness
        + (20 if effects.gradients.detected else 0)
        + (15 if effects.has_glassmorphism else 0)
        + (10 if spatial.balance in (Balance.SYMMETRIC, Balance.CENTERED) else 5)
    )

    elegance = clamp(
        minimalism * 0.3
        + (25 if saturation in (SaturationLevel.MUTED, SaturationLevel.MODERATE) else 10)
        + (20 if effects.shadows.intensity is ShadowIntensity.SUBTLE else 10)
        + (15 if corner in (CornerStyle.SOFT, CornerStyle.ROUNDED) else 5)
    )

    boldness = clamp(
        (30 if saturation is SaturationLevel.VIBRANT else 10)
        + (25 if colors.contrast is ContrastLevel.HIGH else 10)
        + (20 if effects.shadows.intensity is ShadowIntensity.DRAMATIC else 5)
        + complexity * 0.2
    )

    scores = {
        "minimalism": float(minimalism),
        "complexity": float(complexity),
        "modernness": float(modernness),
        "elegance": float(elegance),
        "boldness": float(boldness),
    }

    industry, industry_score = detect_industry(colors, spatial, effects, scores)
    tags = aesthetic_tags(colors, spatial, geometry, effects, scores)
    era = detect_era(geometry, effects, minimalism)

    logger.debug(
        "Style pass: industry=%s (%.0f), era=%s, tags=%s",
        industry.value, industry_score, era.value, ", ".join(tags),
    )

    return StyleAnalysis(
        **scores,
        industry=industry,
        industry_confidence=float(min(100.0, industry_score)),
        aesthetic_tags=tags,
        era=era,
    )


def detect_industry(
    colors: ColorAnalysis,
    spatial: SpatialAnalysis,
    effects: EffectsAnalysis,
    scores: dict[str, float],
) -> tuple[Industry, float]:
    """
    Score each industry with additive rules and pick the best.

    Ties go to the industry declared first in ``Industry``.
    """
    industry_scores = {industry: 0.0 for industry in Industry}
    industry_scores[Industry.GENERAL] = GENERAL_BASE_SCORE

    lightness = colors.lightness_distribution
    contrast_high = colors.contrast is ContrastLevel.HIGH

    # Tech: dark themes, gradients, multi-hue, modern
    if lightness.dark > 40:
        industry_scores[Industry.TECH] += 20
    if effects.gradients.detected:
        industry_scores[Industry.TECH] += 15
    if colors.palette_type is not PaletteType.MONOCHROMATIC:
        industry_scores[Industry.TECH] += 10
    if scores["modernness"] > 60:
        industry_scores[Industry.TECH] += 15

    # Finance: cool, symmetric, restrained
    if colors.temperature is Temperature.COOL:
        industry_scores[Industry.FINANCE] += 20
    if spatial.balance is Balance.SYMMETRIC:
        industry_scores[Industry.FINANCE] += 15
    if scores["minimalism"] > 50:
        industry_scores[Industry.FINANCE] += 10

    # Creative: vibrant, asymmetric, complex
    if colors.saturation is SaturationLevel.VIBRANT:
        industry_scores[Industry.CREATIVE] += 25
    if spatial.balance.is_asymmetric:
        industry_scores[Industry.CREATIVE] += 15
    if scores["complexity"] > 60:
        industry_scores[Industry.CREATIVE] += 10

    # Healthcare: light, clean, cool
    if lightness.light > 50:
        industry_scores[Industry.HEALTHCARE] += 20
    if scores["minimalism"] > 60:
        industry_scores[Industry.HEALTHCARE] += 15
    if colors.temperature is Temperature.COOL:
        industry_scores[Industry.HEALTHCARE] += 10

    # E-commerce: warm, dense, high contrast
    if colors.temperature is Temperature.WARM:
        industry_scores[Industry.ECOMMERCE] += 15
    if spatial.density is Density.DENSE:
        industry_scores[Industry.ECOMMERCE] += 15
    if contrast_high:
        industry_scores[Industry.ECOMMERCE] += 10

    # Media: bold, high contrast
    if scores["boldness"] > 60:
        industry_scores[Industry.MEDIA] += 20
    if contrast_high:
        industry_scores[Industry.MEDIA] += 15

    # max() keeps the first maximal key in insertion order
    best = max(industry_scores, key=industry_scores.__getitem__)
    return best, industry_scores[best]


def aesthetic_tags(
    colors: ColorAnalysis,
    spatial: SpatialAnalysis,
    geometry: GeometryAnalysis,
    effects: EffectsAnalysis,
    scores: dict[str, float],
) -> tuple[str, ...]:
    """Human-readable tags in fixed rule order, at most eight."""
    rules = (
        ("Minimalist", scores["minimalism"] > TAG_SCORE_THRESHOLD),
        ("Bold", scores["boldness"] > TAG_SCORE_THRESHOLD),
        ("Elegant", scores["elegance"] > TAG_SCORE_THRESHOLD),
        ("Modern", scores["modernness"] > TAG_SCORE_THRESHOLD),
        ("Glassmorphism", effects.has_glassmorphism),
        ("Gradient-rich", effects.gradients.detected),
        ("Dark Mode", colors.lightness_distribution.dark > THEME_SHARE_THRESHOLD),
        ("Light Mode", colors.lightness_distribution.light > THEME_SHARE_THRESHOLD),
        ("Warm", colors.temperature is Temperature.WARM),
        ("Cool", colors.temperature is Temperature.COOL),
        ("Vibrant", colors.saturation is SaturationLevel.VIBRANT),
        ("Muted", colors.saturation is SaturationLevel.MUTED),
        ("Flat Design", effects.depth is DepthStyle.FLAT),
        ("Neumorphic", effects.depth is DepthStyle.NEUMORPHIC),
        ("Pill-shaped", geometry.corner_style is CornerStyle.PILL),
        ("Airy", spatial.density is Density.SPACIOUS),
    )
    tags = [tag for tag, applies in rules if applies]
    return tuple(tags[:MAX_AESTHETIC_TAGS])


def detect_era(
    geometry: GeometryAnalysis,
    effects: EffectsAnalysis,
    minimalism: float,
) -> Era:
    if effects.depth is DepthStyle.FLAT and minimalism > 60:
        return Era.MODERN
    if effects.has_glassmorphism or geometry.corner_style is CornerStyle.PILL:
        return Era.FUTURISTIC
    if (
        effects.shadows.intensity is ShadowIntensity.DRAMATIC
        and geometry.corner_style is CornerStyle.SHARP
    ):
        return Era.CLASSIC
    return Era.MODERN
