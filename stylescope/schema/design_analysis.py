# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
ImageAnalysisResult v1.0: canonical schema for design analysis.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same pixels → same analysis (metadata timing aside)
- Self-validating: Ranges are checked on construction
- Serializable: ``to_dict()`` emits the camelCase wire names consumed by
  downstream UIs and export templates; ``from_dict()`` reads them back

Units:
- Percentages and scores: 0-100
- Hue: whole degrees [0, 360); saturation/lightness: whole percent [0, 100]
- Radii: pixels
- Focal point coordinates: normalized [0, 1]
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Validation Helpers
# =============================================================================

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$")

# Float slack when checking that normalized parts add back up to 100
_SUM_TOLERANCE = 0.01


def _check_hex(name: str, value: str) -> None:
    if not _HEX_RE.match(value):
        raise ValueError(f"{name} must be a lowercase #rrggbb hex string, got {value!r}")


def _check_range(name: str, value: float, low: float = 0.0, high: float = 100.0) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be {low:g}-{high:g}, got {value}")


def _check_sum(name: str, parts: tuple[float, ...]) -> None:
    total = sum(parts)
    if abs(total - 100.0) > _SUM_TOLERANCE:
        raise ValueError(f"{name} must sum to 100, got {total:.3f}")


# =============================================================================
# Classification Enums
# =============================================================================


class Temperature(Enum):
    """Overall color temperature."""
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class SaturationLevel(Enum):
    """Average saturation bucket."""
    VIBRANT = "vibrant"
    MODERATE = "moderate"
    MUTED = "muted"
    DESATURATED = "desaturated"


class ContrastLevel(Enum):
    """WCAG contrast bucket of the dominant colors."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PaletteType(Enum):
    """Hue relationship among the most saturated dominant colors."""
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MIXED = "mixed"


class Density(Enum):
    """Layout density derived from whitespace share."""
    DENSE = "dense"
    BALANCED = "balanced"
    SPACIOUS = "spacious"


class Balance(Enum):
    """Visual weight balance across regions."""
    SYMMETRIC = "symmetric"
    ASYMMETRIC_LEFT = "asymmetric-left"
    ASYMMETRIC_RIGHT = "asymmetric-right"
    ASYMMETRIC_TOP = "asymmetric-top"
    ASYMMETRIC_BOTTOM = "asymmetric-bottom"
    CENTERED = "centered"

    @property
    def is_asymmetric(self) -> bool:
        return self.value.startswith("asymmetric")


class CornerStyle(Enum):
    """Dominant corner treatment."""
    SHARP = "sharp"
    SOFT = "soft"
    ROUNDED = "rounded"
    PILL = "pill"
    MIXED = "mixed"


class GradientDirection(Enum):
    """Axis of a detected color transition."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class GradientType(Enum):
    LINEAR = "linear"
    RADIAL = "radial"


class ShadowIntensity(Enum):
    NONE = "none"
    SUBTLE = "subtle"
    MEDIUM = "medium"
    DRAMATIC = "dramatic"


class DepthStyle(Enum):
    """Perceived depth treatment."""
    FLAT = "flat"
    SUBTLE = "subtle"
    MATERIAL = "material"
    NEUMORPHIC = "neumorphic"


class Industry(Enum):
    """
    Industry guess.

    Declaration order is the tie-break order when scores are equal.
    """
    TECH = "tech"
    FINANCE = "finance"
    CREATIVE = "creative"
    HEALTHCARE = "healthcare"
    ECOMMERCE = "ecommerce"
    MEDIA = "media"
    GENERAL = "general"


class Era(Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    FUTURISTIC = "futuristic"


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """
    A quantized color bucket ranked by sample frequency.

    Attributes:
        hex: Lowercase hex like "#3366cc"
        rgb: (r, g, b) ints 0-255
        hsl: (h, s, l) ints; h in [0, 360), s and l in [0, 100]
        percentage: Share of sampled pixels in this bucket (0-100)
        count: Raw number of samples in this bucket
    """
    hex: str
    rgb: tuple[int, int, int]
    hsl: tuple[int, int, int]
    percentage: float
    count: int

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        _check_hex("hex", self.hex)
        if any(not 0 <= c <= 255 for c in self.rgb):
            raise ValueError(f"RGB channels must be 0-255, got {self.rgb}")
        h, s, l = self.hsl
        if not 0 <= h < 360:
            raise ValueError(f"Hue must be 0-359, got {h}")
        _check_range("Saturation", s)
        _check_range("Lightness", l)
        _check_range("percentage", self.percentage)
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")

    @property
    def hue(self) -> int:
        return self.hsl[0]

    @property
    def saturation(self) -> int:
        return self.hsl[1]

    @property
    def lightness(self) -> int:
        return self.hsl[2]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        r, g, b = self.rgb
        h, s, l = self.hsl
        return {
            "hex": self.hex,
            "rgb": {"r": r, "g": g, "b": b},
            "hsl": {"h": h, "s": s, "l": l},
            "percentage": self.percentage,
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorInfo:
        """Deserialize from dictionary."""
        rgb = data["rgb"]
        hsl = data["hsl"]
        return cls(
            hex=data["hex"],
            rgb=(rgb["r"], rgb["g"], rgb["b"]),
            hsl=(hsl["h"], hsl["s"], hsl["l"]),
            percentage=data["percentage"],
            count=data["count"],
        )


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Five design roles, each a hex color.

    Roles without a qualifying dominant color hold fixed fallback values
    rather than being empty.
    """
    primary: str
    secondary: str
    accent: str
    background: str
    foreground: str

    def __post_init__(self) -> None:
        for role in ("primary", "secondary", "accent", "background", "foreground"):
            _check_hex(role, getattr(self, role))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "foreground": self.foreground,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(**{k: data[k] for k in ("primary", "secondary", "accent", "background", "foreground")})


@dataclass(frozen=True, slots=True)
class Proportions:
    """Relative share of the top three dominant colors (sums to 100)."""
    primary: float
    secondary: float
    accent: float

    def __post_init__(self) -> None:
        _check_sum("Proportions", (self.primary, self.secondary, self.accent))

    def to_dict(self) -> dict:
        return {"primary": self.primary, "secondary": self.secondary, "accent": self.accent}

    @classmethod
    def from_dict(cls, data: dict) -> Proportions:
        return cls(primary=data["primary"], secondary=data["secondary"], accent=data["accent"])


@dataclass(frozen=True, slots=True)
class LightnessDistribution:
    """Share of dark (L<30), mid and light (L>70) samples (sums to 100)."""
    dark: float
    mid: float
    light: float

    def __post_init__(self) -> None:
        _check_sum("Lightness distribution", (self.dark, self.mid, self.light))

    def to_dict(self) -> dict:
        return {"dark": self.dark, "mid": self.mid, "light": self.light}

    @classmethod
    def from_dict(cls, data: dict) -> LightnessDistribution:
        return cls(dark=data["dark"], mid=data["mid"], light=data["light"])


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """
    Output of the Color Analyzer.

    Attributes:
        dominant_colors: Up to 20 quantized buckets, most frequent first
        palette: Role assignment (primary, secondary, accent, background, foreground)
        proportions: Top-3 share normalized to 100
        temperature: Warm / cool / neutral bucket
        temperature_score: -100 (cool) to +100 (warm)
        saturation: Saturation bucket
        saturation_score: Average saturation (0-100)
        contrast: Contrast bucket
        contrast_ratio: WCAG ratio between the lightest and darkest top-5 colors (>= 1)
        palette_type: Hue relationship classification
        lightness_distribution: Dark / mid / light shares
    """
    dominant_colors: tuple[ColorInfo, ...]
    palette: Palette
    proportions: Proportions
    temperature: Temperature
    temperature_score: float
    saturation: SaturationLevel
    saturation_score: float
    contrast: ContrastLevel
    contrast_ratio: float
    palette_type: PaletteType
    lightness_distribution: LightnessDistribution

    def __post_init__(self) -> None:
        if len(self.dominant_colors) > 20:
            raise ValueError(
                f"At most 20 dominant colors allowed, got {len(self.dominant_colors)}"
            )
        _check_range("temperature_score", self.temperature_score, -100.0, 100.0)
        _check_range("saturation_score", self.saturation_score)
        if self.contrast_ratio < 1.0:
            raise ValueError(f"contrast_ratio must be >= 1, got {self.contrast_ratio}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "dominantColors": [c.to_dict() for c in self.dominant_colors],
            "palette": self.palette.to_dict(),
            "proportions": self.proportions.to_dict(),
            "temperature": self.temperature.value,
            "temperatureScore": self.temperature_score,
            "saturation": self.saturation.value,
            "saturationScore": self.saturation_score,
            "contrast": self.contrast.value,
            "contrastRatio": self.contrast_ratio,
            "paletteType": self.palette_type.value,
            "lightnessDistribution": self.lightness_distribution.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorAnalysis:
        """Deserialize from dictionary."""
        return cls(
            dominant_colors=tuple(ColorInfo.from_dict(c) for c in data["dominantColors"]),
            palette=Palette.from_dict(data["palette"]),
            proportions=Proportions.from_dict(data["proportions"]),
            temperature=Temperature(data["temperature"]),
            temperature_score=data["temperatureScore"],
            saturation=SaturationLevel(data["saturation"]),
            saturation_score=data["saturationScore"],
            contrast=ContrastLevel(data["contrast"]),
            contrast_ratio=data["contrastRatio"],
            palette_type=PaletteType(data["paletteType"]),
            lightness_distribution=LightnessDistribution.from_dict(data["lightnessDistribution"]),
        )


# =============================================================================
# Spatial Types
# =============================================================================


REGION_NAMES = ("top", "bottom", "left", "right", "center")


@dataclass(frozen=True, slots=True)
class VisualWeight:
    """
    Average visual weight per region, rescaled so the heaviest region is 100.

    Regions overlap: top/bottom/left/right thirds plus a central disc.
    """
    top: float
    bottom: float
    left: float
    right: float
    center: float

    def __post_init__(self) -> None:
        for name in REGION_NAMES:
            _check_range(f"visual weight ({name})", getattr(self, name))

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in REGION_NAMES}

    @classmethod
    def from_dict(cls, data: dict) -> VisualWeight:
        return cls(**{name: data[name] for name in REGION_NAMES})


@dataclass(frozen=True, slots=True)
class GridDetection:
    """Coarse column-grid estimate."""
    possible_columns: int
    confidence: float

    def __post_init__(self) -> None:
        if not 1 <= self.possible_columns <= 12:
            raise ValueError(f"possible_columns must be 1-12, got {self.possible_columns}")
        _check_range("confidence", self.confidence)

    def to_dict(self) -> dict:
        return {"possibleColumns": self.possible_columns, "confidence": self.confidence}

    @classmethod
    def from_dict(cls, data: dict) -> GridDetection:
        return cls(possible_columns=data["possibleColumns"], confidence=data["confidence"])


@dataclass(frozen=True, slots=True)
class FocalPoint:
    """
    Center of a heavy 5x5 grid cell.

    Attributes:
        x: Normalized horizontal position (0 = left, 1 = right)
        y: Normalized vertical position (0 = top, 1 = bottom)
        intensity: Average cell weight (unbounded above, > 0.6 when reported)
    """
    x: float
    y: float
    intensity: float

    def __post_init__(self) -> None:
        _check_range("x", self.x, 0.0, 1.0)
        _check_range("y", self.y, 0.0, 1.0)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "intensity": self.intensity}

    @classmethod
    def from_dict(cls, data: dict) -> FocalPoint:
        return cls(x=data["x"], y=data["y"], intensity=data["intensity"])


@dataclass(frozen=True, slots=True)
class SpatialAnalysis:
    """Output of the Spatial Analyzer."""
    density: Density
    density_score: float
    whitespace_percentage: float
    visual_weight: VisualWeight
    balance: Balance
    grid_detection: GridDetection
    focal_points: tuple[FocalPoint, ...]

    def __post_init__(self) -> None:
        _check_range("density_score", self.density_score)
        _check_range("whitespace_percentage", self.whitespace_percentage)
        if len(self.focal_points) > 5:
            raise ValueError(f"At most 5 focal points allowed, got {len(self.focal_points)}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "density": self.density.value,
            "densityScore": self.density_score,
            "whitespacePercentage": self.whitespace_percentage,
            "visualWeight": self.visual_weight.to_dict(),
            "balance": self.balance.value,
            "gridDetection": self.grid_detection.to_dict(),
            "focalPoints": [p.to_dict() for p in self.focal_points],
        }

    @classmethod
    def from_dict(cls, data: dict) -> SpatialAnalysis:
        """Deserialize from dictionary."""
        return cls(
            density=Density(data["density"]),
            density_score=data["densityScore"],
            whitespace_percentage=data["whitespacePercentage"],
            visual_weight=VisualWeight.from_dict(data["visualWeight"]),
            balance=Balance(data["balance"]),
            grid_detection=GridDetection.from_dict(data["gridDetection"]),
            focal_points=tuple(FocalPoint.from_dict(p) for p in data["focalPoints"]),
        )


# =============================================================================
# Geometry Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RadiusEstimate:
    """
    Border radius estimate in pixels.

    ``maximum`` is always average + 8 and ``minimum`` is max(0, average - 4).
    """
    minimum: int
    maximum: int
    average: int

    def __post_init__(self) -> None:
        if self.average < 0:
            raise ValueError(f"average radius must be >= 0, got {self.average}")
        if self.minimum > self.average or self.maximum < self.average:
            raise ValueError(
                f"Radius bounds must bracket the average, got "
                f"{self.minimum} <= {self.average} <= {self.maximum}"
            )

    @classmethod
    def around(cls, average: int) -> RadiusEstimate:
        """Build the estimate bracketing a representative radius."""
        return cls(minimum=max(0, average - 4), maximum=average + 8, average=average)

    def to_dict(self) -> dict:
        return {"min": self.minimum, "max": self.maximum, "average": self.average}

    @classmethod
    def from_dict(cls, data: dict) -> RadiusEstimate:
        return cls(minimum=data["min"], maximum=data["max"], average=data["average"])


@dataclass(frozen=True, slots=True)
class ShapeCounts:
    """Raw (not normalized) shape counts."""
    rectangles: int
    circles: int
    organic: int

    def __post_init__(self) -> None:
        if min(self.rectangles, self.circles, self.organic) < 0:
            raise ValueError("Shape counts must be non-negative")

    def to_dict(self) -> dict:
        return {"rectangles": self.rectangles, "circles": self.circles, "organic": self.organic}

    @classmethod
    def from_dict(cls, data: dict) -> ShapeCounts:
        return cls(rectangles=data["rectangles"], circles=data["circles"], organic=data["organic"])


@dataclass(frozen=True, slots=True)
class GeometryAnalysis:
    """Output of the Geometry Analyzer."""
    corner_style: CornerStyle
    estimated_radius: RadiusEstimate
    edge_density: float
    linearity: float
    shapes: ShapeCounts

    def __post_init__(self) -> None:
        _check_range("edge_density", self.edge_density)
        _check_range("linearity", self.linearity)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "cornerStyle": self.corner_style.value,
            "estimatedRadius": self.estimated_radius.to_dict(),
            "edgeDensity": self.edge_density,
            "linearity": self.linearity,
            "shapes": self.shapes.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> GeometryAnalysis:
        """Deserialize from dictionary."""
        return cls(
            corner_style=CornerStyle(data["cornerStyle"]),
            estimated_radius=RadiusEstimate.from_dict(data["estimatedRadius"]),
            edge_density=data["edgeDensity"],
            linearity=data["linearity"],
            shapes=ShapeCounts.from_dict(data["shapes"]),
        )


# =============================================================================
# Effects Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class GradientInfo:
    """
    Gradient detection summary.

    ``directions`` is deduplicated in first-seen order and may be non-empty
    even when ``detected`` is False (too few gradient blocks overall).
    """
    detected: bool
    count: int
    directions: tuple[GradientDirection, ...]
    types: tuple[GradientType, ...]

    def __post_init__(self) -> None:
        if len(set(self.directions)) != len(self.directions):
            raise ValueError(f"Gradient directions must be unique, got {self.directions}")

    def to_dict(self) -> dict:
        return {
            "detected": self.detected,
            "count": self.count,
            "directions": [d.value for d in self.directions],
            "types": [t.value for t in self.types],
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradientInfo:
        return cls(
            detected=data["detected"],
            count=data["count"],
            directions=tuple(GradientDirection(d) for d in data["directions"]),
            types=tuple(GradientType(t) for t in data["types"]),
        )


@dataclass(frozen=True, slots=True)
class ShadowInfo:
    """
    Shadow summary.

    ``direction`` is "bottom-right" whenever the score exceeds 10 and "none"
    otherwise; it is not estimated from the image.
    """
    intensity: ShadowIntensity
    score: float
    direction: str

    def __post_init__(self) -> None:
        _check_range("shadow score", self.score)

    def to_dict(self) -> dict:
        return {"intensity": self.intensity.value, "score": self.score, "direction": self.direction}

    @classmethod
    def from_dict(cls, data: dict) -> ShadowInfo:
        return cls(
            intensity=ShadowIntensity(data["intensity"]),
            score=data["score"],
            direction=data["direction"],
        )


@dataclass(frozen=True, slots=True)
class EffectsAnalysis:
    """Output of the Effects Analyzer."""
    has_glassmorphism: bool
    glassmorphism_score: float
    gradients: GradientInfo
    shadows: ShadowInfo
    depth: DepthStyle
    depth_score: float
    has_noise: bool
    noise_level: float

    def __post_init__(self) -> None:
        _check_range("glassmorphism_score", self.glassmorphism_score)
        _check_range("noise_level", self.noise_level)
        if self.depth_score < 0:
            raise ValueError(f"depth_score must be >= 0, got {self.depth_score}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hasGlassmorphism": self.has_glassmorphism,
            "glassmorphismScore": self.glassmorphism_score,
            "gradients": self.gradients.to_dict(),
            "shadows": self.shadows.to_dict(),
            "depth": self.depth.value,
            "depthScore": self.depth_score,
            "hasNoise": self.has_noise,
            "noiseLevel": self.noise_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> EffectsAnalysis:
        """Deserialize from dictionary."""
        return cls(
            has_glassmorphism=data["hasGlassmorphism"],
            glassmorphism_score=data["glassmorphismScore"],
            gradients=GradientInfo.from_dict(data["gradients"]),
            shadows=ShadowInfo.from_dict(data["shadows"]),
            depth=DepthStyle(data["depth"]),
            depth_score=data["depthScore"],
            has_noise=data["hasNoise"],
            noise_level=data["noiseLevel"],
        )


# =============================================================================
# Style Types
# =============================================================================


STYLE_SCORE_NAMES = ("minimalism", "complexity", "modernness", "elegance", "boldness")


@dataclass(frozen=True, slots=True)
class StyleAnalysis:
    """
    Output of the Style Analyzer.

    Attributes:
        minimalism, complexity, modernness, elegance, boldness: Scores 0-100
        industry: Best-matching industry
        industry_confidence: Winning industry score clamped to 0-100
        aesthetic_tags: Up to 8 tags in rule order
        era: Classic / modern / futuristic
    """
    minimalism: float
    complexity: float
    modernness: float
    elegance: float
    boldness: float
    industry: Industry
    industry_confidence: float
    aesthetic_tags: tuple[str, ...]
    era: Era

    def __post_init__(self) -> None:
        for name in STYLE_SCORE_NAMES:
            _check_range(name, getattr(self, name))
        _check_range("industry_confidence", self.industry_confidence)
        if len(self.aesthetic_tags) > 8:
            raise ValueError(f"At most 8 aesthetic tags allowed, got {len(self.aesthetic_tags)}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        result = {name: getattr(self, name) for name in STYLE_SCORE_NAMES}
        result.update({
            "industry": self.industry.value,
            "industryConfidence": self.industry_confidence,
            "aestheticTags": list(self.aesthetic_tags),
            "era": self.era.value,
        })
        return result

    @classmethod
    def from_dict(cls, data: dict) -> StyleAnalysis:
        """Deserialize from dictionary."""
        return cls(
            **{name: data[name] for name in STYLE_SCORE_NAMES},
            industry=Industry(data["industry"]),
            industry_confidence=data["industryConfidence"],
            aesthetic_tags=tuple(data["aestheticTags"]),
            era=Era(data["era"]),
        )


# =============================================================================
# Top-Level Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class AnalysisMetadata:
    """
    Facts about the analysis run.

    Attributes:
        width, height: Original (pre-downscale) image size
        aspect_ratio: width / height (0.0 for a zero-height image)
        analyzed_at: ISO-8601 UTC timestamp
        processing_time: Wall-clock milliseconds for the analyzers (decode excluded)
    """
    width: int
    height: int
    aspect_ratio: float
    analyzed_at: str
    processing_time: float

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "aspectRatio": self.aspect_ratio,
            "analyzedAt": self.analyzed_at,
            "processingTime": self.processing_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisMetadata:
        return cls(
            width=data["width"],
            height=data["height"],
            aspect_ratio=data["aspectRatio"],
            analyzed_at=data["analyzedAt"],
            processing_time=data["processingTime"],
        )


@dataclass(frozen=True, slots=True)
class ImageAnalysisResult:
    """
    Complete design analysis of one image.

    This is the top-level container produced by ``analyze_image``. Every
    field is populated, even for degenerate input (fallback values).

    Usage:
        result = analyze_image("screenshot.png")
        result.colors.palette.primary     # "#6366f1"
        result.style.aesthetic_tags       # ("Minimalist", "Light Mode", ...)
        result.to_json()                  # camelCase wire format
    """
    colors: ColorAnalysis
    spatial: SpatialAnalysis
    geometry: GeometryAnalysis
    effects: EffectsAnalysis
    style: StyleAnalysis
    metadata: AnalysisMetadata
    version: str = field(default=SCHEMA_VERSION)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        Field names match the wire format expected by downstream consumers.
        """
        return {
            "colors": self.colors.to_dict(),
            "spatial": self.spatial.to_dict(),
            "geometry": self.geometry.to_dict(),
            "effects": self.effects.to_dict(),
            "style": self.style.to_dict(),
            "metadata": self.metadata.to_dict(),
            "version": self.version,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ImageAnalysisResult:
        """Deserialize from dictionary."""
        return cls(
            colors=ColorAnalysis.from_dict(data["colors"]),
            spatial=SpatialAnalysis.from_dict(data["spatial"]),
            geometry=GeometryAnalysis.from_dict(data["geometry"]),
            effects=EffectsAnalysis.from_dict(data["effects"]),
            style=StyleAnalysis.from_dict(data["style"]),
            metadata=AnalysisMetadata.from_dict(data["metadata"]),
            version=data.get("version", SCHEMA_VERSION),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ImageAnalysisResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
