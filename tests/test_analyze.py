# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""End-to-end tests for analyze_image."""

import json
import re

import numpy as np
import pytest

from stylescope import ImageAnalysisResult, analyze_image
from stylescope.analyze import AnalysisConfig, Bitmap
from stylescope.schema import (
    SCHEMA_VERSION,
    ContrastLevel,
    CornerStyle,
    Density,
    GradientType,
    Industry,
    Temperature,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def _solid_image(r, g, b, height=100, width=100):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _checkerboard(size=256, block=8):
    """Black/white checkerboard, black in the top-left block."""
    ys, xs = np.indices((size, size))
    white = ((ys // block + xs // block) % 2).astype(bool)
    img = np.zeros((size, size, 3), dtype=np.uint8)
    img[white] = 255
    return img


def _radial_gradient(size=200, radius=100):
    """Red at the centre blending to blue at ``radius``."""
    ys, xs = np.indices((size, size))
    t = np.minimum(1.0, np.hypot(xs - size / 2, ys - size / 2) / radius)[..., np.newaxis]
    red = np.array([255.0, 0.0, 0.0])
    blue = np.array([0.0, 0.0, 255.0])
    return np.round(red * (1 - t) + blue * t).astype(np.uint8)


def _card_on_white():
    """1600x1200 white page with one #3366cc card in the middle."""
    img = _solid_image(255, 255, 255, 1200, 1600)
    img[330:870, 440:1160] = [51, 102, 204]
    return img


def _without_metadata(result):
    d = result.to_dict()
    d.pop("metadata")
    return d


class TestResultInvariants:

    @pytest.mark.parametrize("make", [
        lambda: _solid_image(51, 102, 153),
        _checkerboard,
        _radial_gradient,
    ])
    def test_shares_and_hex(self, make):
        result = analyze_image(make())
        p = result.colors.proportions
        assert p.primary + p.secondary + p.accent == pytest.approx(100.0)
        d = result.colors.lightness_distribution
        assert d.dark + d.mid + d.light == pytest.approx(100.0)
        for c in result.colors.dominant_colors:
            assert HEX_RE.match(c.hex)
        for role in ("primary", "secondary", "accent", "background", "foreground"):
            assert HEX_RE.match(getattr(result.colors.palette, role))
        assert len(result.colors.dominant_colors) <= 20
        assert len(result.spatial.focal_points) <= 5
        assert len(result.style.aesthetic_tags) <= 8

    def test_deterministic(self):
        img = _radial_gradient()
        first = analyze_image(img)
        second = analyze_image(img)
        assert _without_metadata(first) == _without_metadata(second)

    def test_same_seed_reproduces_glass_score(self):
        rng = np.random.default_rng(0)
        img = (128 + rng.integers(-10, 11, size=(120, 120, 3))).astype(np.uint8)
        config = AnalysisConfig(seed=9)
        a = analyze_image(img, config=config)
        b = analyze_image(img, rng=np.random.default_rng(9))
        assert a.effects.glassmorphism_score == b.effects.glassmorphism_score


class TestKnownImages:

    def test_solid_blue(self):
        result = analyze_image(_solid_image(51, 102, 153))
        assert result.colors.dominant_colors[0].hex == "#3060a0"
        assert result.colors.temperature == Temperature.COOL
        assert result.colors.contrast_ratio == pytest.approx(1.0)
        assert result.spatial.whitespace_percentage == 0.0
        assert result.geometry.edge_density == 0.0
        assert not result.effects.gradients.detected
        assert result.style.industry == Industry.GENERAL
        assert result.metadata.width == 100
        assert result.metadata.aspect_ratio == pytest.approx(1.0)

    def test_checkerboard(self):
        result = analyze_image(_checkerboard())
        assert result.colors.contrast == ContrastLevel.HIGH
        assert result.colors.contrast_ratio == pytest.approx(21.0)
        assert result.geometry.edge_density > 0

    def test_grayscale_page(self):
        img = _solid_image(255, 255, 255)
        img[20:30] = 0
        img[60:70] = 0
        result = analyze_image(img)
        assert result.colors.temperature == Temperature.WARM
        assert result.colors.temperature_score == pytest.approx(50.0)
        assert "Warm" in result.style.aesthetic_tags

    def test_radial_gradient(self):
        result = analyze_image(_radial_gradient())
        gradients = result.effects.gradients
        assert gradients.detected
        assert len(gradients.directions) >= 1
        assert gradients.types == (GradientType.LINEAR,)

    def test_transparent_uses_fallback_palette(self):
        result = analyze_image(np.zeros((10, 10, 4), dtype=np.uint8))
        assert result.colors.dominant_colors == ()
        assert result.colors.palette.primary == "#6366f1"
        assert result.colors.palette.secondary == "#a855f7"
        assert result.colors.palette.accent == "#10b981"

    def test_zero_area_bitmap(self):
        result = analyze_image(Bitmap(width=0, height=0, pixels=b""))
        assert result.metadata.width == 0
        assert result.metadata.aspect_ratio == 0.0
        assert result.colors.dominant_colors == ()


class TestScaling:

    def test_large_array_is_downscaled_for_analysis(self):
        img = _card_on_white()
        result = analyze_image(img)
        assert (result.metadata.width, result.metadata.height) == (1600, 1200)
        assert result.metadata.aspect_ratio == pytest.approx(4 / 3)

    def test_downscaled_matches_full_resolution(self):
        img = _card_on_white()
        small = analyze_image(img)
        # Full resolution, sampled at a matching color stride
        full = analyze_image(Bitmap.from_array(img), config=AnalysisConfig(color_stride=16))

        assert small.spatial.density == full.spatial.density == Density.SPACIOUS
        assert small.geometry.corner_style == full.geometry.corner_style == CornerStyle.ROUNDED
        top_small = [c.hex for c in small.colors.dominant_colors[:2]]
        top_full = [c.hex for c in full.colors.dominant_colors[:2]]
        assert top_small == top_full == ["#ffffff", "#3060d0"]
        assert full.metadata.width == 1600

    def test_original_size_override(self):
        bitmap = Bitmap.from_array(_solid_image(255, 255, 255, 50, 100))
        result = analyze_image(bitmap, original_size=(400, 200))
        assert (result.metadata.width, result.metadata.height) == (400, 200)
        assert result.metadata.aspect_ratio == pytest.approx(2.0)


class TestSerialization:

    def test_json_roundtrip(self):
        result = analyze_image(_radial_gradient())
        recovered = ImageAnalysisResult.from_json(result.to_json())
        assert recovered == result

    def test_missing_version_defaults(self):
        d = analyze_image(_solid_image(51, 102, 153)).to_dict()
        d.pop("version")
        assert ImageAnalysisResult.from_dict(d).version == SCHEMA_VERSION

    def test_version_is_carried(self):
        d = analyze_image(_solid_image(51, 102, 153)).to_dict()
        d["version"] = "0.9"
        assert ImageAnalysisResult.from_dict(d).version == "0.9"

    def test_wire_format(self):
        d = json.loads(analyze_image(_solid_image(51, 102, 153)).to_json())
        assert set(d) == {
            "colors", "spatial", "geometry", "effects", "style", "metadata", "version",
        }
        assert d["version"] == SCHEMA_VERSION
        assert "dominantColors" in d["colors"]
        assert "whitespacePercentage" in d["spatial"]
        assert set(d["geometry"]["estimatedRadius"]) == {"min", "max", "average"}
        assert "hasGlassmorphism" in d["effects"]
        assert "aestheticTags" in d["style"]
        assert set(d["metadata"]) == {
            "width", "height", "aspectRatio", "analyzedAt", "processingTime",
        }
        assert d["metadata"]["processingTime"] >= 0
