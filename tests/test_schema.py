# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""Tests for schema types, validation and wire-format serialization."""

import json

import pytest

from stylescope.schema import (
    Balance,
    ColorInfo,
    CornerStyle,
    Density,
    FocalPoint,
    GeometryAnalysis,
    GradientDirection,
    GradientInfo,
    GradientType,
    GridDetection,
    Industry,
    Era,
    LightnessDistribution,
    Palette,
    Proportions,
    RadiusEstimate,
    ShapeCounts,
    SpatialAnalysis,
    StyleAnalysis,
    VisualWeight,
)


def _style(**overrides):
    values = dict(
        minimalism=70.0,
        complexity=20.0,
        modernness=55.0,
        elegance=71.0,
        boldness=29.0,
        industry=Industry.GENERAL,
        industry_confidence=50.0,
        aesthetic_tags=("Elegant", "Cool"),
        era=Era.MODERN,
    )
    values.update(overrides)
    return StyleAnalysis(**values)


def _spatial(**overrides):
    values = dict(
        density=Density.BALANCED,
        density_score=50.0,
        whitespace_percentage=50.0,
        visual_weight=VisualWeight(top=100.0, bottom=40.0, left=60.0, right=60.0, center=80.0),
        balance=Balance.ASYMMETRIC_TOP,
        grid_detection=GridDetection(possible_columns=3, confidence=45.0),
        focal_points=(FocalPoint(x=0.5, y=0.1, intensity=0.9),),
    )
    values.update(overrides)
    return SpatialAnalysis(**values)


class TestColorInfo:

    def test_valid(self):
        c = ColorInfo(hex="#3060a0", rgb=(48, 96, 160), hsl=(215, 54, 41), percentage=100.0, count=2500)
        assert c.hue == 215
        assert c.saturation == 54
        assert c.lightness == 41

    def test_uppercase_hex_rejected(self):
        with pytest.raises(ValueError, match="hex"):
            ColorInfo(hex="#3060A0", rgb=(48, 96, 160), hsl=(215, 54, 41), percentage=1.0, count=1)

    def test_hue_360_rejected(self):
        with pytest.raises(ValueError, match="Hue"):
            ColorInfo(hex="#ff0000", rgb=(255, 0, 0), hsl=(360, 100, 50), percentage=1.0, count=1)

    def test_saturation_range(self):
        with pytest.raises(ValueError, match="Saturation"):
            ColorInfo(hex="#ff0000", rgb=(255, 0, 0), hsl=(0, 101, 50), percentage=1.0, count=1)

    def test_rgb_range(self):
        with pytest.raises(ValueError, match="RGB"):
            ColorInfo(hex="#ff0000", rgb=(256, 0, 0), hsl=(0, 100, 50), percentage=1.0, count=1)

    def test_nested_wire_format(self):
        c = ColorInfo(hex="#ff0000", rgb=(255, 0, 0), hsl=(0, 100, 50), percentage=25.0, count=4)
        d = c.to_dict()
        assert d["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert d["hsl"] == {"h": 0, "s": 100, "l": 50}
        assert ColorInfo.from_dict(d) == c

    def test_frozen(self):
        c = ColorInfo(hex="#ff0000", rgb=(255, 0, 0), hsl=(0, 100, 50), percentage=25.0, count=4)
        with pytest.raises(AttributeError):
            c.hex = "#00ff00"


class TestPaletteAndShares:

    def test_palette_rejects_short_hex(self):
        with pytest.raises(ValueError, match="accent"):
            Palette(
                primary="#000000", secondary="#111111", accent="#fff",
                background="#ffffff", foreground="#000000",
            )

    def test_proportions_sum(self):
        Proportions(primary=60.0, secondary=30.0, accent=10.0)
        with pytest.raises(ValueError, match="sum to 100"):
            Proportions(primary=60.0, secondary=30.0, accent=20.0)

    def test_proportions_float_slack(self):
        Proportions(primary=100 / 3, secondary=100 / 3, accent=100 / 3)

    def test_lightness_sum(self):
        with pytest.raises(ValueError, match="sum to 100"):
            LightnessDistribution(dark=10.0, mid=10.0, light=10.0)


class TestSpatialTypes:

    def test_grid_columns_bounds(self):
        with pytest.raises(ValueError, match="possible_columns"):
            GridDetection(possible_columns=13, confidence=10.0)
        with pytest.raises(ValueError, match="possible_columns"):
            GridDetection(possible_columns=0, confidence=10.0)

    def test_focal_point_normalized(self):
        with pytest.raises(ValueError, match="x must be"):
            FocalPoint(x=1.5, y=0.5, intensity=0.7)

    def test_focal_intensity_unbounded(self):
        assert FocalPoint(x=0.1, y=0.1, intensity=1.4).intensity == 1.4

    def test_too_many_focal_points(self):
        points = tuple(FocalPoint(x=0.1, y=0.1, intensity=0.7) for _ in range(6))
        with pytest.raises(ValueError, match="At most 5"):
            _spatial(focal_points=points)

    def test_camel_case_keys(self):
        d = _spatial().to_dict()
        assert set(d) == {
            "density", "densityScore", "whitespacePercentage", "visualWeight",
            "balance", "gridDetection", "focalPoints",
        }
        assert d["balance"] == "asymmetric-top"
        assert d["gridDetection"] == {"possibleColumns": 3, "confidence": 45.0}

    def test_roundtrip(self):
        s = _spatial()
        assert SpatialAnalysis.from_dict(s.to_dict()) == s


class TestGeometryTypes:

    def test_radius_around(self):
        r = RadiusEstimate.around(2)
        assert (r.minimum, r.maximum, r.average) == (0, 10, 2)

    def test_radius_must_bracket(self):
        with pytest.raises(ValueError, match="bracket"):
            RadiusEstimate(minimum=10, maximum=20, average=5)

    def test_radius_wire_names(self):
        assert RadiusEstimate.around(12).to_dict() == {"min": 8, "max": 20, "average": 12}

    def test_negative_shapes(self):
        with pytest.raises(ValueError, match="non-negative"):
            ShapeCounts(rectangles=-1, circles=0, organic=0)

    def test_roundtrip(self):
        g = GeometryAnalysis(
            corner_style=CornerStyle.PILL,
            estimated_radius=RadiusEstimate.around(24),
            edge_density=12.5,
            linearity=28.0,
            shapes=ShapeCounts(rectangles=1, circles=3, organic=7),
        )
        d = g.to_dict()
        assert d["cornerStyle"] == "pill"
        assert GeometryAnalysis.from_dict(d) == g


class TestGradientInfo:

    def test_duplicate_directions(self):
        with pytest.raises(ValueError, match="unique"):
            GradientInfo(
                detected=True,
                count=2,
                directions=(GradientDirection.VERTICAL, GradientDirection.VERTICAL),
                types=(GradientType.LINEAR,),
            )

    def test_directions_without_detection(self):
        info = GradientInfo(
            detected=False, count=1, directions=(GradientDirection.DIAGONAL,), types=(),
        )
        assert info.to_dict() == {
            "detected": False, "count": 1, "directions": ["diagonal"], "types": [],
        }


class TestStyleAnalysis:

    def test_score_range(self):
        with pytest.raises(ValueError, match="boldness"):
            _style(boldness=101.0)

    def test_tag_limit(self):
        with pytest.raises(ValueError, match="At most 8"):
            _style(aesthetic_tags=tuple(f"tag{i}" for i in range(9)))

    def test_json_roundtrip(self):
        s = _style()
        d = json.loads(json.dumps(s.to_dict()))
        assert d["industryConfidence"] == 50.0
        assert d["aestheticTags"] == ["Elegant", "Cool"]
        assert StyleAnalysis.from_dict(d) == s
