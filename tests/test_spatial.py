# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""Tests for the Spatial Analyzer: regions, balance, density, grid and focal points."""

import logging

import numpy as np
import pytest

from stylescope.analyze import Bitmap, analyze_spatial
from stylescope.analyze.spatial import classify_balance
from stylescope.schema import Balance, Density, VisualWeight


def _solid_image(r, g, b, height=100, width=100):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _white_with_black(rows=slice(None), cols=slice(None), size=300):
    """White square image with one black rectangle."""
    img = _solid_image(255, 255, 255, size, size)
    img[rows, cols] = 0
    return img


def _analyze(img):
    return analyze_spatial(Bitmap.from_array(img))


class TestBalance:

    def test_left_heavy(self):
        result = _analyze(_white_with_black(cols=slice(0, 100)))
        assert result.visual_weight.left == pytest.approx(100.0)
        assert result.visual_weight.right == pytest.approx(0.0)
        assert result.visual_weight.top == pytest.approx(100.0 / 3)
        assert result.balance == Balance.ASYMMETRIC_LEFT

    def test_right_heavy(self):
        result = _analyze(_white_with_black(cols=slice(200, None)))
        assert result.balance == Balance.ASYMMETRIC_RIGHT

    def test_top_heavy(self):
        result = _analyze(_white_with_black(rows=slice(0, 100)))
        assert result.balance == Balance.ASYMMETRIC_TOP

    def test_bottom_heavy(self):
        result = _analyze(_white_with_black(rows=slice(200, None)))
        assert result.balance == Balance.ASYMMETRIC_BOTTOM

    def test_uniform_color_is_centered(self):
        result = _analyze(_solid_image(51, 102, 153))
        for name in ("top", "bottom", "left", "right", "center"):
            assert getattr(result.visual_weight, name) == pytest.approx(100.0)
        assert result.balance == Balance.CENTERED

    def test_weightless_image_uses_uniform_weights(self):
        result = _analyze(_solid_image(255, 255, 255))
        assert result.visual_weight.center == 50.0
        assert result.balance == Balance.SYMMETRIC


class TestClassifyBalance:

    def _weights(self, **overrides):
        values = dict(top=50.0, bottom=50.0, left=50.0, right=50.0, center=50.0)
        values.update(overrides)
        return VisualWeight(**values)

    def test_centered_needs_heavy_center(self):
        assert classify_balance(self._weights(center=70.0)) == Balance.CENTERED
        assert classify_balance(self._weights(center=60.0)) == Balance.SYMMETRIC

    def test_left(self):
        assert classify_balance(self._weights(left=80.0)) == Balance.ASYMMETRIC_LEFT

    def test_horizontal_checked_before_vertical(self):
        w = self._weights(right=90.0, top=90.0)
        assert classify_balance(w) == Balance.ASYMMETRIC_RIGHT

    def test_dead_zone_falls_through_to_bottom(self):
        # 15 <= |H| <= 20 is neither balanced nor directional
        assert classify_balance(self._weights(left=68.0)) == Balance.ASYMMETRIC_BOTTOM


class TestDensity:

    def test_all_whitespace(self):
        result = _analyze(_solid_image(255, 255, 255))
        assert result.whitespace_percentage == pytest.approx(100.0)
        assert result.density_score == pytest.approx(0.0)
        assert result.density == Density.SPACIOUS

    def test_no_whitespace(self):
        result = _analyze(_solid_image(51, 102, 153))
        assert result.whitespace_percentage == 0.0
        assert result.density == Density.DENSE

    def test_partial_whitespace(self):
        result = _analyze(_white_with_black(cols=slice(0, 100)))
        assert result.whitespace_percentage == pytest.approx(200 / 3)
        assert result.density_score == pytest.approx(100 / 3)
        assert result.density == Density.SPACIOUS

    def test_balanced_bucket(self):
        # Half the image is non-white: density score 50
        result = _analyze(_white_with_black(cols=slice(0, 150)))
        assert result.density_score == pytest.approx(50.0)
        assert result.density == Density.BALANCED


class TestGridDetection:

    def test_uniform_image_has_no_peaks(self):
        grid = _analyze(_solid_image(51, 102, 153)).grid_detection
        assert grid.possible_columns == 1
        assert grid.confidence == 0.0

    def test_consistent_columns_in_noise(self):
        rng = np.random.default_rng(0)
        img = rng.integers(0, 256, size=(200, 200, 3), dtype=np.uint8)
        for x in (0, 50, 100):
            img[:, x] = 128
        grid = _analyze(img).grid_detection
        assert grid.possible_columns == 3
        assert grid.confidence == pytest.approx(45.0)


class TestFocalPoints:

    def test_single_dark_cell(self):
        img = _solid_image(255, 255, 255, 200, 200)
        img[:40, :40] = 0
        points = _analyze(img).focal_points
        assert len(points) == 1
        assert points[0].x == pytest.approx(0.1)
        assert points[0].y == pytest.approx(0.1)
        assert points[0].intensity == pytest.approx(1.0)

    def test_at_most_five_in_scan_order_on_ties(self):
        points = _analyze(_solid_image(51, 102, 153)).focal_points
        assert len(points) == 5
        assert [p.x for p in points] == pytest.approx([0.1, 0.3, 0.5, 0.7, 0.9])
        assert all(p.y == pytest.approx(0.1) for p in points)

    def test_sorted_by_intensity(self):
        img = _solid_image(255, 255, 255, 200, 200)
        img[:40, :40] = 128
        img[160:, 160:] = 0
        points = _analyze(img).focal_points
        assert len(points) == 1
        assert (points[0].x, points[0].y) == pytest.approx((0.9, 0.9))
        img[:40, :40] = 40
        points = _analyze(img).focal_points
        intensities = [p.intensity for p in points]
        assert intensities == sorted(intensities, reverse=True)
        assert len(points) == 2


class TestDegenerate:

    def test_zero_area(self):
        result = analyze_spatial(Bitmap(width=0, height=0, pixels=b""))
        assert result.whitespace_percentage == 0.0
        assert result.visual_weight.top == 50.0
        assert result.grid_detection.possible_columns == 1
        assert result.focal_points == ()

    def test_single_pixel(self):
        result = _analyze(_solid_image(0, 0, 0, 1, 1))
        assert len(result.focal_points) <= 5

    def test_debug_summary_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="stylescope.analyze.spatial"):
            _analyze(_white_with_black(cols=slice(0, 100)))
        assert "whitespace=" in caplog.text
        assert "edges=" in caplog.text
