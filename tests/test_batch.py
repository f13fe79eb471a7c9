# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""Tests for batch analysis and per-image error capture."""

import logging

import numpy as np
import pytest

from stylescope import analyze_batch
from stylescope.analyze import AnalysisConfig, BatchItem, Bitmap


def _solid_image(r, g, b, height=40, width=40):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


class TestBatchItem:

    def test_ok(self):
        assert BatchItem(source="a.png").ok
        assert not BatchItem(source="a.png", error="ValueError: bad").ok


class TestAnalyzeBatchInline:

    def test_order_preserved(self):
        sources = [_solid_image(255, 0, 0), _solid_image(0, 0, 255), _solid_image(0, 255, 0)]
        items = analyze_batch(sources, max_workers=1)
        assert [item.ok for item in items] == [True, True, True]
        hexes = [item.result.colors.dominant_colors[0].hex for item in items]
        assert hexes == ["#ff0000", "#0000ff", "#00ff00"]
        assert items[1].source is sources[1]

    def test_failure_is_recorded(self, tmp_path, caplog):
        broken = tmp_path / "broken.png"
        broken.write_bytes(b"not an image")
        sources = [_solid_image(0, 0, 0), broken, 123]

        with caplog.at_level(logging.WARNING, logger="stylescope.analyze.batch"):
            items = analyze_batch(sources, max_workers=1)

        assert items[0].ok
        assert items[0].error is None
        assert items[1].result is None
        assert items[1].error.startswith("ValueError: Could not decode")
        assert items[2].error.startswith("TypeError")
        assert "broken.png" in caplog.text
        assert caplog.text.count("Analysis failed") == 2

    def test_missing_file_is_recorded(self, tmp_path):
        items = analyze_batch([tmp_path / "missing.png"])
        assert items[0].error.startswith("FileNotFoundError")

    def test_config_applies_to_every_item(self):
        config = AnalysisConfig(max_dimension=20)
        items = analyze_batch([_solid_image(9, 9, 9, 40, 80)] * 2, max_workers=1, config=config)
        for item in items:
            assert (item.result.metadata.width, item.result.metadata.height) == (80, 40)

    def test_bitmap_sources(self):
        bitmap = Bitmap.from_array(_solid_image(255, 255, 255))
        items = analyze_batch([bitmap], max_workers=1)
        assert items[0].ok

    def test_empty(self):
        assert analyze_batch([]) == []

    def test_invalid_workers(self):
        with pytest.raises(ValueError, match="max_workers"):
            analyze_batch([_solid_image(0, 0, 0)], max_workers=0)


class TestAnalyzeBatchProcesses:

    def test_matches_inline(self):
        sources = [_solid_image(255, 0, 0), _solid_image(0, 0, 255)]
        pooled = analyze_batch(sources, max_workers=2)
        inline = analyze_batch(sources, max_workers=1)
        assert [item.ok for item in pooled] == [True, True]
        for a, b in zip(pooled, inline):
            assert a.result.colors == b.result.colors
            assert a.result.style == b.result.style

    def test_failure_crosses_process_boundary(self):
        items = analyze_batch([_solid_image(0, 0, 0), np.zeros((4, 4), dtype=np.uint8)], max_workers=2)
        assert items[0].ok
        assert items[1].error.startswith("ValueError")
