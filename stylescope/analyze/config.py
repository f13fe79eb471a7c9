# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""Pipeline-level configuration for the analyzers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable knobs shared across one analysis run."""

    # Longest side (px) after decoding; larger images are downscaled.
    # This is the pipeline's only cost control: there are no timeouts.
    max_dimension: int = 800

    # Color Analyzer samples every Nth pixel in row-major order
    color_stride: int = 4

    # Glassmorphism probes (random 5x5 neighbourhoods)
    glass_samples: int = 50

    # Seed for the glassmorphism sampler; same seed → same probes
    seed: int = 42

    def __post_init__(self) -> None:
        if self.max_dimension < 1:
            raise ValueError(f"max_dimension must be >= 1, got {self.max_dimension}")
        if self.color_stride < 1:
            raise ValueError(f"color_stride must be >= 1, got {self.color_stride}")
        if self.glass_samples < 1:
            raise ValueError(f"glass_samples must be >= 1, got {self.glass_samples}")


DEFAULT_CONFIG = AnalysisConfig()
