# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Bitmap: the single shared input of every analyzer.

A bitmap is a decoded image as a row-major RGBA byte buffer:
``pixels[4 * (y * width + x) + c]`` for channel c in (R, G, B, A).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Bitmap:
    """
    Decoded RGBA image.

    Zero-area bitmaps are allowed; analyzers return their fallback values
    for them.

    Attributes:
        width: Width in pixels (>= 0)
        height: Height in pixels (>= 0)
        pixels: RGBA bytes, length width * height * 4
    """
    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        """Validate dimensions against the buffer length."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Bitmap dimensions must be non-negative, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"Bitmap {self.width}x{self.height} needs {expected} bytes, "
                f"got {len(self.pixels)}"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def to_array(self) -> NDArray[np.uint8]:
        """
        View the buffer as an (H, W, 4) uint8 array.

        The array is read-only; it shares memory with ``pixels``.
        """
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(
            self.height, self.width, 4
        )

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> Bitmap:
        """
        Build a bitmap from an (H, W, 4) or (H, W, 3) uint8 array.

        Three-channel input is treated as fully opaque.
        """
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {array.shape}"
            )
        if array.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {array.dtype}")

        height, width = array.shape[:2]
        if array.shape[2] == 3:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            array = np.concatenate([array, alpha], axis=2)

        return cls(
            width=int(width),
            height=int(height),
            pixels=np.ascontiguousarray(array).tobytes(),
        )
