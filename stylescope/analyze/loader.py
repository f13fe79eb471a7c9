# Copyright (c) 2026 Stylescope
# SPDX-License-Identifier: MIT

"""
Decode and downscale images into RGBA bitmaps.

Applies ICC profile conversion to sRGB when a file or PIL image carries
an embedded color profile, so measured colors match what color pickers show.
Everything here runs before the timed analysis pipeline.
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms, UnidentifiedImageError

from stylescope.analyze.bitmap import Bitmap

logger = logging.getLogger(__name__)


ImageSource = Union[str, Path, Image.Image, NDArray[np.uint8]]


@dataclass(frozen=True, slots=True)
class LoadedImage:
    """A decoded bitmap plus the size of the source before downscaling."""
    bitmap: Bitmap
    original_width: int
    original_height: int


def load_bitmap(source: ImageSource, *, max_dimension: int = 800) -> LoadedImage:
    """
    Decode an image source and cap its longest side.

    Args:
        source: File path, PIL image, or (H, W, 3|4) uint8 array
        max_dimension: Longest side after downscaling (px)

    Returns:
        LoadedImage with the (possibly downscaled) bitmap

    Raises:
        TypeError: If the source type is unsupported
        ValueError: If the file cannot be decoded or the array is malformed
    """
    if max_dimension < 1:
        raise ValueError(f"max_dimension must be >= 1, got {max_dimension}")

    if isinstance(source, (str, Path)):
        img = _open_image(source)
    elif isinstance(source, Image.Image):
        img = _to_srgb_rgba(source, f"{source.mode} {source.width}x{source.height} image")
    elif isinstance(source, np.ndarray):
        bitmap = Bitmap.from_array(source)
        if max(bitmap.width, bitmap.height) <= max_dimension:
            return LoadedImage(bitmap, bitmap.width, bitmap.height)
        img = Image.fromarray(bitmap.to_array())
    else:
        raise TypeError(
            f"Expected file path, PIL image or numpy array, got {type(source)}"
        )

    original_width, original_height = img.size
    img = _downscale(img, max_dimension)

    pixels = np.asarray(img, dtype=np.uint8)
    logger.debug(
        "Loaded %dx%d image as %dx%d bitmap",
        original_width, original_height, img.width, img.height,
    )
    return LoadedImage(
        bitmap=Bitmap.from_array(pixels),
        original_width=original_width,
        original_height=original_height,
    )


def _open_image(path: Union[str, Path]) -> Image.Image:
    """Decode a file to RGBA, converting embedded ICC profiles to sRGB."""
    try:
        img = Image.open(path)
        img.load()
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not decode image {path}: {e}") from e

    return _to_srgb_rgba(img, path)


def _to_srgb_rgba(img: Image.Image, label: object) -> Image.Image:
    """Convert to RGBA, mapping an embedded ICC profile to sRGB when present."""
    icc_profile = img.info.get("icc_profile")
    img = img.convert("RGBA")
    if not icc_profile:
        return img

    try:
        embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
        srgb_profile = ImageCms.createProfile("sRGB")

        # Color-manage RGB only; alpha is carried over untouched
        alpha = img.getchannel("A")
        rgb = ImageCms.profileToProfile(
            img.convert("RGB"), embedded_profile, srgb_profile, outputMode="RGB"
        )
        rgb.putalpha(alpha)
        return rgb
    except (ImageCms.PyCMSError, OSError) as e:
        logger.warning("ICC profile conversion failed for %s, using raw RGB: %s", label, e)
        return img


def _downscale(img: Image.Image, max_dimension: int) -> Image.Image:
    """Lanczos-resize so max(w, h) <= max_dimension, keeping aspect ratio."""
    width, height = img.size
    longest = max(width, height)
    if longest <= max_dimension:
        return img

    scale = max_dimension / longest
    new_width = max(1, math.floor(width * scale))
    new_height = max(1, math.floor(height * scale))
    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)
