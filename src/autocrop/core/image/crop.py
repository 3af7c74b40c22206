"""
Crop strategies.

Turns a source image and a scan result into the output raster for that
image. The background (index 0) is always returned unmodified. For the
other images:
- Rectangle: keep the bounding box region, either masking everything else
  to transparent or physically cropping to it
- Exact: keep only the differing pixels on a transparent canvas, optionally
  cropped to the bounding box afterwards

An empty bounding box yields a transparent canvas at the original size in
every mode.
"""

import logging
from typing import Callable, Dict

import numpy as np

from autocrop.common.base import RectangleRange
from autocrop.common.enums import CropMode
from autocrop.core.image.converters import ensure_rgba, transparent_canvas
from autocrop.core.image.scanner import ScanResult

logger = logging.getLogger(__name__)


def crop_to_range(image: np.ndarray, bounding_box: RectangleRange) -> np.ndarray:
    """
    Physically crop image to the bounding box.

    The crop starts at ``min`` and spans ``width() x height()``.

    Args:
        image: RGBA8 image
        bounding_box: Non-empty bounding box

    Returns:
        Cropped copy
    """
    x, y = bounding_box.min.x, bounding_box.min.y
    return image[y : y + bounding_box.height(), x : x + bounding_box.width()].copy()


def mask_to_range(image: np.ndarray, bounding_box: RectangleRange) -> np.ndarray:
    """Copy of image with every pixel outside the bounding box made transparent."""
    height, width = image.shape[:2]
    result = transparent_canvas(width, height)
    x0, y0 = bounding_box.min.x, bounding_box.min.y
    x1, y1 = bounding_box.max.x + 1, bounding_box.max.y + 1
    result[y0:y1, x0:x1] = image[y0:y1, x0:x1]
    return result


def crop_rectangle(
    image: np.ndarray, index: int, scan_result: ScanResult, resize_output: bool
) -> np.ndarray:
    """Rectangle strategy for a comparison image."""
    if resize_output:
        return crop_to_range(image, scan_result.bounding_box)
    return mask_to_range(image, scan_result.bounding_box)


def crop_exact(
    image: np.ndarray, index: int, scan_result: ScanResult, resize_output: bool
) -> np.ndarray:
    """Exact strategy for a comparison image."""
    height, width = image.shape[:2]
    result = transparent_canvas(width, height)

    pixels = scan_result.pixels_for(index)
    if len(pixels):
        xs, ys = pixels[:, 0], pixels[:, 1]
        result[ys, xs] = image[ys, xs]

    if resize_output:
        return crop_to_range(result, scan_result.bounding_box)
    return result


STRATEGIES: Dict[CropMode, Callable[[np.ndarray, int, ScanResult, bool], np.ndarray]] = {
    CropMode.RECTANGLE: crop_rectangle,
    CropMode.EXACT: crop_exact,
}


def apply(
    mode: CropMode,
    image: np.ndarray,
    index: int,
    scan_result: ScanResult,
    resize_output: bool = False,
) -> np.ndarray:
    """
    Produce the output raster for one image of the batch.

    Args:
        mode: Crop strategy
        image: Source image (any layout accepted by ensure_rgba)
        index: Position in the batch, 0 is the background
        scan_result: Result of the difference scan
        resize_output: Physically crop comparison images to the bounding box

    Returns:
        RGBA8 raster
    """
    image = ensure_rgba(image)

    if index == 0:
        return image

    if scan_result.bounding_box.is_empty():
        height, width = image.shape[:2]
        return transparent_canvas(width, height)

    try:
        strategy = STRATEGIES[CropMode(mode)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown crop mode: {mode}")

    return strategy(image, index, scan_result, resize_output)
