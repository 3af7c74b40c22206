"""
Image format conversion utilities.

Every raster leaving this module is RGBA8: a (height, width, 4) uint8 array
in R, G, B, A channel order. OpenCV decodes and encodes in BGR(A) order, so
the conversions at the file boundary live here as well:
- Bit depth normalization (16-bit to 8-bit)
- Channel layout normalization with alpha synthesis
- OpenCV BGR(A) <-> RGBA conversions
"""

import logging

import cv2
import numpy as np

from autocrop.common.constants import CropConstants

logger = logging.getLogger(__name__)


def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Convert image to 8 bits per channel.

    Args:
        image: Input image (uint8 or uint16)

    Returns:
        uint8 image

    Raises:
        ValueError: If the dtype is not supported
    """
    if image.dtype == np.uint8:
        return image
    if image.dtype == np.uint16:
        return (image >> 8).astype(np.uint8)
    raise ValueError(f"Unsupported image dtype: {image.dtype}")


def ensure_rgba(image: np.ndarray) -> np.ndarray:
    """
    Ensure image is RGBA8, synthesizing an opaque alpha channel if needed.

    Args:
        image: Input image in RGB channel order (grayscale, RGB or RGBA)

    Returns:
        Image as (height, width, 4) uint8 array
    """
    image = to_uint8(image)

    if image.ndim == 3 and image.shape[2] == 1:
        image = image[:, :, 0]

    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    if image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_RGB2RGBA)
    if image.shape[2] == 4:
        return image.copy()

    raise ValueError(f"Unsupported channel count: {image.shape[2]}")


def bgr_to_rgba(image: np.ndarray) -> np.ndarray:
    """
    Convert an OpenCV decoded image (grayscale, BGR or BGRA) to RGBA8.

    Args:
        image: Image as returned by cv2.imread with IMREAD_UNCHANGED

    Returns:
        Image as (height, width, 4) uint8 array
    """
    image = to_uint8(image)

    if image.ndim == 3 and image.shape[2] == 1:
        image = image[:, :, 0]

    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    if image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)

    raise ValueError(f"Unsupported channel count: {image.shape[2]}")


def rgba_to_bgra(image: np.ndarray) -> np.ndarray:
    """Convert an RGBA8 raster to OpenCV's BGRA order."""
    return cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)


def transparent_canvas(width: int, height: int) -> np.ndarray:
    """Create a fully transparent RGBA8 canvas."""
    return np.full((height, width, 4), CropConstants.TRANSPARENT, dtype=np.uint8)
