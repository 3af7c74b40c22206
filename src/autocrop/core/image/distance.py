"""
Pixel distance metric.

Scores how far apart two RGBA pixels are on a 0-1.0 scale: the squared
difference of the R, G and B channels summed and divided by 3 * 255^2.
Alpha does not participate.
"""

from typing import Sequence

import numpy as np

from autocrop.common.constants import CropConstants


def pixel_distance(px1: Sequence[int], px2: Sequence[int]) -> float:
    """
    Distance between two pixels.

    Args:
        px1: First pixel (R, G, B[, A])
        px2: Second pixel (R, G, B[, A])

    Returns:
        Value in [0, 1], 0 for identical colors
    """
    total = 0
    for channel in range(3):
        delta = int(px1[channel]) - int(px2[channel])
        total += delta * delta
    return total / CropConstants.DISTANCE_NORMALIZER


def distance_map(image1: np.ndarray, image2: np.ndarray) -> np.ndarray:
    """
    Per-pixel distance between two equally sized RGBA images.

    Args:
        image1: First image (H, W, 4)
        image2: Second image (H, W, 4)

    Returns:
        Float64 array (H, W) with values in [0, 1]
    """
    # int32 holds 3 * 255^2 without overflow
    delta = image1[:, :, :3].astype(np.int32) - image2[:, :, :3].astype(np.int32)
    return np.sum(delta * delta, axis=2) / CropConstants.DISTANCE_NORMALIZER


def difference_mask(image1: np.ndarray, image2: np.ndarray, threshold: float) -> np.ndarray:
    """Boolean (H, W) mask of pixels whose distance is strictly above threshold."""
    return distance_map(image1, image2) > threshold


def leniency_to_threshold(leniency: float) -> float:
    """Convert a leniency percentage to a normalized distance threshold."""
    return float(leniency) / 100.0
