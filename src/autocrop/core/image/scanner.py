"""
Difference scanner.

Compares every comparison image against the background and reports:
- the bounding box enclosing all coordinates where any image differs
- optionally, per comparison image, the exact coordinates that differ

The second pass only revisits the inside of the bounding box, so the exact
coordinate sets never hold points outside it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from autocrop.common.base import RectangleRange
from autocrop.core.image.distance import difference_mask

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Outcome of a difference scan"""

    bounding_box: RectangleRange
    # One (N, 2) array of (x, y) rows per comparison image, row-major order.
    # None when exact pixels were not requested.
    differing_pixels: Optional[List[np.ndarray]] = None

    def pixels_for(self, index: int) -> np.ndarray:
        """
        Differing pixels for the image at batch position ``index``.

        Args:
            index: Position in the full batch (1 is the first comparison image)

        Returns:
            (N, 2) array of (x, y) coordinates

        Raises:
            ValueError: If exact pixels were not collected
        """
        if self.differing_pixels is None:
            raise ValueError("Scan was run without exact pixel collection")
        return self.differing_pixels[index - 1]


def find_bounding_box(
    background: np.ndarray, comparisons: Sequence[np.ndarray], threshold: float
) -> RectangleRange:
    """
    First pass: bounding box of every coordinate where any comparison differs.

    Args:
        background: Background image (H, W, 4)
        comparisons: Comparison images, same size as background
        threshold: Normalized distance threshold in [0, 1]

    Returns:
        Bounding box, empty if nothing differs
    """
    bounding_box = RectangleRange()
    if not comparisons:
        return bounding_box

    differs = np.zeros(background.shape[:2], dtype=bool)
    for image in comparisons:
        differs |= difference_mask(background, image, threshold)

    rows = np.flatnonzero(differs.any(axis=1))
    if rows.size == 0:
        return bounding_box

    cols = np.flatnonzero(differs.any(axis=0))
    bounding_box.correct(int(cols[0]), int(rows[0]))
    bounding_box.correct(int(cols[-1]), int(rows[-1]))
    return bounding_box


def find_differing_pixels(
    background: np.ndarray,
    comparisons: Sequence[np.ndarray],
    threshold: float,
    bounding_box: RectangleRange,
) -> List[np.ndarray]:
    """
    Second pass: exact differing coordinates per comparison image.

    Args:
        background: Background image (H, W, 4)
        comparisons: Comparison images, same size as background
        threshold: Normalized distance threshold in [0, 1]
        bounding_box: Result of the first pass

    Returns:
        One (N, 2) int64 array of (x, y) rows per comparison image
    """
    if bounding_box.is_empty():
        return [np.empty((0, 2), dtype=np.int64) for _ in comparisons]

    x0, y0 = bounding_box.min.x, bounding_box.min.y
    x1, y1 = bounding_box.max.x + 1, bounding_box.max.y + 1
    bg_region = background[y0:y1, x0:x1]

    result = []
    for image in comparisons:
        ys, xs = np.nonzero(difference_mask(bg_region, image[y0:y1, x0:x1], threshold))
        result.append(np.column_stack((xs + x0, ys + y0)).astype(np.int64))
    return result


def scan(
    background: np.ndarray,
    comparisons: Sequence[np.ndarray],
    threshold: float,
    exact: bool = False,
) -> ScanResult:
    """
    Run the difference scan.

    Args:
        background: Background image (H, W, 4)
        comparisons: Comparison images, same size as background
        threshold: Normalized distance threshold in [0, 1]
        exact: Also collect the exact differing pixels per image

    Returns:
        ScanResult
    """
    bounding_box = find_bounding_box(background, comparisons, threshold)
    logger.debug(f"Bounding box: {bounding_box.to_dict()}")

    differing_pixels = None
    if exact:
        differing_pixels = find_differing_pixels(background, comparisons, threshold, bounding_box)
        logger.debug(f"Differing pixel counts: {[len(p) for p in differing_pixels]}")

    return ScanResult(bounding_box=bounding_box, differing_pixels=differing_pixels)
