"""
PNG encoder.

Writes RGBA8 rasters to disk using OpenCV with a fixed configuration:
light zlib compression and the run-length strategy, which keeps saving
fast while still shrinking the large transparent areas crops produce.
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from autocrop.common.constants import OutputConstants
from autocrop.core.image.converters import rgba_to_bgra
from autocrop.exceptions import EncodingError, IoError

logger = logging.getLogger(__name__)

PNG_PARAMS = [
    cv2.IMWRITE_PNG_COMPRESSION,
    OutputConstants.PNG_COMPRESSION,
    cv2.IMWRITE_PNG_STRATEGY,
    cv2.IMWRITE_PNG_STRATEGY_RLE,
]


def encode_png(image: np.ndarray) -> bytes:
    """
    Encode an RGBA8 raster to PNG bytes.

    Args:
        image: (height, width, 4) uint8 array in RGBA order

    Returns:
        PNG file content

    Raises:
        EncodingError: If the raster is not RGBA8, has zero area, or encoding fails
    """
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[2] != 4:
        raise EncodingError("<memory>", f"Expected RGBA8 raster, got {image.dtype} {image.shape}")

    height, width = image.shape[:2]
    if width == 0 or height == 0:
        raise EncodingError("<memory>", f"Cannot encode zero-area image ({width}x{height})")

    try:
        success, buffer = cv2.imencode(".png", rgba_to_bgra(image), PNG_PARAMS)
    except cv2.error as e:
        raise EncodingError("<memory>", str(e)) from e

    if not success:
        raise EncodingError("<memory>", "PNG encoder reported failure")

    return buffer.tobytes()


def write_png(image: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Encode and write an RGBA8 raster to ``path``, replacing any existing file.

    Args:
        image: (height, width, 4) uint8 array in RGBA order
        path: Destination file

    Returns:
        The written path

    Raises:
        EncodingError: If encoding fails
        IoError: If the file cannot be written
    """
    path = Path(path)

    try:
        data = encode_png(image)
    except EncodingError as e:
        raise EncodingError(str(path), e.details["reason"]) from e

    try:
        path.write_bytes(data)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise IoError(str(path), str(e)) from e

    logger.debug(f"Wrote {path} ({image.shape[1]}x{image.shape[0]}, {len(data)} bytes)")
    return path
