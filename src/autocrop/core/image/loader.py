"""
Image loading for crop batches.

Decodes source files into RGBA8 rasters and checks that a batch can be
handed to the crop engine: enough images, not too many, all the same
resolution.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

import cv2
import numpy as np

from autocrop.common.constants import CropConstants
from autocrop.core.image.converters import bgr_to_rgba
from autocrop.exceptions import InputError

logger = logging.getLogger(__name__)


@dataclass
class SourceImage:
    """Decoded image together with the path it came from"""

    path: Path
    image: np.ndarray

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]


def load_image(file_path: Union[str, Path]) -> np.ndarray:
    """
    Load an image file as RGBA8.

    Args:
        file_path: Path to image file

    Returns:
        (height, width, 4) uint8 array in RGBA order

    Raises:
        FileNotFoundError: If file does not exist
        InputError: If file cannot be decoded
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Image file not found: {file_path}")

    image = cv2.imread(str(file_path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise InputError(f"Failed to load image from: {file_path}", {"path": str(file_path)})

    try:
        return bgr_to_rgba(image)
    except ValueError as e:
        raise InputError(str(e), {"path": str(file_path)}) from e


def validate_count(count: int, max_images: int = CropConstants.MAX_IMAGES) -> None:
    """
    Check the number of images in a batch.

    Raises:
        InputError: If there are fewer than two images or more than ``max_images``
    """
    if count < CropConstants.MIN_IMAGES:
        raise InputError("At minimum two images must be selected.", {"count": count})

    if count > max_images:
        raise InputError(f"You cannot select more than {max_images} images.", {"count": count})


def validate_batch(
    images: Sequence[SourceImage], max_images: int = CropConstants.MAX_IMAGES
) -> None:
    """
    Check a batch before cropping.

    Raises:
        InputError: If the image count is out of range or the resolutions differ
    """
    validate_count(len(images), max_images)

    width, height = images[0].width, images[0].height
    for source in images[1:]:
        if (source.width, source.height) != (width, height):
            raise InputError(
                "Images must be the same resolution.",
                {
                    "expected": f"{width}x{height}",
                    "actual": f"{source.width}x{source.height}",
                    "path": str(source.path),
                },
            )


def load_images(
    paths: Sequence[Union[str, Path]], max_images: int = CropConstants.MAX_IMAGES
) -> List[SourceImage]:
    """
    Load and validate a crop batch. The first path is the background.

    Args:
        paths: Image file paths
        max_images: Largest accepted batch

    Returns:
        List of SourceImage in input order

    Raises:
        FileNotFoundError: If a file does not exist
        InputError: If a file cannot be decoded or the batch is invalid
    """
    validate_count(len(paths), max_images)

    images = [SourceImage(path=Path(p), image=load_image(p)) for p in paths]
    validate_batch(images, max_images)

    logger.info(f"Loaded {len(images)} images ({images[0].width}x{images[0].height})")
    return images
