"""
Crop engine - difference a batch of images against its background and write the crops.

The batch is processed synchronously: scan once, then crop, name and write
each image in order. Writing stops at the first error; files that were
already written stay on disk.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from autocrop.common.enums import CropMode, ImageRole
from autocrop.core.image import crop as crop_strategy
from autocrop.core.image.distance import leniency_to_threshold
from autocrop.core.image.encoder import write_png
from autocrop.core.image.loader import SourceImage
from autocrop.core.image.naming import output_path, output_stem
from autocrop.core.image.scanner import ScanResult, scan
from autocrop.exceptions import EncodingError, InputError, IoError
from autocrop.schemas.crop import CropConfig, CropOutput

logger = logging.getLogger(__name__)


@dataclass
class CropResult:
    """Scan result and the files written for one crop run"""

    scan_result: ScanResult
    outputs: List[CropOutput] = field(default_factory=list)


def crop(images: Sequence[SourceImage], config: CropConfig) -> CropResult:
    """
    Crop a batch of images and write one PNG per image.

    Args:
        images: Decoded images with their source paths, background first.
            All images must share the background's resolution.
        config: Crop configuration

    Returns:
        CropResult with the bounding box and written files

    Raises:
        InputError: If fewer than two images are given
        NamingError: If an output name cannot be derived
        IoError: If an output file cannot be written or encoded
    """
    if len(images) < 2:
        raise InputError("At minimum two images must be selected.", {"count": len(images)})

    logger.info("Starting crop: figuring out range of area to work with")
    background = images[0].image
    comparisons = [source.image for source in images[1:]]
    scan_result = scan(
        background,
        comparisons,
        leniency_to_threshold(config.leniency),
        exact=config.crop_mode == CropMode.EXACT,
    )

    output_dir = Path(config.output_path)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(str(output_dir), str(e)) from e

    result = CropResult(scan_result=scan_result)
    for index, source in enumerate(images):
        role = ImageRole.BACKGROUND if index == 0 else ImageRole.COMPARISON
        if index == 0:
            logger.info("Cropping background image")
        else:
            logger.info(f"Cropping image {index}...")

        raster = crop_strategy.apply(
            config.crop_mode, source.image, index, scan_result, config.resize_output
        )

        stem = output_stem(index, source.path, config.bg_name, config.file_name)
        path = output_path(output_dir, stem)

        if raster.size == 0:
            box = scan_result.bounding_box
            raise EncodingError(
                str(path),
                f"Bounding box {box.min.x},{box.min.y} to {box.max.x},{box.max.y} is "
                f"{box.width()}x{box.height()}; nothing is left to write after resizing",
            )

        logger.info(f"Saving image {index} to {path}")
        write_png(raster, path)

        result.outputs.append(
            CropOutput(
                index=index,
                role=role,
                stem=stem,
                path=str(path),
                width=raster.shape[1],
                height=raster.shape[0],
            )
        )

    logger.info(f"Done: wrote {len(result.outputs)} images to {output_dir}")
    return result
