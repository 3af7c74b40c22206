"""
Crop Service - Business logic for crop runs.

This service joins the pieces a caller needs around the crop engine:
configured defaults, name validation, loading and validating the input
files, and reporting what was written.
"""

import logging

from autocrop.common.enums import NameType
from autocrop.config import Settings
from autocrop.core.engine import CropResult, crop
from autocrop.core.image.loader import load_images
from autocrop.core.image.naming import is_illegal_filename
from autocrop.core.utils import timer
from autocrop.exceptions import ConfigurationError
from autocrop.schemas.crop import (
    BoundingBoxInfo,
    CropConfig,
    CropRequest,
    CropResponse,
    FilenameCheckResponse,
)

logger = logging.getLogger(__name__)


class CropService:
    """
    Service for crop operations.

    This service provides high-level crop operations for the API layer.
    """

    def __init__(self, settings: Settings):
        """
        Initialize crop service.

        Args:
            settings: Application settings providing crop defaults
        """
        self.settings = settings

    def build_config(self, request: CropRequest) -> CropConfig:
        """
        Merge request overrides onto the configured defaults.

        Args:
            request: Crop request

        Returns:
            CropConfig for this run

        Raises:
            ConfigurationError: If name validation is requested and a custom name is illegal
        """
        config = self.settings.crop.to_crop_config(
            leniency=request.leniency,
            crop_mode=request.crop_mode,
            resize_output=request.resize_output,
            output_path=request.output_path,
            bg_name=request.bg_name,
            file_name=request.file_name,
        )

        if request.validate_names:
            self.validate_names(config)

        return config

    @staticmethod
    def validate_names(config: CropConfig) -> None:
        """
        Reject illegal custom names.

        Raises:
            ConfigurationError: If a custom name is illegal
        """
        for key, naming in (("bg_name", config.bg_name), ("file_name", config.file_name)):
            if naming.name_type == NameType.CUSTOM and is_illegal_filename(naming.name):
                raise ConfigurationError(key, f"Invalid filename: {naming.name!r}")

    def run(self, request: CropRequest) -> CropResponse:
        """
        Load the requested files and crop them.

        Args:
            request: Crop request

        Returns:
            CropResponse describing the bounding box and written files

        Raises:
            FileNotFoundError: If an input file does not exist
            ConfigurationError: If a custom name is illegal
            InputError: If the batch is invalid
            NamingError: If an output name cannot be derived
            IoError: If an output file cannot be written
        """
        config = self.build_config(request)

        with timer() as t:
            images = load_images(request.input_paths, max_images=self.settings.system.max_images)
            result = crop(images, config)

        logger.info(f"Cropped {len(images)} images in {t['ms']}ms")
        return self.to_response(result, t["ms"])

    @staticmethod
    def to_response(result: CropResult, processing_time_ms: int = 0) -> CropResponse:
        """Convert an engine result to the API response model."""
        box = result.scan_result.bounding_box
        return CropResponse(
            bounding_box=BoundingBoxInfo(
                empty=box.is_empty(),
                min_x=box.min.x,
                min_y=box.min.y,
                max_x=box.max.x,
                max_y=box.max.y,
                width=box.width(),
                height=box.height(),
            ),
            outputs=result.outputs,
            processing_time_ms=processing_time_ms,
        )

    @staticmethod
    def check_filename(name: str) -> FilenameCheckResponse:
        """Check a candidate output file name."""
        return FilenameCheckResponse(name=name, illegal=is_illegal_filename(name))

