"""
Crop-related models.

This module contains models for crop configuration and results:
- Output naming
- Per-call crop configuration
- API request/response payloads
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autocrop.common.constants import CropConstants, OutputConstants
from autocrop.common.enums import CropMode, ImageRole, NameType


class FileName(BaseModel):
    """Naming scheme for one image role"""

    name_type: NameType = Field(default=NameType.ORIGINAL, description="How the name is derived")
    name: str = Field(
        default=OutputConstants.DEFAULT_CUSTOM_NAME, description="Custom name (Custom only)"
    )


class CropConfig(BaseModel):
    """Configuration passed to the crop engine."""

    model_config = ConfigDict(extra="forbid")

    leniency: float = Field(
        default=CropConstants.DEFAULT_LENIENCY,
        ge=CropConstants.MIN_LENIENCY,
        lt=CropConstants.MAX_LENIENCY,
        description="Tolerance percentage; 0 saves any difference",
    )
    crop_mode: CropMode = Field(default=CropMode.EXACT, description="Crop strategy")
    resize_output: bool = Field(
        default=False, description="Crop comparison images down to the bounding box"
    )
    output_path: Path = Field(
        default=Path(OutputConstants.DEFAULT_OUTPUT_PATH), description="Output directory"
    )
    bg_name: FileName = Field(default_factory=FileName, description="Background naming")
    file_name: FileName = Field(default_factory=FileName, description="Comparison naming")


class BoundingBoxInfo(BaseModel):
    """Bounding box as reported to callers"""

    empty: bool
    min_x: int
    min_y: int
    max_x: int
    max_y: int
    width: int
    height: int


class CropOutput(BaseModel):
    """A file written by the crop engine"""

    index: int
    role: ImageRole
    stem: str
    path: str
    width: int
    height: int


class CropRequest(BaseModel):
    """Crop request: input files plus optional overrides of the configured defaults"""

    model_config = ConfigDict(extra="forbid")

    input_paths: List[str] = Field(
        ..., min_length=1, description="Input image paths, background first"
    )
    leniency: Optional[float] = Field(
        default=None, ge=CropConstants.MIN_LENIENCY, lt=CropConstants.MAX_LENIENCY
    )
    crop_mode: Optional[CropMode] = None
    resize_output: Optional[bool] = None
    output_path: Optional[str] = None
    bg_name: Optional[FileName] = None
    file_name: Optional[FileName] = None
    validate_names: bool = Field(
        default=True, description="Reject illegal custom file names before cropping"
    )

    @field_validator("input_paths")
    @classmethod
    def validate_paths(cls, v):
        """Reject blank paths."""
        if any(not p.strip() for p in v):
            raise ValueError("Input paths must not be blank")
        return v


class CropResponse(BaseModel):
    """Result of a crop run"""

    success: bool = True
    bounding_box: BoundingBoxInfo
    outputs: List[CropOutput]
    processing_time_ms: int = 0


class FilenameCheckRequest(BaseModel):
    """File name to validate"""

    name: str


class FilenameCheckResponse(BaseModel):
    """File name validation result"""

    name: str
    illegal: bool
