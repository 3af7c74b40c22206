"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
shared by the API, the services and the crop engine.
"""

# Re-export enums for convenience
from autocrop.common.enums import CropMode, ImageRole, NameType

# Crop models
from .crop import (
    BoundingBoxInfo,
    CropConfig,
    CropOutput,
    CropRequest,
    CropResponse,
    FileName,
    FilenameCheckRequest,
    FilenameCheckResponse,
)

# System models
from .system import HealthStatus

__all__ = [
    # Enums
    "CropMode",
    "ImageRole",
    "NameType",
    # Crop models
    "BoundingBoxInfo",
    "CropConfig",
    "CropOutput",
    "CropRequest",
    "CropResponse",
    "FileName",
    "FilenameCheckRequest",
    "FilenameCheckResponse",
    # System models
    "HealthStatus",
]
