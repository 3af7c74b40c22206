"""
Common package - fundamental types without project dependencies.

This package contains basic types that are used throughout the system:
- Enums (CropMode, NameType, ImageRole)
- Constants (CropConstants, OutputConstants, ...)
- Base models (Point, RectangleRange)

IMPORTANT: This package must NOT import from any other project packages
(schemas, core, services, api) to avoid circular dependencies.
"""

# Export base models
from autocrop.common.base import Point, RectangleRange

# Export all constants
from autocrop.common.constants import (
    APIConstants,
    CropConstants,
    OutputConstants,
    SystemConstants,
)

# Export all enums
from autocrop.common.enums import CropMode, ImageRole, NameType

__all__ = [
    # Enums
    "CropMode",
    "ImageRole",
    "NameType",
    # Constants
    "APIConstants",
    "CropConstants",
    "OutputConstants",
    "SystemConstants",
    # Base models
    "Point",
    "RectangleRange",
]
