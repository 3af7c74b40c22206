"""
Centralized enums for the Autocrop engine.

This module contains all enumeration types used throughout the system,
providing a single source of truth for enum definitions.
"""

from enum import Enum


# Crop strategy enums
class CropMode(str, Enum):
    """Crop strategies applied to non-background images."""

    RECTANGLE = "rectangle"  # Whole bounding box, masked or physically cropped
    EXACT = "exact"  # Only the differing pixels


# Output naming enums
class NameType(str, Enum):
    """How output file names are derived."""

    ORIGINAL = "original"  # Use the input file's name
    CUSTOM = "custom"  # Use a user supplied name


class ImageRole(str, Enum):
    """Role of an image within a crop batch."""

    BACKGROUND = "background"
    COMPARISON = "comparison"
