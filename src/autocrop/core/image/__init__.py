"""
Image processing utilities - functional architecture.

This package provides the building blocks of the crop engine as pure functions:
- converters: RGBA8 normalization and OpenCV channel order conversions
- distance: Pixel distance metric
- scanner: Bounding box and exact differing pixel scan
- crop: Rectangle and Exact crop strategies
- naming: Output file names and illegal name detection
- encoder: PNG writing
- loader: Decoding and validating input batches

All utilities are re-exported from this module for convenient access.
"""

# Converter functions
from autocrop.core.image.converters import (
    bgr_to_rgba,
    ensure_rgba,
    rgba_to_bgra,
    to_uint8,
    transparent_canvas,
)

# Crop strategies
from autocrop.core.image.crop import apply, crop_exact, crop_rectangle

# Distance functions
from autocrop.core.image.distance import (
    difference_mask,
    distance_map,
    leniency_to_threshold,
    pixel_distance,
)

# Encoder functions
from autocrop.core.image.encoder import encode_png, write_png

# Loader functions
from autocrop.core.image.loader import SourceImage, load_image, load_images, validate_batch

# Naming functions
from autocrop.core.image.naming import is_illegal_filename, output_path, output_stem

# Scanner
from autocrop.core.image.scanner import ScanResult, scan

__all__ = [
    # Converter functions
    "bgr_to_rgba",
    "ensure_rgba",
    "rgba_to_bgra",
    "to_uint8",
    "transparent_canvas",
    # Distance functions
    "pixel_distance",
    "distance_map",
    "difference_mask",
    "leniency_to_threshold",
    # Scanner
    "ScanResult",
    "scan",
    # Crop strategies
    "apply",
    "crop_rectangle",
    "crop_exact",
    # Naming functions
    "output_stem",
    "output_path",
    "is_illegal_filename",
    # Encoder functions
    "encode_png",
    "write_png",
    # Loader functions
    "SourceImage",
    "load_image",
    "load_images",
    "validate_batch",
]
