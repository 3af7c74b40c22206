"""
Core modules for Autocrop
"""

from .engine import CropResult, crop

__all__ = [
    "CropResult",
    "crop",
]
