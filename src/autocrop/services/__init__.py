"""
Services package - Business logic layer.
"""

from .crop_service import CropService

__all__ = ["CropService"]
