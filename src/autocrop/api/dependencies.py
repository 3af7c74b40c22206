"""
Shared FastAPI dependencies for Autocrop.
"""

import logging

from fastapi import HTTPException, Request

from autocrop.config import Settings
from autocrop.services.crop_service import CropService

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """
    Get settings from app state.

    Raises:
        HTTPException: If settings are not initialized
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        logger.error("Settings not initialized in app state")
        raise HTTPException(status_code=500, detail="Settings not initialized")
    return settings


def get_crop_service(request: Request) -> CropService:
    """Create a crop service bound to the app settings."""
    return CropService(settings=get_app_settings(request))
