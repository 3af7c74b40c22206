"""
System API Router - Health and configuration
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends

from autocrop import __version__
from autocrop.api.dependencies import get_app_settings
from autocrop.api.exceptions import safe_endpoint
from autocrop.schemas import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/config")
@safe_endpoint
async def get_config(settings=Depends(get_app_settings)) -> dict:
    """Get current configuration"""
    return settings.to_dict()


@router.get("/health")
async def health_check() -> HealthStatus:
    """Simple health check"""
    return HealthStatus(
        status="healthy", version=__version__, timestamp=datetime.now().isoformat()
    )
