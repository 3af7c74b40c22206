"""
Crop API Router - Run crops and validate output names
"""

import logging

from fastapi import APIRouter, Depends

from autocrop.api.dependencies import get_crop_service
from autocrop.api.exceptions import safe_endpoint
from autocrop.schemas import CropRequest, CropResponse, FilenameCheckRequest, FilenameCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/crop")
@safe_endpoint
def run_crop(request: CropRequest, crop_service=Depends(get_crop_service)) -> CropResponse:
    """Crop a batch of images; the first path is the background"""
    logger.info(f"Crop requested for {len(request.input_paths)} images")
    return crop_service.run(request)


@router.post("/filename/check")
@safe_endpoint
async def check_filename(
    request: FilenameCheckRequest, crop_service=Depends(get_crop_service)
) -> FilenameCheckResponse:
    """Check whether a custom output name is usable"""
    return crop_service.check_filename(request.name)
