"""
Autocrop - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autocrop import __version__
from autocrop.api.exceptions import register_exception_handlers
from autocrop.api.routers import crop, system
from autocrop.common.constants import APIConstants, SystemConstants
from autocrop.config import get_settings

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Autocrop server...")
    logger.info(f"Debug mode: {settings.system.debug}")
    logger.info(f"Default output directory: {settings.crop.output_path}")

    yield

    logger.info("Autocrop server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Autocrop",
    description="Crop a batch of images down to where they differ from a background",
    version=__version__,
    lifespan=lifespan,
)

# State is set at import time so TestClient works without running the lifespan
app.state.settings = settings
app.state.debug = settings.system.debug

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(crop.router, prefix=APIConstants.API_PREFIX, tags=["Crop"])
app.include_router(system.router, prefix=f"{APIConstants.API_PREFIX}/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Autocrop",
        "status": "running",
        "version": __version__,
        "endpoints": {
            "crop": f"{APIConstants.API_PREFIX}/crop",
            "filename": f"{APIConstants.API_PREFIX}/filename/check",
            "system": f"{APIConstants.API_PREFIX}/system",
            "docs": "/docs",
        },
    }


def run() -> None:
    """Run the API server with uvicorn."""
    uvicorn.run(
        "autocrop.main:app",
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.system.log_level.lower(),
    )


if __name__ == "__main__":
    run()
