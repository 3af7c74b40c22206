"""
Error handlers for the Autocrop API.
Provides consistent error handling across all endpoints.
"""

import asyncio
import logging
import traceback
from functools import wraps

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from autocrop.exceptions import AutocropException

logger = logging.getLogger(__name__)


# Exception handlers for FastAPI
async def autocrop_exception_handler(request: Request, exc: AutocropException) -> JSONResponse:
    """
    Handler for Autocrop exceptions.

    Args:
        request: FastAPI request
        exc: AutocropException instance

    Returns:
        JSON response with error details
    """
    logger.error(f"{exc.__class__.__name__}: {exc.message}", extra={"details": exc.details})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details, "type": exc.__class__.__name__},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handler for request validation errors.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSON response with validation error details
    """
    errors = []
    for error in exc.errors():
        errors.append(
            {
                "field": ".".join(str(loc) for loc in error["loc"][1:]),
                "message": error["msg"],
                "type": error["type"],
            }
        )

    logger.warning(f"Validation error: {errors}")

    return JSONResponse(
        status_code=422,
        content={"error": "Validation failed", "details": errors, "type": "ValidationError"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler for unexpected exceptions.

    Args:
        request: FastAPI request
        exc: Any exception

    Returns:
        JSON response with generic error message
    """
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    debug_mode = getattr(request.app.state, "debug", False)

    if debug_mode:
        # Debug mode exposes stack traces
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "details": {
                    "exception": str(exc),
                    "type": exc.__class__.__name__,
                    "traceback": traceback.format_exc(),
                },
                "type": "InternalError",
            },
        )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": {}, "type": "InternalError"},
    )


# Exception mapping for safe_endpoint decorator
# Maps exception types to (status_code, error_message, log_level, detail_builder)
EXCEPTION_MAPPING = {
    ValidationError: (400, "Validation failed", "warning", lambda e: {"details": e.errors()}),
    ValueError: (400, "Invalid value", "error", lambda e: {"details": str(e)}),
    FileNotFoundError: (404, "File not found", "error", lambda e: {"details": str(e)}),
    PermissionError: (403, "Permission denied", "error", lambda e: {"details": str(e)}),
}


def _translate(func_name: str, e: Exception) -> HTTPException:
    exception_type = type(e)

    if exception_type in EXCEPTION_MAPPING:
        status_code, error_msg, log_level, detail_builder = EXCEPTION_MAPPING[exception_type]

        log_message = f"{exception_type.__name__} in {func_name}: {e}"
        if log_level == "warning":
            logger.warning(log_message)
        else:
            logger.error(log_message)

        detail = {"error": error_msg}
        detail.update(detail_builder(e))
        return HTTPException(status_code=status_code, detail=detail)

    logger.error(f"Unexpected error in {func_name}: {e}", exc_info=True)
    return HTTPException(
        status_code=500, detail={"error": "Internal server error", "details": str(e)}
    )


# Decorator for safe endpoint execution
def safe_endpoint(func):
    """
    Decorator to wrap endpoint functions with error handling.

    Autocrop and HTTP exceptions pass through to their handlers; common
    builtin exceptions are translated using EXCEPTION_MAPPING. Sync endpoints
    stay sync so FastAPI keeps running them in its threadpool.
    """
    if asyncio.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (AutocropException, HTTPException):
                raise
            except Exception as e:
                raise _translate(func.__name__, e) from e

        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (AutocropException, HTTPException):
            raise
        except Exception as e:
            raise _translate(func.__name__, e) from e

    return wrapper


# Helper function to register all exception handlers
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AutocropException, autocrop_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
