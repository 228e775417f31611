"""
Global exception handlers that log API errors.
"""
import json
import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.logger import logger


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for FastAPI/Pydantic validation errors (422).
    Missing required fields land here.
    """
    error_details = []
    for error in exc.errors():
        error_details.append({
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "type": error.get("type", "unknown"),
            "message": error.get("msg", "Validation error"),
        })

    logger.error(
        f"[VALIDATION ERROR 422] {request.method} {request.url.path} - "
        f"{json.dumps(error_details, ensure_ascii=False)}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": error_details,
            "message": "Invalid request data",
        }
    )


async def http_exception_handler(request: Request, exc):
    """
    Handler for HTTPExceptions raised by services and routers.
    """
    status_code = exc.status_code
    log_message = f"[HTTP ERROR {status_code}] {request.method} {request.url.path} - Details: {exc.detail}"

    if status_code >= 500:
        logger.error(log_message)
    elif status_code >= 400:
        logger.warning(log_message)

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": str(exc.detail),
            "status_code": status_code
        },
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handler for unhandled exceptions.
    """
    logger.error(
        f"[UNHANDLED EXCEPTION] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {str(exc)}"
    )
    logger.error(f"[UNHANDLED EXCEPTION] Traceback:\n{traceback.format_exc()}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        }
    )
