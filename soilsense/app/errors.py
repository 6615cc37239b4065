"""
Exception handlers: map the core error taxonomy onto JSON responses.
Callers only ever see a sanitized message; full detail stays in the log.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from soilsense.core.errors import InternalError, ProviderError, ValidationError

logger = logging.getLogger(__name__)

WEATHER_SERVER_ERROR = "Server error while fetching weather"
GENERIC_SERVER_ERROR = "Internal Server Error"


def _context(request: Request) -> str:
    return f"{request.method} {request.url.path} {dict(request.query_params)}"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s: %s", _context(request), exc.message)
    return JSONResponse(status_code=400, content={"message": exc.message})


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    logger.warning("Weather provider failure on %s: %r %s", _context(request), exc, exc.message)
    if exc.kind == ProviderError.UPSTREAM_STATUS and exc.status_code:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "details": exc.details},
        )
    # transport, logical and configuration failures stay in the log
    return JSONResponse(status_code=500, content={"message": WEATHER_SERVER_ERROR})


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", _context(request), exc_info=exc)
    return JSONResponse(status_code=500, content={"message": GENERIC_SERVER_ERROR})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
