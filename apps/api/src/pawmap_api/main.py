"""FastAPI application entry point."""

import logging
import sys
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from pawmap_api.config import settings
from pawmap_api.routes import locations_router, projection_router


def setup_logging() -> None:
    """Configure logging for the API process."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PawMap Geo API",
    description="Location-privacy masking and map projection for PawMap",
    version="0.1.0",
)

# CORS middleware - allow app and web-build origins
origins = list(settings.cors_origins)
if settings.frontend_url and settings.frontend_url not in origins:
    origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Batch responses for dense maps get large
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(locations_router)
app.include_router(projection_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "pawmap-api"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised in handler code.

    FastAPI handles request body validation itself via RequestValidationError;
    this catches errors from building response models.
    """
    logger.warning(f"Validation error on {request.method} {request.url}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Data validation failed",
            "errors": exc.errors(include_url=False, include_context=False),
            "error_type": "ValidationError",
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors and return a consistent JSON 500."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url}: {exc}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )
