"""
FastAPI Application Entry Point.

This is the main application file for the Parcel Tracker.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from parceltrack.app.core.config import settings
from parceltrack.app.api.v1.router import router as api_v1_router
from parceltrack.app.core.observability import ObservabilityMiddleware, configure_logging
from parceltrack.app.services.registry import reset_registry
from parceltrack.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

logger = logging.getLogger("parceltrack")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Configures logging.
    2. Starts from an empty registry, loading sample data when enabled.
    """
    configure_logging(settings.log_level)
    registry = reset_registry()
    if settings.load_sample_data:
        registry.bootstrap_sample_data()
    logger.info("%s started (api %s)", settings.app_name, settings.api_version)
    yield
    logger.info("%s stopped", settings.app_name)


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Parcel lifecycle and shipment tracking",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


# Include API v1 router
app.include_router(api_v1_router, prefix=f"/{settings.api_version}")


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Welcome to the Parcel Tracker API",
        "docs": "/docs",
        "health": "/health",
    }
