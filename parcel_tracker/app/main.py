"""
FastAPI Application Entry Point.

This is the main application file for the Parcel Tracker.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from parcel_tracker.app.core.config import settings
from parcel_tracker.app.api.v1.router import router as api_v1_router
from parcel_tracker.app.core.observability import ObservabilityMiddleware, configure_logging
from parcel_tracker.app.services.manager import ParcelManager
from parcel_tracker.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Configures logging.
    2. Creates the single in-memory parcel manager.
    """
    configure_logging(settings.log_level)
    app.state.manager = ParcelManager(allow_duplicate_ids=settings.allow_duplicate_ids)
    yield
    # State is in-memory only; nothing to flush on shutdown


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="In-memory parcel tracking with priority dispatch and undo",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
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
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API documentation links
    """
    return {
        "message": "Welcome to Parcel Tracker API",
        "docs": "/docs",
        "health": "/health",
    }
