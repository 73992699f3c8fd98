"""
Custom exceptions and error handlers for consistent error responses.

Provides standardized error codes and global exception handlers.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Any, Dict

logger = logging.getLogger("parcel_tracker.errors")


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ParcelValidationError(AppException):
    """Raised when parcel fields are missing, malformed or out of range."""

    def __init__(self, message: str, field: str = None, error_code: str = "ERR_VALIDATION_001",
                 status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY, details: Dict[str, Any] = None):
        if details is None:
            details = {"field": field} if field else {}
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status_code,
            details=details
        )


class DuplicateParcelError(ParcelValidationError):
    """Raised when a parcel ID is already present among active parcels."""

    def __init__(self, parcel_id: int):
        super().__init__(
            message=f"Parcel with ID {parcel_id} is already active",
            error_code="ERR_CONFLICT_001",
            status_code=status.HTTP_409_CONFLICT,
            details={"field": "id", "id": parcel_id}
        )


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when a parcel ID is not among the active parcels."""

    def __init__(self, parcel_id: int):
        super().__init__(resource="Parcel", resource_id=parcel_id)
        self.parcel_id = parcel_id


class EmptyCollectionError(AppException):
    """Raised when taking an item from an empty queue or stack."""

    def __init__(self, message: str, error_code: str, collection: str):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_409_CONFLICT,
            details={"collection": collection}
        )


class EmptyQueueError(EmptyCollectionError):
    """Raised when dispatching from an empty loading queue."""

    def __init__(self):
        super().__init__(
            message="Loading queue is empty",
            error_code="ERR_EMPTY_001",
            collection="dispatch_queue"
        )


class EmptyHistoryError(EmptyCollectionError):
    """Raised when there is no recorded action to undo."""

    def __init__(self):
        super().__init__(
            message="No recent actions recorded",
            error_code="ERR_EMPTY_002",
            collection="history"
        )


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    # Map status code to error code
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        405: "ERR_METHOD_NOT_ALLOWED",
        409: "ERR_CONFLICT",
        500: "ERR_INTERNAL_SERVER"
    }

    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": exc.detail,
            "details": {}
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "ERR_VALIDATION",
            "message": "Validation error",
            "details": {
                "errors": [
                    {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
                    for error in exc.errors()
                ]
            }
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception: %s", type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "ERR_INTERNAL_SERVER",
            "message": "An internal server error occurred",
            "details": {}
        }
    )
