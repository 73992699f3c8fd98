"""
Shared dependencies for FastAPI.

This module provides access to the single parcel manager owned by the application.
"""

from fastapi import Request
from parcel_tracker.app.services.manager import ParcelManager


def get_manager(request: Request) -> ParcelManager:
    """
    FastAPI dependency returning the application's parcel manager.

    The manager is created once in the application lifespan and
    stored on ``app.state``.
    """
    return request.app.state.manager
