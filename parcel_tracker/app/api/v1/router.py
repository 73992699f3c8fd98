"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from parcel_tracker.app.api.v1.endpoints import parcels, dispatch, history, reports

router = APIRouter()

# Parcel registry endpoints
router.include_router(parcels.router)

# Loading queue endpoints
router.include_router(dispatch.router)

# Undo endpoints
router.include_router(history.router)

# Reporting endpoints
router.include_router(reports.router)
router.include_router(reports.deliveries_router)
