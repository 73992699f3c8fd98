"""
Reporting API Endpoints.

READ-ONLY summary statistics and the delivery audit trail.
"""

from fastapi import APIRouter, Depends
from parcel_tracker.app.core.dependencies import get_manager
from parcel_tracker.app.schemas.parcel import ParcelResponse, ParcelListResponse
from parcel_tracker.app.schemas.report import ReportSnapshot
from parcel_tracker.app.services.manager import ParcelManager

router = APIRouter(prefix="/reports", tags=["Reports"])
deliveries_router = APIRouter(prefix="/deliveries", tags=["Reports"])


@router.get("/summary", response_model=ReportSnapshot)
async def get_summary_report(manager: ParcelManager = Depends(get_manager)):
    """Totals, average weight, pending parcels by priority and delivery history."""
    return manager.generate_report()


@deliveries_router.get("", response_model=ParcelListResponse)
async def list_deliveries(manager: ParcelManager = Depends(get_manager)):
    """Delivered parcels in delivery order."""
    parcels = manager.list_delivered()
    return ParcelListResponse(
        parcels=[ParcelResponse.model_validate(p) for p in parcels],
        total=len(parcels)
    )
