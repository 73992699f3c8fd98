"""
Dispatch API Endpoints.

Load active parcels onto the priority queue and dispatch the most urgent one.
"""

from fastapi import APIRouter, Depends, status, Path
from parcel_tracker.app.core.dependencies import get_manager
from parcel_tracker.app.schemas.parcel import (
    DispatchQueueResponse, ParcelResponse, ParcelListResponse
)
from parcel_tracker.app.services.manager import ParcelManager

router = APIRouter(prefix="/dispatch", tags=["Dispatch"])


@router.post("/queue/{parcel_id}", response_model=DispatchQueueResponse, status_code=status.HTTP_201_CREATED)
async def load_for_dispatch(
    parcel_id: int = Path(..., description="Parcel ID"),
    manager: ParcelManager = Depends(get_manager)
):
    """
    Load an active parcel for dispatch.

    The parcel remains in the active list.
    """
    parcel, queue_size = manager.load_for_dispatch(parcel_id)
    return DispatchQueueResponse(
        parcel=ParcelResponse.model_validate(parcel),
        queue_size=queue_size
    )


@router.get("/queue", response_model=ParcelListResponse)
async def list_dispatch_queue(manager: ParcelManager = Depends(get_manager)):
    """List loaded parcels in dispatch order."""
    parcels = manager.list_queue()
    return ParcelListResponse(
        parcels=[ParcelResponse.model_validate(p) for p in parcels],
        total=len(parcels)
    )


@router.post("/next", response_model=ParcelResponse)
async def dispatch_next(manager: ParcelManager = Depends(get_manager)):
    """Dispatch the highest priority loaded parcel."""
    return ParcelResponse.model_validate(manager.dispatch_next())
