"""
Parcel Management API Endpoints.

Register, inspect, re-weigh and deliver active parcels.
"""

from fastapi import APIRouter, Depends, status, Path
from parcel_tracker.app.core.dependencies import get_manager
from parcel_tracker.app.schemas.parcel import (
    ParcelCreate, ParcelWeightUpdate, ParcelResponse, ParcelListResponse
)
from parcel_tracker.app.services.manager import ParcelManager

router = APIRouter(prefix="/parcels", tags=["Parcels"])


@router.post("", response_model=ParcelResponse, status_code=status.HTTP_201_CREATED)
async def register_parcel(
    parcel_data: ParcelCreate,
    manager: ParcelManager = Depends(get_manager)
):
    """
    Register a new parcel.

    Validates:
    - Priority is between 1 and 5
    - Weight is positive
    - ID is not already active
    """
    parcel_id = manager.register_parcel(
        parcel_id=parcel_data.id,
        sender=parcel_data.sender,
        recipient=parcel_data.recipient,
        address=parcel_data.address,
        weight=parcel_data.weight,
        priority=parcel_data.priority
    )
    return ParcelResponse.model_validate(manager.get_parcel(parcel_id))


@router.get("", response_model=ParcelListResponse)
async def list_active_parcels(manager: ParcelManager = Depends(get_manager)):
    """List active parcels in registration order."""
    parcels = manager.list_active()
    return ParcelListResponse(
        parcels=[ParcelResponse.model_validate(p) for p in parcels],
        total=len(parcels)
    )


@router.get("/{parcel_id}", response_model=ParcelResponse)
async def get_parcel(
    parcel_id: int = Path(..., description="Parcel ID"),
    manager: ParcelManager = Depends(get_manager)
):
    return ParcelResponse.model_validate(manager.get_parcel(parcel_id))


@router.patch("/{parcel_id}/weight", response_model=ParcelResponse)
async def update_parcel_weight(
    parcel_data: ParcelWeightUpdate,
    parcel_id: int = Path(..., description="Parcel ID"),
    manager: ParcelManager = Depends(get_manager)
):
    """
    Update the weight of an active parcel.

    The previous weight is recorded and can be restored with undo.
    """
    parcel = manager.update_parcel_weight(parcel_id, parcel_data.weight)
    return ParcelResponse.model_validate(parcel)


@router.post("/{parcel_id}/deliver", response_model=ParcelResponse)
async def complete_delivery(
    parcel_id: int = Path(..., description="Parcel ID"),
    manager: ParcelManager = Depends(get_manager)
):
    """
    Mark a parcel delivered.

    Removes it from the active list and appends it to the delivery ledger.
    """
    parcel = manager.complete_delivery(parcel_id)
    return ParcelResponse.model_validate(parcel)
