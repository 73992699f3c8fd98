"""
Parcel Pydantic schemas.

Defines request and response models for parcel management.
"""

from pydantic import BaseModel, Field
from typing import List

from parcel_tracker.app.models.parcel import (
    MAX_ADDRESS_LENGTH, MAX_NAME_LENGTH, MAX_PRIORITY, MIN_PRIORITY
)


class ParcelCreate(BaseModel):
    """Schema for registering a new parcel."""
    id: int = Field(..., description="Parcel ID")
    sender: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Sender name")
    recipient: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Recipient name")
    address: str = Field(..., min_length=1, max_length=MAX_ADDRESS_LENGTH, description="Delivery address")
    weight: float = Field(..., gt=0, description="Weight in kilograms")
    priority: int = Field(..., ge=MIN_PRIORITY, le=MAX_PRIORITY, description="Delivery priority (1=High, 5=Low)")


class ParcelWeightUpdate(BaseModel):
    """Schema for updating a parcel's weight."""
    weight: float = Field(..., gt=0, description="New weight in kilograms")


class ParcelResponse(BaseModel):
    """Schema for parcel response."""
    id: int
    sender: str
    recipient: str
    address: str
    weight: float
    priority: int

    class Config:
        from_attributes = True


class ParcelListResponse(BaseModel):
    """Schema for a list of parcels."""
    parcels: List[ParcelResponse]
    total: int


class DispatchQueueResponse(BaseModel):
    """Schema returned after loading a parcel for dispatch."""
    parcel: ParcelResponse
    queue_size: int
