"""
History Pydantic schemas.
"""

from pydantic import BaseModel
from typing import List

from parcel_tracker.app.models.history import HistoryEntry
from parcel_tracker.app.models.history_enums import HistoryAction
from parcel_tracker.app.schemas.parcel import ParcelResponse


class HistoryEntryResponse(BaseModel):
    """A recorded action and the parcel snapshot it restores."""
    action: HistoryAction
    parcel: ParcelResponse

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(action=entry.action, parcel=ParcelResponse.model_validate(entry.parcel))


class HistoryListResponse(BaseModel):
    entries: List[HistoryEntryResponse]
    total: int


class UndoResponse(BaseModel):
    """Schema for undo result."""
    undone: HistoryEntryResponse
    remaining: int
