"""
History API Endpoints.

Inspect recorded actions and undo the most recent one.
"""

from fastapi import APIRouter, Depends
from parcel_tracker.app.core.dependencies import get_manager
from parcel_tracker.app.schemas.history import (
    HistoryEntryResponse, HistoryListResponse, UndoResponse
)
from parcel_tracker.app.services.manager import ParcelManager

router = APIRouter(prefix="/history", tags=["History"])


@router.get("", response_model=HistoryListResponse)
async def list_history(manager: ParcelManager = Depends(get_manager)):
    """List undoable actions, most recent first."""
    entries = manager.list_history()
    return HistoryListResponse(
        entries=[HistoryEntryResponse.from_entry(e) for e in entries],
        total=len(entries)
    )


@router.post("/undo", response_model=UndoResponse)
async def undo_last_action(manager: ParcelManager = Depends(get_manager)):
    """
    Undo the most recent register, weight update or delivery.

    Undoing a delivery restores the parcel to the active list
    but keeps its delivery ledger entry.
    """
    entry = manager.undo()
    return UndoResponse(
        undone=HistoryEntryResponse.from_entry(entry),
        remaining=len(manager.list_history())
    )
