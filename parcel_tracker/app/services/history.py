"""
History stack service.

Records reversible descriptions of register, update and delivery
operations and replays their inverse on the registry, last in first out.
Loading and dispatch are not recorded.
"""

import logging
from typing import List

from parcel_tracker.app.core.exceptions import EmptyHistoryError
from parcel_tracker.app.models.history import HistoryEntry, Registered, Removed, Updated
from parcel_tracker.app.services.registry import ParcelRegistry

logger = logging.getLogger("parcel_tracker.history")


class HistoryStack:

    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def peek_all(self) -> List[HistoryEntry]:
        """Recorded entries, most recent first."""
        return list(reversed(self._entries))

    def pop_and_reverse(self, registry: ParcelRegistry) -> HistoryEntry:
        """
        Pop the most recent entry and apply its inverse to the registry.

        A target that is already gone is skipped silently so the entry
        is still consumed. The delivery ledger is never modified.

        Returns:
            The entry that was undone

        Raises:
            EmptyHistoryError: if nothing has been recorded
        """
        if not self._entries:
            raise EmptyHistoryError()

        entry = self._entries.pop()
        parcel = entry.parcel

        match entry:
            case Registered():
                applied = registry.discard(parcel.id)
            case Removed():
                registry.reinsert(parcel)
                applied = True
            case Updated():
                applied = registry.restore_weight(parcel.id, parcel.weight)
            case _:
                raise TypeError(f"Unknown history entry: {entry!r}")

        if not applied:
            logger.info(
                "Undo target no longer active",
                extra={"action": entry.action.value, "parcel_id": parcel.id}
            )
        return entry
