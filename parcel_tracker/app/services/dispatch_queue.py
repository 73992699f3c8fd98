"""
Dispatch queue service.

Parcels staged for loading are served most urgent first
(lowest priority number), in loading order within a priority level.
"""

import heapq
import itertools
from typing import List, Tuple

from parcel_tracker.app.core.exceptions import EmptyQueueError
from parcel_tracker.app.models.parcel import Parcel, validate_priority


class DispatchQueue:

    def __init__(self):
        self._heap: List[Tuple[int, int, Parcel]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def enqueue(self, parcel: Parcel) -> None:
        """Stage a copy of the parcel for loading."""
        priority = validate_priority(parcel.priority)
        # (priority ascending, then insertion sequence) keeps equal priorities FIFO
        heapq.heappush(self._heap, (priority, next(self._sequence), parcel.snapshot()))

    def dequeue_next(self) -> Parcel:
        """
        Remove and return the most urgent parcel.

        Raises:
            EmptyQueueError: if nothing is queued
        """
        if not self._heap:
            raise EmptyQueueError()
        _, _, parcel = heapq.heappop(self._heap)
        return parcel

    def peek_all(self) -> List[Parcel]:
        """Queued parcels in the order they would be dispatched."""
        return [parcel.snapshot() for _, _, parcel in sorted(self._heap, key=lambda item: item[:2])]
