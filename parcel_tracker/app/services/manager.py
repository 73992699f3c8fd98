"""
Parcel manager service.

Single owner of the registry, dispatch queue, delivery ledger and
history stack. Every public operation runs under one lock so that a
mutation and its history entry are applied together.
"""

import threading
from typing import List, Tuple

from parcel_tracker.app.models.history import HistoryEntry, Registered, Removed, Updated
from parcel_tracker.app.models.parcel import Parcel, build_parcel
from parcel_tracker.app.schemas.report import ReportSnapshot
from parcel_tracker.app.services.audit import AuditAction, log_event
from parcel_tracker.app.services.dispatch_queue import DispatchQueue
from parcel_tracker.app.services.history import HistoryStack
from parcel_tracker.app.services.ledger import DeliveryLedger
from parcel_tracker.app.services.registry import ParcelRegistry
from parcel_tracker.app.services.reports import ReportService


class ParcelManager:
    """
    Parcel tracking state machine.

    Failed operations raise before anything is mutated, so state is
    unchanged on error.
    """

    def __init__(self, allow_duplicate_ids: bool = False):
        self.registry = ParcelRegistry(allow_duplicate_ids=allow_duplicate_ids)
        self.dispatch_queue = DispatchQueue()
        self.ledger = DeliveryLedger()
        self.history = HistoryStack()
        self._lock = threading.RLock()

    def register_parcel(
        self,
        parcel_id: int,
        sender: str,
        recipient: str,
        address: str,
        weight: float,
        priority: int
    ) -> int:
        """
        Register a new active parcel.

        Returns:
            The parcel ID

        Raises:
            ParcelValidationError: if a field is missing or out of range
            DuplicateParcelError: if the ID is already active
        """
        parcel = build_parcel(parcel_id, sender, recipient, address, weight, priority)
        with self._lock:
            self.registry.register(parcel)
            self.history.push(Registered(parcel.snapshot()))

        log_event(
            AuditAction.PARCEL_REGISTERED,
            parcel_id=parcel.id,
            metadata={"priority": parcel.priority, "weight": parcel.weight}
        )
        return parcel.id

    def update_parcel_weight(self, parcel_id: int, weight: float) -> Parcel:
        """
        Change the weight of an active parcel.

        Returns:
            The updated parcel

        Raises:
            ParcelValidationError: if the weight is not positive
            ParcelNotFoundError: if the parcel is not active
        """
        with self._lock:
            previous = self.registry.update_weight(parcel_id, weight)
            self.history.push(Updated(previous))
            updated = self.registry.get(parcel_id).snapshot()

        log_event(
            AuditAction.PARCEL_WEIGHT_UPDATED,
            parcel_id=parcel_id,
            metadata={"previous_weight": previous.weight, "weight": updated.weight}
        )
        return updated

    def load_for_dispatch(self, parcel_id: int) -> Tuple[Parcel, int]:
        """
        Copy an active parcel into the dispatch queue.

        The parcel stays active and loading is not recorded for undo.

        Returns:
            The loaded copy and the queue size right after loading

        Raises:
            ParcelNotFoundError: if the parcel is not active
        """
        with self._lock:
            parcel = self.registry.get(parcel_id).snapshot()
            self.dispatch_queue.enqueue(parcel)
            queue_size = len(self.dispatch_queue)

        log_event(
            AuditAction.PARCEL_LOADED,
            parcel_id=parcel_id,
            metadata={"priority": parcel.priority, "queue_size": queue_size}
        )
        return parcel, queue_size

    def dispatch_next(self) -> Parcel:
        """
        Dispatch the most urgent loaded parcel.

        Raises:
            EmptyQueueError: if the loading queue is empty
        """
        with self._lock:
            parcel = self.dispatch_queue.dequeue_next()

        log_event(
            AuditAction.PARCEL_DISPATCHED,
            parcel_id=parcel.id,
            metadata={"priority": parcel.priority}
        )
        return parcel

    def complete_delivery(self, parcel_id: int) -> Parcel:
        """
        Mark an active parcel delivered.

        The parcel leaves the active list and is appended to the ledger.

        Raises:
            ParcelNotFoundError: if the parcel is not active
        """
        with self._lock:
            delivered = self.registry.remove(parcel_id)
            self.ledger.append(delivered)
            self.history.push(Removed(delivered.snapshot()))

        log_event(
            AuditAction.PARCEL_DELIVERED,
            parcel_id=parcel_id,
            metadata={"recipient": delivered.recipient}
        )
        return delivered

    def undo(self) -> HistoryEntry:
        """
        Reverse the most recent register, update or delivery.

        Raises:
            EmptyHistoryError: if there is nothing to undo
        """
        with self._lock:
            entry = self.history.pop_and_reverse(self.registry)

        log_event(
            AuditAction.ACTION_UNDONE,
            parcel_id=entry.parcel.id,
            metadata={"undone_action": entry.action.value}
        )
        return entry

    def generate_report(self) -> ReportSnapshot:
        with self._lock:
            return ReportService.generate_report(self.registry.all(), self.ledger.all())

    def get_parcel(self, parcel_id: int) -> Parcel:
        with self._lock:
            return self.registry.get(parcel_id).snapshot()

    def list_active(self) -> List[Parcel]:
        with self._lock:
            return self.registry.all()

    def list_queue(self) -> List[Parcel]:
        with self._lock:
            return self.dispatch_queue.peek_all()

    def list_delivered(self) -> List[Parcel]:
        with self._lock:
            return self.ledger.all()

    def list_history(self) -> List[HistoryEntry]:
        with self._lock:
            return self.history.peek_all()
