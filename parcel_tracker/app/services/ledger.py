"""
Delivery ledger.

Append-only audit trail of delivered parcels. Entries are never removed,
not even when a delivery is undone.
"""

from typing import List

from parcel_tracker.app.models.parcel import Parcel


class DeliveryLedger:

    def __init__(self):
        self._delivered: List[Parcel] = []

    def __len__(self) -> int:
        return len(self._delivered)

    def append(self, parcel: Parcel) -> None:
        self._delivered.append(parcel.snapshot())

    def all(self) -> List[Parcel]:
        return [parcel.snapshot() for parcel in self._delivered]
