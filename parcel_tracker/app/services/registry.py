"""
Parcel registry service.

Holds every active (not yet delivered) parcel in registration order.
Lookups are linear scans by ID.
"""

from typing import List, Optional

from parcel_tracker.app.core.exceptions import DuplicateParcelError, ParcelNotFoundError
from parcel_tracker.app.models.parcel import Parcel, validate_weight


class ParcelRegistry:
    """Active parcels, kept in the order they were registered."""

    def __init__(self, allow_duplicate_ids: bool = False):
        self.allow_duplicate_ids = allow_duplicate_ids
        self._parcels: List[Parcel] = []

    def __len__(self) -> int:
        return len(self._parcels)

    def __contains__(self, parcel_id: int) -> bool:
        return self._index_of(parcel_id) is not None

    def _index_of(self, parcel_id: int) -> Optional[int]:
        for index, parcel in enumerate(self._parcels):
            if parcel.id == parcel_id:
                return index
        return None

    def register(self, parcel: Parcel) -> Parcel:
        """
        Append a validated parcel to the active list.

        Raises:
            DuplicateParcelError: if the ID is already active and duplicates are not allowed
        """
        if not self.allow_duplicate_ids and parcel.id in self:
            raise DuplicateParcelError(parcel.id)
        self._parcels.append(parcel)
        return parcel

    def find(self, parcel_id: int) -> Optional[Parcel]:
        index = self._index_of(parcel_id)
        return None if index is None else self._parcels[index]

    def get(self, parcel_id: int) -> Parcel:
        parcel = self.find(parcel_id)
        if parcel is None:
            raise ParcelNotFoundError(parcel_id)
        return parcel

    def update_weight(self, parcel_id: int, new_weight: float) -> Parcel:
        """
        Overwrite the weight of an active parcel.

        Returns:
            Snapshot of the parcel taken before the update

        Raises:
            ParcelValidationError: if the new weight is not positive
            ParcelNotFoundError: if no active parcel has this ID
        """
        new_weight = validate_weight(new_weight)
        parcel = self.get(parcel_id)
        previous = parcel.snapshot()
        parcel.weight = new_weight
        return previous

    def remove(self, parcel_id: int) -> Parcel:
        """
        Remove an active parcel and return it.

        Raises:
            ParcelNotFoundError: if no active parcel has this ID
        """
        index = self._index_of(parcel_id)
        if index is None:
            raise ParcelNotFoundError(parcel_id)
        return self._parcels.pop(index)

    def discard(self, parcel_id: int) -> bool:
        """Remove a parcel if present. Returns False when it was already gone."""
        index = self._index_of(parcel_id)
        if index is None:
            return False
        del self._parcels[index]
        return True

    def reinsert(self, parcel: Parcel) -> None:
        """Append a previously removed parcel without any checks."""
        self._parcels.append(parcel.snapshot())

    def restore_weight(self, parcel_id: int, weight: float) -> bool:
        parcel = self.find(parcel_id)
        if parcel is None:
            return False
        parcel.weight = weight
        return True

    def all(self) -> List[Parcel]:
        """Snapshots of the active parcels in registration order."""
        return [parcel.snapshot() for parcel in self._parcels]
