"""
History entries recorded for undo.

Each entry carries a snapshot of the parcel as it was before the
operation being reversed took effect.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from parcel_tracker.app.models.history_enums import HistoryAction
from parcel_tracker.app.models.parcel import Parcel


@dataclass(frozen=True)
class Registered:
    """Parcel as it was added."""
    parcel: Parcel
    action: ClassVar[HistoryAction] = HistoryAction.REGISTERED


@dataclass(frozen=True)
class Updated:
    """Parcel as it was before its weight changed."""
    parcel: Parcel
    action: ClassVar[HistoryAction] = HistoryAction.UPDATED


@dataclass(frozen=True)
class Removed:
    """Parcel as it was just before delivery removed it."""
    parcel: Parcel
    action: ClassVar[HistoryAction] = HistoryAction.REMOVED


HistoryEntry = Union[Registered, Updated, Removed]
