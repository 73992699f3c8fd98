"""
History Action Enumeration.
"""

import enum


class HistoryAction(str, enum.Enum):
    """
    Reversible action enumeration.

    Undo mapping:
        REGISTERED → parcel removed from active list
        UPDATED    → previous weight restored
        REMOVED    → parcel restored to active list (delivery record kept)
    """
    REGISTERED = "REGISTERED"
    UPDATED = "UPDATED"
    REMOVED = "REMOVED"
