"""
Parcel domain model.

A parcel is a shipment tracked from registration through loading,
dispatch and delivery. Only its weight may change after registration.
"""

import math
from dataclasses import dataclass, replace

from parcel_tracker.app.core.exceptions import ParcelValidationError

MIN_PRIORITY = 1
MAX_PRIORITY = 5
PRIORITY_LEVELS = range(MIN_PRIORITY, MAX_PRIORITY + 1)
MAX_NAME_LENGTH = 200
MAX_ADDRESS_LENGTH = 500


@dataclass
class Parcel:
    """
    Parcel record.

    Priority runs from 1 (most urgent) to 5 (least urgent).
    """
    id: int
    sender: str
    recipient: str
    address: str
    weight: float
    priority: int

    def snapshot(self) -> "Parcel":
        """Independent copy of the parcel as it is right now."""
        return replace(self)

    def __repr__(self):
        return f"<Parcel(id={self.id}, recipient='{self.recipient}', weight={self.weight}, priority={self.priority})>"


def validate_weight(weight) -> float:
    """Return weight as a float, or raise if it is not a positive finite number."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ParcelValidationError("Weight must be a number", field="weight")
    weight = float(weight)
    if not math.isfinite(weight) or weight <= 0:
        raise ParcelValidationError("Weight must be a positive number", field="weight")
    return weight


def validate_priority(priority) -> int:
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ParcelValidationError("Priority must be an integer", field="priority")
    if priority < MIN_PRIORITY or priority > MAX_PRIORITY:
        raise ParcelValidationError(
            f"Invalid priority. Must be between {MIN_PRIORITY} and {MAX_PRIORITY}.",
            field="priority"
        )
    return priority


def build_parcel(parcel_id, sender, recipient, address, weight, priority) -> Parcel:
    """
    Validate raw parcel fields and build a Parcel.

    Raises:
        ParcelValidationError: on the first missing or invalid field
    """
    if isinstance(parcel_id, bool) or not isinstance(parcel_id, int):
        raise ParcelValidationError("Parcel ID must be an integer", field="id")

    text_fields = {
        "sender": (sender, MAX_NAME_LENGTH),
        "recipient": (recipient, MAX_NAME_LENGTH),
        "address": (address, MAX_ADDRESS_LENGTH),
    }
    for name, (value, max_length) in text_fields.items():
        if not isinstance(value, str) or not value.strip():
            raise ParcelValidationError(f"{name.capitalize()} is required", field=name)
        if len(value) > max_length:
            raise ParcelValidationError(
                f"{name.capitalize()} must be at most {max_length} characters", field=name
            )

    return Parcel(
        id=parcel_id,
        sender=sender.strip(),
        recipient=recipient.strip(),
        address=address.strip(),
        weight=validate_weight(weight),
        priority=validate_priority(priority),
    )
