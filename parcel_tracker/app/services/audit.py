"""
Audit logging service for tracking parcel operations.

Emits one structured log record per successful operation.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

logger = logging.getLogger("parcel_tracker.audit")


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    PARCEL_REGISTERED = "PARCEL_REGISTERED"
    PARCEL_WEIGHT_UPDATED = "PARCEL_WEIGHT_UPDATED"
    PARCEL_LOADED = "PARCEL_LOADED"
    PARCEL_DISPATCHED = "PARCEL_DISPATCHED"
    PARCEL_DELIVERED = "PARCEL_DELIVERED"
    ACTION_UNDONE = "ACTION_UNDONE"


def log_event(
    action: str,
    parcel_id: Optional[int] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Log a parcel event.

    Args:
        action: Action being performed (use AuditAction constants)
        parcel_id: ID of the parcel acted upon
        metadata: Additional context

    Returns:
        The structured record that was logged
    """
    record = {
        "action": action,
        "parcel_id": parcel_id,
        "metadata": metadata or {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    logger.info(action, extra={"audit": record})
    return record
