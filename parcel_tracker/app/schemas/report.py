"""
Report Schemas.
"""

from pydantic import BaseModel
from typing import Dict, List


class DeliveredParcelSummary(BaseModel):
    """One line of the delivery audit trail."""
    id: int
    recipient: str
    priority: int


class ReportSnapshot(BaseModel):
    """Summary statistics over active and delivered parcels."""
    total_registered: int
    total_delivered: int
    total_active: int
    average_weight: float
    pending_by_priority: Dict[int, int]
    delivered: List[DeliveredParcelSummary]
