"""
Report Service.

Aggregates active and delivered parcels into summary statistics.
Focused on READ-ONLY operations.
"""

from typing import Iterable

from parcel_tracker.app.models.parcel import Parcel, PRIORITY_LEVELS
from parcel_tracker.app.schemas.report import DeliveredParcelSummary, ReportSnapshot


class ReportService:

    @staticmethod
    def generate_report(active: Iterable[Parcel], delivered: Iterable[Parcel]) -> ReportSnapshot:
        """Build the summary report from active and delivered parcels."""
        active = list(active)
        delivered = list(delivered)

        # 1. Totals
        total_registered = len(active) + len(delivered)

        # 2. Average weight across everything ever registered and still counted
        total_weight = sum(p.weight for p in active) + sum(p.weight for p in delivered)
        average_weight = total_weight / total_registered if total_registered else 0.0

        # 3. Pending parcels by priority level
        pending_by_priority = {level: 0 for level in PRIORITY_LEVELS}
        for parcel in active:
            if parcel.priority in pending_by_priority:
                pending_by_priority[parcel.priority] += 1

        # 4. Delivery history in ledger order
        delivered_summary = [
            DeliveredParcelSummary(id=p.id, recipient=p.recipient, priority=p.priority)
            for p in delivered
        ]

        return ReportSnapshot(
            total_registered=total_registered,
            total_delivered=len(delivered),
            total_active=len(active),
            average_weight=average_weight,
            pending_by_priority=pending_by_priority,
            delivered=delivered_summary
        )
