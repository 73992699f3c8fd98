"""
Tests for the parcel manager.

Covers undo reversal, dispatch ordering, error atomicity and the
end-to-end register → load → dispatch → deliver flow.
"""

import logging

import pytest

from parcel_tracker.app.core.exceptions import (
    DuplicateParcelError, EmptyHistoryError, EmptyQueueError,
    ParcelNotFoundError, ParcelValidationError
)
from parcel_tracker.app.models.history_enums import HistoryAction
from parcel_tracker.app.models.parcel import MAX_ADDRESS_LENGTH, MAX_NAME_LENGTH
from parcel_tracker.app.services.audit import AuditAction
from parcel_tracker.app.services.manager import ParcelManager


def _state(manager):
    return (
        [(p.id, p.weight) for p in manager.list_active()],
        [p.id for p in manager.list_queue()],
        [p.id for p in manager.list_delivered()],
        len(manager.list_history()),
    )


# TEST 1: Registration
def test_register_returns_id_and_records_history(manager, make_parcel):
    assert make_parcel(1, weight=2.5, priority=1) == 1

    parcel = manager.get_parcel(1)
    assert parcel.weight == 2.5
    assert [e.action for e in manager.list_history()] == [HistoryAction.REGISTERED]


def test_invalid_priority_rejected_without_side_effects(manager, make_parcel):
    before = _state(manager)

    with pytest.raises(ParcelValidationError):
        make_parcel(1, priority=6)

    assert _state(manager) == before


def test_duplicate_active_id_rejected(manager, make_parcel):
    make_parcel(1)
    before = _state(manager)

    with pytest.raises(DuplicateParcelError):
        make_parcel(1, weight=9.0)

    assert _state(manager) == before


def test_delivered_id_can_be_registered_again(manager, make_parcel):
    make_parcel(1)
    manager.complete_delivery(1)

    make_parcel(1, weight=4.0)

    assert manager.get_parcel(1).weight == 4.0


def test_duplicates_allowed_when_configured():
    manager = ParcelManager(allow_duplicate_ids=True)
    for weight in (1.0, 2.0):
        manager.register_parcel(1, "Ade", "Bola", "Ikeja", weight, 3)

    assert [p.id for p in manager.list_active()] == [1, 1]


# TEST 2: Undo inverts each recorded operation
def test_undo_register(manager, make_parcel):
    make_parcel(1)
    before = _state(manager)
    make_parcel(2)

    entry = manager.undo()

    assert entry.action == HistoryAction.REGISTERED
    assert entry.parcel.id == 2
    assert _state(manager) == before


def test_undo_weight_update(manager, make_parcel):
    make_parcel(1, weight=3.0)

    updated = manager.update_parcel_weight(1, 7.25)
    assert updated.weight == 7.25

    entry = manager.undo()
    assert entry.action == HistoryAction.UPDATED
    assert entry.parcel.weight == 3.0
    assert manager.get_parcel(1).weight == 3.0


def test_undo_delivery_keeps_ledger_entry(manager, make_parcel):
    make_parcel(1)
    make_parcel(2)
    manager.complete_delivery(1)

    entry = manager.undo()

    assert entry.action == HistoryAction.REMOVED
    assert [p.id for p in manager.list_active()] == [2, 1]
    assert [p.id for p in manager.list_delivered()] == [1]
    assert manager.generate_report().total_registered == 3


def test_undo_chain_unwinds_to_empty(manager, make_parcel):
    make_parcel(1, weight=1.0)
    manager.update_parcel_weight(1, 2.0)
    manager.update_parcel_weight(1, 3.0)
    manager.complete_delivery(1)

    assert manager.undo().action == HistoryAction.REMOVED
    assert manager.undo().action == HistoryAction.UPDATED
    assert manager.get_parcel(1).weight == 2.0
    assert manager.undo().action == HistoryAction.UPDATED
    assert manager.get_parcel(1).weight == 1.0
    assert manager.undo().action == HistoryAction.REGISTERED
    assert manager.list_active() == []

    with pytest.raises(EmptyHistoryError):
        manager.undo()


def test_load_and_dispatch_are_not_undoable(manager, make_parcel):
    make_parcel(1)
    manager.load_for_dispatch(1)
    manager.dispatch_next()

    manager.undo()

    with pytest.raises(EmptyHistoryError):
        manager.undo()


# TEST 3: Not found / empty errors leave state unchanged
def test_not_found_errors(manager, make_parcel):
    make_parcel(1)
    before = _state(manager)

    with pytest.raises(ParcelNotFoundError):
        manager.update_parcel_weight(99, 1.0)
    with pytest.raises(ParcelNotFoundError):
        manager.load_for_dispatch(99)
    with pytest.raises(ParcelNotFoundError):
        manager.complete_delivery(99)
    with pytest.raises(ParcelNotFoundError):
        manager.get_parcel(99)

    assert _state(manager) == before


def test_invalid_weight_update_leaves_state_unchanged(manager, make_parcel):
    make_parcel(1, weight=3.0)
    before = _state(manager)

    with pytest.raises(ParcelValidationError):
        manager.update_parcel_weight(1, -2.0)

    assert _state(manager) == before


def test_dispatch_empty_queue(manager, make_parcel):
    make_parcel(1)
    before = _state(manager)

    with pytest.raises(EmptyQueueError):
        manager.dispatch_next()

    assert _state(manager) == before


# TEST 4: Dispatch ordering
def test_dispatch_priority_order(manager, make_parcel):
    for parcel_id, priority in [(1, 5), (2, 1), (3, 3), (4, 1)]:
        make_parcel(parcel_id, priority=priority)
        manager.load_for_dispatch(parcel_id)

    dispatched = [manager.dispatch_next() for _ in range(4)]

    assert [p.id for p in dispatched] == [2, 4, 3, 1]


def test_queue_holds_copy_taken_at_load_time(manager, make_parcel):
    make_parcel(1, weight=2.0)
    manager.load_for_dispatch(1)
    manager.update_parcel_weight(1, 9.0)
    manager.complete_delivery(1)

    dispatched = manager.dispatch_next()

    assert dispatched.weight == 2.0


def test_dispatch_leaves_parcel_active(manager, make_parcel):
    make_parcel(1)
    manager.load_for_dispatch(1)

    manager.dispatch_next()

    assert manager.get_parcel(1).id == 1


# TEST 5: End-to-end scenario
def test_end_to_end_flow(manager, make_parcel):
    make_parcel(1, weight=5.0, priority=2)
    make_parcel(2, weight=3.0, priority=1)
    manager.load_for_dispatch(1)
    manager.load_for_dispatch(2)

    assert manager.dispatch_next().id == 2

    manager.complete_delivery(1)
    report = manager.generate_report()

    assert report.total_delivered == 1
    assert report.total_active == 1
    assert report.total_registered == 2
    assert report.average_weight == pytest.approx(4.0)
    assert report.pending_by_priority[1] == 1
    assert report.pending_by_priority[2] == 0
    assert [d.id for d in report.delivered] == [1]
    assert [p.id for p in manager.list_active()] == [2]


# TEST 6: Audit events
def test_operations_emit_audit_events(manager, make_parcel, caplog):
    caplog.set_level(logging.INFO, logger="parcel_tracker.audit")

    make_parcel(1)
    manager.load_for_dispatch(1)
    manager.dispatch_next()
    manager.update_parcel_weight(1, 2.0)
    manager.complete_delivery(1)
    manager.undo()

    actions = [r.audit["action"] for r in caplog.records if r.name == "parcel_tracker.audit"]
    assert actions == [
        AuditAction.PARCEL_REGISTERED,
        AuditAction.PARCEL_LOADED,
        AuditAction.PARCEL_DISPATCHED,
        AuditAction.PARCEL_WEIGHT_UPDATED,
        AuditAction.PARCEL_DELIVERED,
        AuditAction.ACTION_UNDONE,
    ]


def test_load_reports_queue_size(manager, make_parcel):
    make_parcel(1)
    make_parcel(2, priority=1)

    loaded, first_size = manager.load_for_dispatch(1)
    _, second_size = manager.load_for_dispatch(2)

    assert loaded.id == 1
    assert (first_size, second_size) == (1, 2)
    manager.dispatch_next()
    assert manager.load_for_dispatch(1)[1] == 2


def test_text_field_limits_match_request_schema(manager, make_parcel):
    """Overlong names and addresses are rejected by the core, not only over HTTP."""
    with pytest.raises(ParcelValidationError) as exc_info:
        manager.register_parcel(1, "A" * (MAX_NAME_LENGTH + 1), "Bola", "Ikeja", 1.0, 3)
    assert exc_info.value.details["field"] == "sender"

    with pytest.raises(ParcelValidationError) as exc_info:
        manager.register_parcel(1, "Ade", "Bola", "I" * (MAX_ADDRESS_LENGTH + 1), 1.0, 3)
    assert exc_info.value.details["field"] == "address"

    assert manager.register_parcel(1, "A" * MAX_NAME_LENGTH, "Bola", "I" * MAX_ADDRESS_LENGTH, 1.0, 3) == 1
