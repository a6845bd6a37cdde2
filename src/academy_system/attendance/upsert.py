"""Per-record attendance upsert, run inside the caller's transaction."""
from __future__ import annotations

from ..core.enums import AttendanceStatus, EventType
from ..database.session import Transaction
from ..evaluations.repository import EvaluationRepository
from ..events.model import EventRef
from .model import Attendance, AttendanceInput
from .repository import AttendanceRepository

PRESENT_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE})


def clears_evaluations(event: EventRef, status: AttendanceStatus) -> bool:
    """Evaluations of a training only stand for players who were there."""
    return event.kind == EventType.TRAINING and status not in PRESENT_STATUSES


def upsert_attendance(
    tx: Transaction,
    attendance: AttendanceRepository,
    evaluations: EvaluationRepository,
    *,
    event: EventRef,
    record: AttendanceInput,
) -> Attendance:
    """Create or overwrite the (player, event) attendance row.

    Overwriting a training row with a non-present status also deletes that
    player's evaluations for the training. The player must already be resolved.
    """
    notes = record.notes or None

    existing = attendance.get_for_player_and_event(tx, player_id=record.player_id, event=event)
    if existing is None:
        return attendance.create(tx, player_id=record.player_id, event=event, status=record.status, notes=notes)

    saved = attendance.update(tx, attendance_id=existing.attendance_id, status=record.status, notes=notes)
    if clears_evaluations(event, record.status):
        evaluations.delete_for_player_and_event(tx, player_id=record.player_id, event=event)
    return saved
