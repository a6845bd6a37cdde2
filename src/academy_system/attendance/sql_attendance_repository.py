from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload

from ..core.enums import AttendanceStatus
from ..database.models import AttendanceTable
from ..database.session import Transaction
from ..events.model import EventRef
from ..events.sql_event_repository import event_filter, event_from_rows, ref_from_columns
from ..roster.sql_roster_repository import to_player
from .model import Attendance, AttendanceRow
from .repository import AttendanceRepository


def _to_attendance(row: AttendanceTable) -> Attendance:
    return Attendance(
        attendance_id=int(row.id),
        player_id=int(row.player_id),
        event=ref_from_columns(row.training_id, row.match_id),
        status=AttendanceStatus(row.status),
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SQLAttendanceRepository(AttendanceRepository):
    def get_for_player_and_event(self, tx: Transaction, *, player_id: int, event: EventRef) -> Optional[Attendance]:
        row = self._find_row(tx, player_id=player_id, event=event)
        return _to_attendance(row) if row else None

    def create(
        self,
        tx: Transaction,
        *,
        player_id: int,
        event: EventRef,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        row = AttendanceTable(
            player_id=int(player_id),
            training_id=event.training_id,
            match_id=event.match_id,
            status=status,
            notes=notes,
        )
        tx.session.add(row)
        tx.session.flush()
        return _to_attendance(row)

    def update(
        self,
        tx: Transaction,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        row = tx.session.get(AttendanceTable, int(attendance_id))
        if row is None:
            raise LookupError(f"attendance {attendance_id} disappeared during update")
        row.status = status
        row.notes = notes
        tx.session.flush()
        return _to_attendance(row)

    def list_for_event(self, tx: Transaction, event: EventRef) -> Sequence[AttendanceRow]:
        rows = tx.session.execute(
            select(AttendanceTable)
            .options(
                joinedload(AttendanceTable.player),
                joinedload(AttendanceTable.training),
                joinedload(AttendanceTable.match),
            )
            .where(event_filter(AttendanceTable, event))
            .order_by(AttendanceTable.created_at.desc(), AttendanceTable.id.desc())
        ).scalars()
        return [
            AttendanceRow(
                attendance=_to_attendance(r),
                player=to_player(r.player),
                event=event_from_rows(r.training, r.match),
            )
            for r in rows
        ]

    def list_for_players(self, tx: Transaction, player_ids: Sequence[int]) -> Sequence[Attendance]:
        if not player_ids:
            return []
        rows = tx.session.execute(
            select(AttendanceTable).where(AttendanceTable.player_id.in_([int(p) for p in player_ids]))
        ).scalars()
        return [_to_attendance(r) for r in rows]

    def count_for_event(self, tx: Transaction, event: EventRef) -> int:
        count = tx.session.execute(
            select(func.count(AttendanceTable.id)).where(event_filter(AttendanceTable, event))
        ).scalar_one()
        return int(count)

    def _find_row(self, tx: Transaction, *, player_id: int, event: EventRef) -> Optional[AttendanceTable]:
        return tx.session.execute(
            select(AttendanceTable).where(
                AttendanceTable.player_id == int(player_id),
                event_filter(AttendanceTable, event),
            )
        ).scalar_one_or_none()
