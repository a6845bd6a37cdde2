from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..database.session import Transaction
from ..events.model import EventRef
from .model import Attendance, AttendanceRow


class AttendanceRepository(Protocol):
    def get_for_player_and_event(self, tx: Transaction, *, player_id: int, event: EventRef) -> Optional[Attendance]:
        raise NotImplementedError

    def create(
        self,
        tx: Transaction,
        *,
        player_id: int,
        event: EventRef,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        raise NotImplementedError

    def update(
        self,
        tx: Transaction,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        raise NotImplementedError

    def list_for_event(self, tx: Transaction, event: EventRef) -> Sequence[AttendanceRow]:
        """Rows of one event, newest first, with player and event populated."""

        raise NotImplementedError

    def list_for_players(self, tx: Transaction, player_ids: Sequence[int]) -> Sequence[Attendance]:
        raise NotImplementedError

    def count_for_event(self, tx: Transaction, event: EventRef) -> int:
        raise NotImplementedError
