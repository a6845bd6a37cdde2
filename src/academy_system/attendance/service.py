from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import EventType
from ..core.exceptions import BadRequestError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.session import Transaction, transaction
from ..evaluations.repository import EvaluationRepository
from ..events.model import EventRef
from ..events.repository import EventRepository, GroupRepository
from ..roster.model import Player
from ..roster.repository import PlayerRepository
from .model import Attendance, AttendanceInput, AttendanceRow, AttendanceStats, PlayerAttendanceStats
from .repository import AttendanceRepository
from .stats import summarize
from .upsert import upsert_attendance

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        conn: DatabaseConnection,
        attendance: AttendanceRepository,
        evaluations: EvaluationRepository,
        events: EventRepository,
        players: PlayerRepository,
        groups: GroupRepository,
    ):
        self._conn = conn
        self._attendance = attendance
        self._evaluations = evaluations
        self._events = events
        self._players = players
        self._groups = groups

    def mark_batch(self, event_id: int, event_type: EventType, records: Sequence[AttendanceInput]) -> list[Attendance]:
        """Create or update attendance for every record against one event.

        All-or-nothing: a missing event or player rolls back the whole batch.
        """
        if not records:
            raise BadRequestError("records must not be empty")

        event = EventRef(EventType(event_type), int(event_id))
        try:
            with transaction(self._conn) as tx:
                self._require_event(tx, event)

                results: list[Attendance] = []
                for record in records:
                    if not self._players.get_by_id(tx, record.player_id):
                        raise NotFoundError(f"Player with ID {record.player_id} not found")
                    results.append(
                        upsert_attendance(tx, self._attendance, self._evaluations, event=event, record=record)
                    )
        except NotFoundError:
            raise
        except Exception:
            logger.exception("mark_batch failed event=%s records=%d", event.key, len(records))
            raise BadRequestError("Failed to mark attendance")

        logger.info("attendance marked event=%s records=%d", event.key, len(results))
        return results

    def find_by_event(self, event_id: int, event_type: EventType) -> Sequence[AttendanceRow]:
        event = EventRef(EventType(event_type), int(event_id))
        with transaction(self._conn) as tx:
            return self._attendance.list_for_event(tx, event)

    def find_by_event_for_players(
        self,
        event_id: int,
        event_type: EventType,
        player_ids: Sequence[int],
    ) -> Sequence[AttendanceRow]:
        allowed = {int(p) for p in player_ids}
        return [r for r in self.find_by_event(event_id, event_type) if r.player.player_id in allowed]

    def get_player_stats(self, player_ids: Sequence[int]) -> AttendanceStats:
        with transaction(self._conn) as tx:
            return summarize(self._attendance.list_for_players(tx, player_ids))

    def get_stats_per_player(self, players: Sequence[Player]) -> list[PlayerAttendanceStats]:
        out: list[PlayerAttendanceStats] = []
        with transaction(self._conn) as tx:
            for player in players:
                rows = self._attendance.list_for_players(tx, [player.player_id])
                out.append(
                    PlayerAttendanceStats(player_id=player.player_id, player_name=player.full_name, stats=summarize(rows))
                )
        return out

    def get_group_stats(self, group_id: int) -> list[PlayerAttendanceStats]:
        """Per-player stats for every player in a group."""
        with transaction(self._conn) as tx:
            if not self._groups.get_by_id(tx, int(group_id)):
                raise NotFoundError(f"Group with ID {group_id} not found")
            players = self._players.list_by_group(tx, int(group_id))
        return self.get_stats_per_player(players)

    def _require_event(self, tx: Transaction, event: EventRef) -> None:
        if not self._events.get_event(tx, event):
            raise NotFoundError(f"{event} not found")
