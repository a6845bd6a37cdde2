from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.exceptions import BadRequestError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.session import Transaction, transaction
from ..events.model import Group
from ..events.repository import GroupRepository, TrainingRepository
from .expander import expand_schedule, validate_schedule_items
from .model import CleanupResult, GenerationResult, ScheduleItem, TrainingSchedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(
        self,
        conn: DatabaseConnection,
        groups: GroupRepository,
        schedules: ScheduleRepository,
        trainings: TrainingRepository,
        attendance: AttendanceRepository,
    ):
        self._conn = conn
        self._groups = groups
        self._schedules = schedules
        self._trainings = trainings
        self._attendance = attendance

    def _require_group(self, tx: Transaction, group_id: int) -> Group:
        group = self._groups.get_by_id(tx, int(group_id))
        if not group:
            raise NotFoundError(f"Group with ID {group_id} not found")
        return group

    def get_schedule(self, group_id: int) -> Sequence[TrainingSchedule]:
        with transaction(self._conn) as tx:
            self._require_group(tx, group_id)
            return self._schedules.list_for_group(tx, int(group_id))

    def update_schedule(self, group_id: int, items: Sequence[ScheduleItem]) -> Sequence[TrainingSchedule]:
        """Replace the group's weekly schedule with the given items."""
        with transaction(self._conn) as tx:
            self._require_group(tx, group_id)
            normalized = validate_schedule_items(items)
            saved = self._schedules.replace_for_group(tx, group_id=int(group_id), items=normalized)

        logger.info("schedule replaced group=%s slots=%d", group_id, len(saved))
        return saved

    def generate_trainings(
        self,
        group_id: int,
        *,
        from_date: date,
        to_date: date,
        default_topic: Optional[str] = None,
    ) -> GenerationResult:
        with transaction(self._conn) as tx:
            group = self._require_group(tx, group_id)

            slots = self._schedules.list_for_group(tx, group.group_id)
            if not slots:
                raise BadRequestError("No schedule defined for this group")
            if to_date < from_date:
                raise BadRequestError("toDate must be after fromDate")

            existing = self._trainings.list_for_group_between(tx, group_id=group.group_id, start=from_date, end=to_date)
            covered = {t.start_time.date() for t in existing}

            expansion = expand_schedule(
                slots,
                group_id=group.group_id,
                start=from_date,
                end=to_date,
                covered_dates=covered,
                default_topic=default_topic,
            )
            if expansion.trainings:
                self._trainings.add_many(tx, expansion.trainings)

        logger.info(
            "trainings generated group=%s range=%s..%s created=%d skipped=%d",
            group_id,
            from_date,
            to_date,
            len(expansion.trainings),
            expansion.skipped,
        )
        return GenerationResult(created=len(expansion.trainings), skipped=expansion.skipped)

    def delete_future_generated_trainings(self, group_id: int, *, now: Optional[datetime] = None) -> CleanupResult:
        """Delete upcoming generated trainings, keeping any that already have attendance."""
        now = now or now_local()

        with transaction(self._conn) as tx:
            self._require_group(tx, group_id)

            to_delete: list[int] = []
            kept = 0
            for training in self._trainings.list_future_generated(tx, group_id=int(group_id), now=now):
                if self._attendance.count_for_event(tx, training.ref) == 0:
                    to_delete.append(training.training_id)
                else:
                    kept += 1

            if to_delete:
                self._trainings.delete_many(tx, to_delete)

        logger.info("future generated trainings removed group=%s deleted=%d kept=%d", group_id, len(to_delete), kept)
        return CleanupResult(deleted=len(to_delete), kept=kept)
