from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select

from ..database.models import TrainingScheduleTable
from ..database.session import Transaction
from .model import ScheduleItem, TrainingSchedule
from .repository import ScheduleRepository


def _to_schedule(row: TrainingScheduleTable) -> TrainingSchedule:
    return TrainingSchedule(
        schedule_id=int(row.id),
        group_id=int(row.group_id),
        day_of_week=int(row.day_of_week),
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
    )


class SQLScheduleRepository(ScheduleRepository):
    def list_for_group(self, tx: Transaction, group_id: int) -> Sequence[TrainingSchedule]:
        rows = tx.session.execute(
            select(TrainingScheduleTable)
            .where(TrainingScheduleTable.group_id == int(group_id))
            .order_by(TrainingScheduleTable.day_of_week.asc())
        ).scalars()
        return [_to_schedule(r) for r in rows]

    def replace_for_group(self, tx: Transaction, *, group_id: int, items: Sequence[ScheduleItem]) -> Sequence[TrainingSchedule]:
        tx.session.execute(delete(TrainingScheduleTable).where(TrainingScheduleTable.group_id == int(group_id)))

        rows = [
            TrainingScheduleTable(
                group_id=int(group_id),
                day_of_week=item.day_of_week,
                start_time=item.start_time,
                end_time=item.end_time,
                location=item.location,
            )
            for item in items
        ]
        tx.session.add_all(rows)
        tx.session.flush()
        return [_to_schedule(r) for r in rows]
