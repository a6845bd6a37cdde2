from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from sqlalchemy import delete, select

from ..common.datetime_utils import day_bounds
from ..core.enums import EventType
from ..database.models import GroupTable, MatchTable, TrainingTable
from ..database.session import Transaction
from .model import Event, EventRef, Group, NewTraining, Training
from .repository import EventRepository, GroupRepository, TrainingRepository


def _to_training(row: TrainingTable) -> Training:
    return Training(
        training_id=int(row.id),
        group_id=int(row.group_id),
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
        topic=row.topic,
        schedule_id=int(row.schedule_id) if row.schedule_id is not None else None,
    )


def ref_from_columns(training_id: Optional[int], match_id: Optional[int]) -> EventRef:
    if training_id is not None:
        return EventRef.training(training_id)
    return EventRef.match(int(match_id))


def event_filter(table, ref: EventRef):
    """WHERE clause selecting the rows of a table that point at the given event."""
    if ref.kind == EventType.TRAINING:
        return table.training_id == int(ref.id)
    return table.match_id == int(ref.id)


def event_from_rows(training: Optional[TrainingTable], match: Optional[MatchTable]) -> Event:
    if training is not None:
        return Event(
            ref=EventRef.training(training.id),
            group_id=int(training.group_id),
            start_time=training.start_time,
            end_time=training.end_time,
        )
    return Event(
        ref=EventRef.match(match.id),
        group_id=int(match.group_id),
        start_time=match.start_time,
        end_time=match.end_time,
    )


class SQLGroupRepository(GroupRepository):
    def get_by_id(self, tx: Transaction, group_id: int) -> Optional[Group]:
        row = tx.session.get(GroupTable, int(group_id))
        if not row:
            return None
        return Group(group_id=int(row.id), name=row.name, year_of_birth=int(row.year_of_birth))


class SQLEventRepository(EventRepository):
    def get_event(self, tx: Transaction, ref: EventRef) -> Optional[Event]:
        table = TrainingTable if ref.kind == EventType.TRAINING else MatchTable
        row = tx.session.get(table, int(ref.id))
        if not row:
            return None
        return Event(ref=ref, group_id=int(row.group_id), start_time=row.start_time, end_time=row.end_time)


class SQLTrainingRepository(TrainingRepository):
    def list_for_group_between(self, tx: Transaction, *, group_id: int, start: date, end: date) -> Sequence[Training]:
        lower, upper = day_bounds(start, end)
        rows = tx.session.execute(
            select(TrainingTable)
            .where(
                TrainingTable.group_id == int(group_id),
                TrainingTable.start_time >= lower,
                TrainingTable.start_time < upper,
            )
            .order_by(TrainingTable.start_time.asc())
        ).scalars()
        return [_to_training(r) for r in rows]

    def add_many(self, tx: Transaction, trainings: Sequence[NewTraining]) -> Sequence[Training]:
        rows = [
            TrainingTable(
                group_id=t.group_id,
                schedule_id=t.schedule_id,
                start_time=t.start_time,
                end_time=t.end_time,
                location=t.location,
                topic=t.topic,
            )
            for t in trainings
        ]
        tx.session.add_all(rows)
        tx.session.flush()
        return [_to_training(r) for r in rows]

    def list_future_generated(self, tx: Transaction, *, group_id: int, now: datetime) -> Sequence[Training]:
        rows = tx.session.execute(
            select(TrainingTable).where(
                TrainingTable.group_id == int(group_id),
                TrainingTable.schedule_id.is_not(None),
                TrainingTable.start_time > now,
            )
        ).scalars()
        return [_to_training(r) for r in rows]

    def delete_many(self, tx: Transaction, training_ids: Sequence[int]) -> int:
        if not training_ids:
            return 0
        result = tx.session.execute(
            delete(TrainingTable).where(TrainingTable.id.in_([int(i) for i in training_ids]))
        )
        return int(result.rowcount or 0)
