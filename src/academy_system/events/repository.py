from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..database.session import Transaction
from .model import Event, EventRef, Group, NewTraining, Training


class GroupRepository(Protocol):
    def get_by_id(self, tx: Transaction, group_id: int) -> Optional[Group]:
        raise NotImplementedError


class EventRepository(Protocol):
    def get_event(self, tx: Transaction, ref: EventRef) -> Optional[Event]:
        """Resolve a training or match by reference."""

        raise NotImplementedError


class TrainingRepository(Protocol):
    def list_for_group_between(self, tx: Transaction, *, group_id: int, start: date, end: date) -> Sequence[Training]:
        """Trainings of a group whose start date lies in [start, end]."""

        raise NotImplementedError

    def add_many(self, tx: Transaction, trainings: Sequence[NewTraining]) -> Sequence[Training]:
        raise NotImplementedError

    def list_future_generated(self, tx: Transaction, *, group_id: int, now: datetime) -> Sequence[Training]:
        """Trainings starting after now that were generated from a schedule row."""

        raise NotImplementedError

    def delete_many(self, tx: Transaction, training_ids: Sequence[int]) -> int:
        raise NotImplementedError
