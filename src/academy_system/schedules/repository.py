from __future__ import annotations

from typing import Protocol, Sequence

from ..database.session import Transaction
from .model import ScheduleItem, TrainingSchedule


class ScheduleRepository(Protocol):
    def list_for_group(self, tx: Transaction, group_id: int) -> Sequence[TrainingSchedule]:
        """Slots of a group ordered by day_of_week."""

        raise NotImplementedError

    def replace_for_group(self, tx: Transaction, *, group_id: int, items: Sequence[ScheduleItem]) -> Sequence[TrainingSchedule]:
        """Delete every slot of the group, then insert the given items."""

        raise NotImplementedError
