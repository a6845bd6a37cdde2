from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import AbstractSet, Optional, Sequence

from ..common.datetime_utils import format_hhmm, iter_dates, parse_hhmm, sunday_based_weekday
from ..common.validators import require_int, require_non_empty, require_time
from ..core.constants import SATURDAY, SUNDAY
from ..core.exceptions import BadRequestError
from ..events.model import NewTraining
from .model import ScheduleItem, TrainingSchedule


@dataclass(frozen=True)
class Expansion:
    trainings: list[NewTraining]
    skipped: int


def validate_schedule_items(items: Sequence[ScheduleItem]) -> list[ScheduleItem]:
    """Check a weekly schedule and return it with times normalized to HH:MM.

    Rejects inverted or empty time windows and more than one slot per weekday.
    """
    normalized: list[ScheduleItem] = []
    for item in items:
        day = require_int(item.day_of_week, "dayOfWeek")
        if day < SUNDAY or day > SATURDAY:
            raise BadRequestError("dayOfWeek must be between 0 and 6")

        start = require_time(item.start_time, "startTime")
        end = require_time(item.end_time, "endTime")
        if end <= start:
            raise BadRequestError("End time must be after start time")

        normalized.append(
            ScheduleItem(
                day_of_week=day,
                start_time=format_hhmm(start),
                end_time=format_hhmm(end),
                location=require_non_empty(item.location, "location"),
            )
        )

    days = [i.day_of_week for i in normalized]
    if len(set(days)) != len(days):
        raise BadRequestError("Duplicate days in schedule")

    return normalized


def expand_schedule(
    slots: Sequence[TrainingSchedule],
    *,
    group_id: int,
    start: date,
    end: date,
    covered_dates: AbstractSet[date],
    default_topic: Optional[str] = None,
) -> Expansion:
    """Turn weekly slots into dated trainings for every day in [start, end].

    Days that already have a training are counted as skipped.
    """
    by_day: dict[int, TrainingSchedule] = {}
    for slot in slots:
        by_day[slot.day_of_week] = slot

    trainings: list[NewTraining] = []
    skipped = 0

    for day in iter_dates(start, end):
        slot = by_day.get(sunday_based_weekday(day))
        if slot is None:
            continue

        if day in covered_dates:
            skipped += 1
            continue

        trainings.append(
            NewTraining(
                group_id=int(group_id),
                start_time=datetime.combine(day, parse_hhmm(slot.start_time)),
                end_time=datetime.combine(day, parse_hhmm(slot.end_time)),
                location=slot.location,
                topic=default_topic,
                schedule_id=slot.schedule_id,
            )
        )

    return Expansion(trainings=trainings, skipped=skipped)
