from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainingSchedule:
    """One weekly slot of a group."""

    schedule_id: int
    group_id: int
    day_of_week: int  # 0 (Sunday) - 6 (Saturday)
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM"
    location: str


@dataclass(frozen=True)
class ScheduleItem:
    """Requested slot for update_schedule, not yet persisted."""

    day_of_week: int
    start_time: str
    end_time: str
    location: str


@dataclass(frozen=True)
class GenerationResult:
    created: int
    skipped: int


@dataclass(frozen=True)
class CleanupResult:
    deleted: int
    kept: int
