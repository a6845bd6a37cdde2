from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for endpoint access control."""

    ADMIN = "ADMIN"
    COACH = "COACH"
    PLAYER = "PLAYER"
    PARENT = "PARENT"


class EventType(str, Enum):
    """Kind of event an attendance or evaluation row attaches to."""

    TRAINING = "TRAINING"
    MATCH = "MATCH"


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    SICK = "SICK"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


class EvaluationType(str, Enum):
    """Rating category of an evaluation."""

    TECHNIQUE = "TECHNIQUE"
    TACTICS = "TACTICS"
    PHYSICAL = "PHYSICAL"
    PSYCHOLOGICAL = "PSYCHOLOGICAL"


class StatsPeriod(str, Enum):
    ALL_TIME = "all_time"
    THIS_SEASON = "this_season"
    THIS_YEAR = "this_year"
    THIS_MONTH = "this_month"
