from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..events.model import Event, EventRef
from ..roster.model import Player


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one player's attendance at one event."""

    attendance_id: int
    player_id: int
    event: EventRef
    status: AttendanceStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model with player and event populated (for listings)."""

    attendance: Attendance
    player: Player
    event: Event


@dataclass(frozen=True)
class AttendanceInput:
    player_id: int
    status: AttendanceStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceStats:
    total: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0
    sick: int = 0
    excused: int = 0
    rate: int = 0
    total_trainings: int = 0
    total_matches: int = 0


@dataclass(frozen=True)
class PlayerAttendanceStats:
    player_id: int
    player_name: str
    stats: AttendanceStats
