from __future__ import annotations

from datetime import datetime

from academy_system.attendance.model import Attendance
from academy_system.attendance.stats import summarize
from academy_system.common.numbers import mean_or_none, round_half_up
from academy_system.core.enums import AttendanceStatus as S
from academy_system.events.model import EventRef


def _row(i: int, status: S, event: EventRef) -> Attendance:
    ts = datetime(2024, 1, 1, 10, 0)
    return Attendance(
        attendance_id=i, player_id=1, event=event, status=status, notes=None, created_at=ts, updated_at=ts
    )


def test_summarize_counts_and_rate():
    rows = [
        _row(1, S.PRESENT, EventRef.training(1)),
        _row(2, S.LATE, EventRef.training(2)),
        _row(3, S.ABSENT, EventRef.training(3)),
        _row(4, S.SICK, EventRef.match(1)),
        _row(5, S.EXCUSED, EventRef.match(2)),
    ]

    stats = summarize(rows)

    assert stats.total == 5
    assert (stats.present, stats.late, stats.absent, stats.sick, stats.excused) == (1, 1, 1, 1, 1)
    assert stats.rate == 40
    assert (stats.total_trainings, stats.total_matches) == (3, 2)


def test_summarize_empty():
    stats = summarize([])

    assert stats.total == 0
    assert stats.rate == 0


def test_rate_rounds_half_up():
    # 1 of 8 attended = 12.5%
    rows = [_row(1, S.PRESENT, EventRef.training(1))] + [_row(i, S.ABSENT, EventRef.training(i)) for i in range(2, 9)]

    assert summarize(rows).rate == 13


def test_round_half_up_helpers():
    assert round_half_up(2.5) == 3
    assert round_half_up(7.25, 1) == 7.3
    assert mean_or_none([]) is None
    assert mean_or_none([8, 6, 7]) == 7.0
