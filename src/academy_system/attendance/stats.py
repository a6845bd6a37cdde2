from __future__ import annotations

from typing import Iterable

from ..common.numbers import round_half_up
from ..core.enums import AttendanceStatus, EventType
from .model import Attendance, AttendanceStats


def summarize(attendances: Iterable[Attendance]) -> AttendanceStats:
    """Count rows by status and event kind; rate = (present + late) / total in percent."""
    counts = {status: 0 for status in AttendanceStatus}
    total = trainings = matches = 0

    for a in attendances:
        total += 1
        counts[a.status] += 1
        if a.event.kind == EventType.TRAINING:
            trainings += 1
        else:
            matches += 1

    rate = 0
    if total > 0:
        attended = counts[AttendanceStatus.PRESENT] + counts[AttendanceStatus.LATE]
        rate = int(round_half_up(attended / total * 100))

    return AttendanceStats(
        total=total,
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        sick=counts[AttendanceStatus.SICK],
        excused=counts[AttendanceStatus.EXCUSED],
        rate=rate,
        total_trainings=trainings,
        total_matches=matches,
    )
