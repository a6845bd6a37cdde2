from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.numbers import mean_or_none
from ..core.enums import EvaluationType
from ..events.model import EventRef
from .model import CategoryAverages, CategoryRatings, EvaluationRow, RatingHistoryEntry, RatingStats

CATEGORY_FIELDS = {
    EvaluationType.TECHNIQUE: "technical",
    EvaluationType.TACTICS: "tactical",
    EvaluationType.PHYSICAL: "physical",
    EvaluationType.PSYCHOLOGICAL: "psychological",
}


@dataclass
class _EventGroup:
    ref: EventRef
    day: date
    evaluations: list = field(default_factory=list)


def _in_window(day: date, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def build_rating_stats(
    rows: Sequence[EvaluationRow],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> RatingStats:
    """Aggregate a player's evaluations into per-event history and averages.

    `rows` should be ordered oldest first. An event outside [start, end] is
    dropped together with all of its evaluations.
    """
    groups: dict[str, _EventGroup] = {}
    for row in rows:
        key = row.evaluation.event.key
        group = groups.get(key)
        if group is None:
            group = _EventGroup(ref=row.evaluation.event, day=row.event.start_time.date())
            groups[key] = group
        group.evaluations.append(row.evaluation)

    kept = sorted((g for g in groups.values() if _in_window(g.day, start, end)), key=lambda g: g.day)

    history: list[RatingHistoryEntry] = []
    per_category: dict[str, list[float]] = {name: [] for name in CATEGORY_FIELDS.values()}

    for group in kept:
        ratings: dict[str, int] = {}
        for evaluation in group.evaluations:
            name = CATEGORY_FIELDS[evaluation.type]
            ratings[name] = evaluation.rating
            per_category[name].append(evaluation.rating)

        history.append(
            RatingHistoryEntry(
                date=group.day.isoformat(),
                event_type=group.ref.kind.value,
                event_id=group.ref.id,
                average_rating=mean_or_none(list(ratings.values())),
                ratings=CategoryRatings(**ratings),
            )
        )

    averages = [h.average_rating for h in history if h.average_rating is not None]
    return RatingStats(
        average_rating=mean_or_none(averages),
        total_events=len(history),
        by_category=CategoryAverages(**{name: mean_or_none(values) for name, values in per_category.items()}),
        history=history,
    )
