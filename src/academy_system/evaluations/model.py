from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import EvaluationType
from ..events.model import Event, EventRef
from ..roster.model import Coach, Player


@dataclass(frozen=True)
class Evaluation:
    """Domain entity: one coach rating of one player in one category at one event."""

    evaluation_id: int
    player_id: int
    coach_id: int
    event: EventRef
    type: EvaluationType
    rating: int
    comment: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EvaluationRow:
    """Read-model with player, coach and event populated."""

    evaluation: Evaluation
    player: Player
    coach: Coach
    event: Event


@dataclass(frozen=True)
class EvaluationInput:
    player_id: int
    type: EvaluationType
    rating: int
    comment: Optional[str] = None


@dataclass(frozen=True)
class EvaluationBatch:
    """A batch targets exactly one of training_id / match_id."""

    records: list[EvaluationInput]
    training_id: Optional[int] = None
    match_id: Optional[int] = None


@dataclass(frozen=True)
class CategoryRatings:
    technical: Optional[int] = None
    tactical: Optional[int] = None
    physical: Optional[int] = None
    psychological: Optional[int] = None


@dataclass(frozen=True)
class CategoryAverages:
    technical: Optional[float] = None
    tactical: Optional[float] = None
    physical: Optional[float] = None
    psychological: Optional[float] = None


@dataclass(frozen=True)
class RatingHistoryEntry:
    date: str
    event_type: str
    event_id: int
    average_rating: Optional[float]
    ratings: CategoryRatings


@dataclass(frozen=True)
class RatingStats:
    average_rating: Optional[float]
    total_events: int
    by_category: CategoryAverages
    history: list[RatingHistoryEntry] = field(default_factory=list)
