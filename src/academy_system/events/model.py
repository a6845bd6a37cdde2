from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventType


@dataclass(frozen=True)
class EventRef:
    """Reference to exactly one event: a training or a match."""

    kind: EventType
    id: int

    @classmethod
    def training(cls, training_id: int) -> "EventRef":
        return cls(EventType.TRAINING, int(training_id))

    @classmethod
    def match(cls, match_id: int) -> "EventRef":
        return cls(EventType.MATCH, int(match_id))

    @property
    def training_id(self) -> Optional[int]:
        return self.id if self.kind == EventType.TRAINING else None

    @property
    def match_id(self) -> Optional[int]:
        return self.id if self.kind == EventType.MATCH else None

    @property
    def key(self) -> str:
        return f"{self.kind.value}:{self.id}"

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()} with ID {self.id}"


@dataclass(frozen=True)
class Group:
    group_id: int
    name: str
    year_of_birth: int


@dataclass(frozen=True)
class Training:
    training_id: int
    group_id: int
    start_time: datetime
    end_time: datetime
    location: str
    topic: Optional[str] = None
    schedule_id: Optional[int] = None

    @property
    def ref(self) -> EventRef:
        return EventRef.training(self.training_id)


@dataclass(frozen=True)
class NewTraining:
    """Training built by the schedule expander, not yet persisted."""

    group_id: int
    start_time: datetime
    end_time: datetime
    location: str
    topic: Optional[str]
    schedule_id: int


@dataclass(frozen=True)
class Match:
    match_id: int
    group_id: int
    start_time: datetime
    opponent_name: str
    is_home: bool
    end_time: Optional[datetime] = None

    @property
    def ref(self) -> EventRef:
        return EventRef.match(self.match_id)


@dataclass(frozen=True)
class Event:
    """The parts of a training or match that attendance and evaluations care about."""

    ref: EventRef
    group_id: int
    start_time: datetime
    end_time: Optional[datetime]
