from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    player_id: int
    first_name: str
    last_name: str
    group_id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Coach:
    coach_id: int
    user_id: int
    first_name: str
    last_name: str
