from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EvaluationType
from ..database.session import Transaction
from ..events.model import EventRef
from .model import Evaluation, EvaluationRow


class EvaluationRepository(Protocol):
    def get_for_player_event_type(
        self,
        tx: Transaction,
        *,
        player_id: int,
        event: EventRef,
        type: EvaluationType,
    ) -> Optional[Evaluation]:
        raise NotImplementedError

    def create(
        self,
        tx: Transaction,
        *,
        player_id: int,
        coach_id: int,
        event: EventRef,
        type: EvaluationType,
        rating: int,
        comment: Optional[str] = None,
    ) -> Evaluation:
        raise NotImplementedError

    def update(
        self,
        tx: Transaction,
        *,
        evaluation_id: int,
        coach_id: int,
        rating: int,
        comment: Optional[str] = None,
    ) -> Evaluation:
        raise NotImplementedError

    def delete_for_player_and_event(self, tx: Transaction, *, player_id: int, event: EventRef) -> int:
        """Delete every category of a player's evaluations at one event; returns the row count."""

        raise NotImplementedError

    def list_for_event(self, tx: Transaction, event: EventRef) -> Sequence[EvaluationRow]:
        """Rows of one event, newest first."""

        raise NotImplementedError

    def list_for_player(self, tx: Transaction, player_id: int, *, newest_first: bool = True) -> Sequence[EvaluationRow]:
        raise NotImplementedError
