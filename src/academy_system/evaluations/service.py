from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_rating
from ..core.enums import StatsPeriod
from ..core.exceptions import BadRequestError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.session import Transaction, transaction
from ..events.model import EventRef
from ..events.repository import EventRepository
from ..roster.repository import CoachRepository, PlayerRepository
from .model import Evaluation, EvaluationBatch, EvaluationInput, EvaluationRow, RatingStats
from .periods import date_range_for_period
from .rating_stats import build_rating_stats
from .repository import EvaluationRepository
from .upsert import upsert_evaluation

logger = logging.getLogger(__name__)


def batch_event(batch: EvaluationBatch) -> EventRef:
    """The single event a batch targets; both or neither ids is a bad request."""
    has_training = batch.training_id is not None
    has_match = batch.match_id is not None
    if has_training == has_match:
        raise BadRequestError("Exactly one of trainingId or matchId must be provided")
    if has_training:
        return EventRef.training(batch.training_id)
    return EventRef.match(batch.match_id)


class EvaluationService:
    def __init__(
        self,
        conn: DatabaseConnection,
        evaluations: EvaluationRepository,
        events: EventRepository,
        players: PlayerRepository,
        coaches: CoachRepository,
    ):
        self._conn = conn
        self._evaluations = evaluations
        self._events = events
        self._players = players
        self._coaches = coaches

    def create_batch(self, batch: EvaluationBatch, coach_user_id: int) -> list[Evaluation]:
        event = batch_event(batch)
        if not batch.records:
            raise BadRequestError("records must not be empty")
        records = [
            EvaluationInput(player_id=r.player_id, type=r.type, rating=require_rating(r.rating), comment=r.comment)
            for r in batch.records
        ]

        try:
            with transaction(self._conn) as tx:
                self._require_event(tx, event)

                coach = self._coaches.get_by_user_id(tx, int(coach_user_id))
                if not coach:
                    raise NotFoundError("Coach profile not found")

                results: list[Evaluation] = []
                for record in records:
                    if not self._players.get_by_id(tx, record.player_id):
                        raise NotFoundError(f"Player with ID {record.player_id} not found")
                    results.append(upsert_evaluation(tx, self._evaluations, event=event, coach=coach, record=record))
        except (NotFoundError, BadRequestError):
            raise
        except Exception:
            logger.exception("create_batch failed event=%s records=%d", event.key, len(records))
            raise BadRequestError("Failed to create evaluations")

        logger.info("evaluations saved event=%s records=%d coach_user=%s", event.key, len(results), coach_user_id)
        return results

    def find_by_training(self, training_id: int) -> Sequence[EvaluationRow]:
        return self._find_by_event(EventRef.training(training_id))

    def find_by_match(self, match_id: int) -> Sequence[EvaluationRow]:
        return self._find_by_event(EventRef.match(match_id))

    def find_by_player(self, player_id: int) -> Sequence[EvaluationRow]:
        with transaction(self._conn) as tx:
            return self._evaluations.list_for_player(tx, int(player_id))

    def get_rating_stats(
        self,
        player_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> RatingStats:
        with transaction(self._conn) as tx:
            if not self._players.get_by_id(tx, int(player_id)):
                raise NotFoundError(f"Player with ID {player_id} not found")
            rows = self._evaluations.list_for_player(tx, int(player_id), newest_first=False)

        return build_rating_stats(rows, start=start_date, end=end_date)

    def get_rating_stats_for_period(
        self,
        player_id: int,
        period: StatsPeriod = StatsPeriod.ALL_TIME,
        *,
        today: Optional[date] = None,
    ) -> RatingStats:
        start, end = date_range_for_period(period, today or today_local())
        return self.get_rating_stats(player_id, start, end)

    def _find_by_event(self, event: EventRef) -> Sequence[EvaluationRow]:
        with transaction(self._conn) as tx:
            self._require_event(tx, event)
            return self._evaluations.list_for_event(tx, event)

    def _require_event(self, tx: Transaction, event: EventRef) -> None:
        if not self._events.get_event(tx, event):
            raise NotFoundError(f"{event} not found")
