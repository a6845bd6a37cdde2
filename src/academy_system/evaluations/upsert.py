"""Per-record evaluation upsert, run inside the caller's transaction."""
from __future__ import annotations

from ..database.session import Transaction
from ..events.model import EventRef
from ..roster.model import Coach
from .model import Evaluation, EvaluationInput
from .repository import EvaluationRepository


def upsert_evaluation(
    tx: Transaction,
    evaluations: EvaluationRepository,
    *,
    event: EventRef,
    coach: Coach,
    record: EvaluationInput,
) -> Evaluation:
    """Create or overwrite the (player, event, category) evaluation.

    Categories are independent: rating TECHNIQUE never touches the TACTICS row.
    """
    comment = record.comment or None

    existing = evaluations.get_for_player_event_type(tx, player_id=record.player_id, event=event, type=record.type)
    if existing is None:
        return evaluations.create(
            tx,
            player_id=record.player_id,
            coach_id=coach.coach_id,
            event=event,
            type=record.type,
            rating=record.rating,
            comment=comment,
        )

    return evaluations.update(
        tx,
        evaluation_id=existing.evaluation_id,
        coach_id=coach.coach_id,
        rating=record.rating,
        comment=comment,
    )
