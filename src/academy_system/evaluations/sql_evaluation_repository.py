from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import joinedload

from ..core.enums import EvaluationType
from ..database.models import EvaluationTable
from ..database.session import Transaction
from ..events.model import EventRef
from ..events.sql_event_repository import event_filter, event_from_rows, ref_from_columns
from ..roster.model import Coach
from ..roster.sql_roster_repository import to_player
from .model import Evaluation, EvaluationRow
from .repository import EvaluationRepository


def _to_evaluation(row: EvaluationTable) -> Evaluation:
    return Evaluation(
        evaluation_id=int(row.id),
        player_id=int(row.player_id),
        coach_id=int(row.coach_id),
        event=ref_from_columns(row.training_id, row.match_id),
        type=EvaluationType(row.type),
        rating=int(row.rating),
        comment=row.comment,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_row(row: EvaluationTable) -> EvaluationRow:
    return EvaluationRow(
        evaluation=_to_evaluation(row),
        player=to_player(row.player),
        coach=Coach(
            coach_id=int(row.coach.id),
            user_id=int(row.coach.user_id),
            first_name=row.coach.first_name,
            last_name=row.coach.last_name,
        ),
        event=event_from_rows(row.training, row.match),
    )


def _with_relations(stmt):
    return stmt.options(
        joinedload(EvaluationTable.player),
        joinedload(EvaluationTable.coach),
        joinedload(EvaluationTable.training),
        joinedload(EvaluationTable.match),
    )


class SQLEvaluationRepository(EvaluationRepository):
    def get_for_player_event_type(
        self,
        tx: Transaction,
        *,
        player_id: int,
        event: EventRef,
        type: EvaluationType,
    ) -> Optional[Evaluation]:
        row = tx.session.execute(
            select(EvaluationTable).where(
                EvaluationTable.player_id == int(player_id),
                event_filter(EvaluationTable, event),
                EvaluationTable.type == type,
            )
        ).scalar_one_or_none()
        return _to_evaluation(row) if row else None

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
        row = EvaluationTable(
            player_id=int(player_id),
            coach_id=int(coach_id),
            training_id=event.training_id,
            match_id=event.match_id,
            type=type,
            rating=int(rating),
            comment=comment,
        )
        tx.session.add(row)
        tx.session.flush()
        return _to_evaluation(row)

    def update(
        self,
        tx: Transaction,
        *,
        evaluation_id: int,
        coach_id: int,
        rating: int,
        comment: Optional[str] = None,
    ) -> Evaluation:
        row = tx.session.get(EvaluationTable, int(evaluation_id))
        if row is None:
            raise LookupError(f"evaluation {evaluation_id} disappeared during update")
        row.coach_id = int(coach_id)
        row.rating = int(rating)
        row.comment = comment
        tx.session.flush()
        return _to_evaluation(row)

    def delete_for_player_and_event(self, tx: Transaction, *, player_id: int, event: EventRef) -> int:
        result = tx.session.execute(
            delete(EvaluationTable).where(
                EvaluationTable.player_id == int(player_id),
                event_filter(EvaluationTable, event),
            )
        )
        return int(result.rowcount or 0)

    def list_for_event(self, tx: Transaction, event: EventRef) -> Sequence[EvaluationRow]:
        rows = tx.session.execute(
            _with_relations(select(EvaluationTable))
            .where(event_filter(EvaluationTable, event))
            .order_by(EvaluationTable.created_at.desc(), EvaluationTable.id.desc())
        ).scalars()
        return [_to_row(r) for r in rows]

    def list_for_player(self, tx: Transaction, player_id: int, *, newest_first: bool = True) -> Sequence[EvaluationRow]:
        if newest_first:
            order = (EvaluationTable.created_at.desc(), EvaluationTable.id.desc())
        else:
            order = (EvaluationTable.created_at.asc(), EvaluationTable.id.asc())

        rows = tx.session.execute(
            _with_relations(select(EvaluationTable))
            .where(EvaluationTable.player_id == int(player_id))
            .order_by(*order)
        ).scalars()
        return [_to_row(r) for r in rows]
