from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.models import CoachTable, PlayerTable
from ..database.session import Transaction
from .model import Coach, Player
from .repository import CoachRepository, PlayerRepository


def to_player(row: PlayerTable) -> Player:
    return Player(
        player_id=int(row.id),
        first_name=row.first_name,
        last_name=row.last_name,
        group_id=int(row.group_id) if row.group_id is not None else None,
    )


class SQLPlayerRepository(PlayerRepository):
    def get_by_id(self, tx: Transaction, player_id: int) -> Optional[Player]:
        row = tx.session.get(PlayerTable, int(player_id))
        return to_player(row) if row else None

    def list_by_group(self, tx: Transaction, group_id: int) -> Sequence[Player]:
        rows = tx.session.execute(
            select(PlayerTable)
            .where(PlayerTable.group_id == int(group_id))
            .order_by(PlayerTable.last_name.asc(), PlayerTable.first_name.asc())
        ).scalars()
        return [to_player(r) for r in rows]


class SQLCoachRepository(CoachRepository):
    def get_by_user_id(self, tx: Transaction, user_id: int) -> Optional[Coach]:
        row = tx.session.execute(select(CoachTable).where(CoachTable.user_id == int(user_id))).scalar_one_or_none()
        if not row:
            return None
        return Coach(coach_id=int(row.id), user_id=int(row.user_id), first_name=row.first_name, last_name=row.last_name)
