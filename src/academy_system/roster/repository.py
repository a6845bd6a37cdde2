from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..database.session import Transaction
from .model import Coach, Player


class PlayerRepository(Protocol):
    def get_by_id(self, tx: Transaction, player_id: int) -> Optional[Player]:
        raise NotImplementedError

    def list_by_group(self, tx: Transaction, group_id: int) -> Sequence[Player]:
        raise NotImplementedError


class CoachRepository(Protocol):
    def get_by_user_id(self, tx: Transaction, user_id: int) -> Optional[Coach]:
        """Coach profile owned by the given user account."""

        raise NotImplementedError
