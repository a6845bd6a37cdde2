from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from sqlalchemy.orm import Session

from .connection import DatabaseConnection


@dataclass(frozen=True)
class Transaction:
    """Unit of work handed to repository calls that must run in one transaction."""

    session: Session


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator[Transaction]:
    session = conn_factory.session()
    try:
        yield Transaction(session=session)
        session.commit()
    except Exception:
        session.rollback()
        raise
