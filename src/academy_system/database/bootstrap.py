from __future__ import annotations

import logging
from datetime import datetime, timedelta

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import inspect, select

from .models import CoachTable, GroupTable, MatchTable, PlayerTable, TrainingScheduleTable

logger = logging.getLogger(__name__)


def apply_schema(db: SQLAlchemy) -> None:
    """Create missing tables (idempotent). Needs an active app context."""
    db.create_all()


def list_tables(db: SQLAlchemy) -> list[str]:
    return list(inspect(db.engine).get_table_names())


def seed_demo_data(db: SQLAlchemy) -> None:
    """Insert a small demo academy unless it is already there."""
    session = db.session
    if session.execute(select(GroupTable).where(GroupTable.name == "U12")).scalar_one_or_none():
        return

    group = GroupTable(name="U12", year_of_birth=datetime.now().year - 12)
    session.add(group)
    session.flush()

    session.add_all(
        [
            PlayerTable(first_name="Liam", last_name="Novak", group_id=group.id),
            PlayerTable(first_name="Noah", last_name="Horvat", group_id=group.id),
            PlayerTable(first_name="Mia", last_name="Kovac", group_id=group.id),
            CoachTable(user_id=1, first_name="Demo", last_name="Coach"),
            TrainingScheduleTable(group_id=group.id, day_of_week=1, start_time="10:00", end_time="12:00", location="Field A"),
            TrainingScheduleTable(group_id=group.id, day_of_week=3, start_time="17:00", end_time="18:30", location="Field B"),
            MatchTable(
                group_id=group.id,
                start_time=datetime.now().replace(hour=11, minute=0, second=0, microsecond=0) + timedelta(days=7),
                opponent_name="City Juniors",
                is_home=True,
            ),
        ]
    )
    session.commit()
    logger.info("demo academy seeded group_id=%s", group.id)
