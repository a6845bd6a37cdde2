from __future__ import annotations

import sqlite3
import urllib.parse
from dataclasses import dataclass
from typing import Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


def build_database_uri(db_config: dict, *, database_url: Optional[str] = None) -> str:
    """SQLAlchemy URL for the settings module (DATABASE_URL wins over DB_CONFIG)."""
    if database_url:
        return database_url

    config = DBConfig(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "academy_db")),
    )
    # Encode the password so characters like '@' survive inside the URL.
    password = urllib.parse.quote_plus(config.password)
    return f"mysql+mysqlconnector://{config.user}:{password}@{config.host}:{config.port}/{config.database}"


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseConnection:
    """Hands out the ORM session bound to the current Flask app context."""

    def __init__(self, db: SQLAlchemy):
        self._db = db

    def session(self) -> Session:
        return self._db.session
