from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import build_container
from .core.exceptions import AuthorizationError, BadRequestError, NotFoundError
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .database.connection import build_database_uri
from .evaluations.controller import register as register_evaluations
from .extensions import db
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(BadRequestError)
    def handle_bad_request(e: BadRequestError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def handle_forbidden(e: AuthorizationError):
        return jsonify({"message": str(e)}), 403


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SQLALCHEMY_DATABASE_URI"] = build_database_uri(
        getattr(settings, "DB_CONFIG", {}),
        database_url=getattr(settings, "DATABASE_URL", None),
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    db.init_app(app)

    with app.app_context():
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db)
            logger.info("schema ready settings=%s tables=%d", settings_module, len(list_tables(db)))
        if getattr(settings, "AUTO_SEED_DB", False):
            seed_demo_data(db)

    container = build_container(db=db)
    app.extensions["academy_container"] = container

    _register_error_handlers(app)
    register_schedules(app, container)
    register_attendance(app, container)
    register_evaluations(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
