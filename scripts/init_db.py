from __future__ import annotations

import importlib

from academy_system.config import get_settings_module
from academy_system.database.bootstrap import apply_schema, list_tables, seed_demo_data
from academy_system.extensions import db
from academy_system.main import create_app


def main() -> None:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app = create_app(settings_module)

    with app.app_context():
        apply_schema(db)
        if getattr(settings, "AUTO_SEED_DB", False):
            seed_demo_data(db)
        tables = list_tables(db)

    print(f"OK: schema applied -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (tables={len(tables)})")


if __name__ == "__main__":
    main()
