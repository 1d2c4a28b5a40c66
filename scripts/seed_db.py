from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.resourceflow.resourceflow.database.bootstrap import apply_schema, ensure_default_settings, seed_sample_data
from src.resourceflow.resourceflow.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig(url=settings.DATABASE_URL))

    apply_schema(conn)
    ensure_default_settings(conn)
    if seed_sample_data(conn):
        print(f"OK: Seeded sample data -> {conn.engine.url.render_as_string(hide_password=True)}")
    else:
        print("OK: Team members already exist, sample data not inserted")


if __name__ == "__main__":
    main()
