from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.resourceflow.resourceflow.database.bootstrap import apply_schema, ensure_default_settings, list_tables
from src.resourceflow.resourceflow.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig(url=settings.DATABASE_URL))

    apply_schema(conn)
    added = ensure_default_settings(conn)
    tables = list_tables(conn)
    print(
        "OK: Applied schema -> "
        f"{conn.engine.url.render_as_string(hide_password=True)} "
        f"(tables={len(tables)}, default settings added={added})"
    )


if __name__ == "__main__":
    main()
