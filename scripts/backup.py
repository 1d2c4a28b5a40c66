"""Backup or restore all ResourceFlow data as JSON.

Usage:
    python scripts/backup.py                 # write backups/backup-<date>.json and latest-backup.json
    python scripts/backup.py restore <file>  # clear tables and reload from a backup file
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.resourceflow.resourceflow.container import build_container
from src.resourceflow.resourceflow.core.enums import ImportMode
from src.resourceflow.resourceflow.core.exceptions import ValidationError
from src.resourceflow.resourceflow.data_transfer.backup import backup_to_envelope, build_backup, read_backup, write_backup
from src.resourceflow.resourceflow.database.bootstrap import apply_schema, ensure_default_settings


def _container():
    settings = importlib.import_module(get_settings_module())
    container = build_container(database_url=settings.DATABASE_URL)
    apply_schema(container.conn)
    ensure_default_settings(container.conn)
    return container


def create_backup(out_dir: Path) -> None:
    container = _container()
    now = datetime.now()
    backup = build_backup(container.data_transfer_service.export_data(), created=now)
    dated, latest = write_backup(backup, out_dir, day=now.strftime("%Y-%m-%d"))
    summary = ", ".join(f"{k}={v}" for k, v in backup["summary"].items())
    print(f"OK: Backup created: {dated} (also {latest.name}) [{summary}]")


def restore_backup(path: Path) -> None:
    container = _container()
    envelope = backup_to_envelope(read_backup(path))
    result = container.data_transfer_service.import_data(envelope, mode=ImportMode.REPLACE)
    restored = ", ".join(f"{k}={v}" for k, v in result.imported.items())
    print(f"OK: Restored from {path} [{restored}]")
    for warning in result.warnings:
        print(f"WARN: {warning}")


def main(argv=None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if args and args[0] == "restore":
            if len(args) < 2:
                raise SystemExit("Usage: python scripts/backup.py restore <file>")
            restore_backup(Path(args[1]))
        else:
            create_backup(REPO_ROOT / "backups")
    except ValidationError as e:
        details = "; ".join(e.details)
        raise SystemExit(f"Backup failed: {e.message}{' (' + details + ')' if details else ''}")


if __name__ == "__main__":
    main()
