from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Tuple

from ..core.constants import EXPORT_VERSION
from ..core.exceptions import ValidationError
from .model import COLLECTIONS

BACKUP_DESCRIPTION = "ResourceFlow Database Backup"
LATEST_BACKUP_NAME = "latest-backup.json"


def build_backup(envelope: dict, *, created: datetime) -> dict:
    data = {name: envelope[name] for name in COLLECTIONS}
    data["settings"] = envelope.get("settings") or {}
    summary = {name: len(envelope[name]) for name in COLLECTIONS}
    summary["settings"] = len(data["settings"])
    return {
        "metadata": {
            "created": created.isoformat(),
            "version": EXPORT_VERSION,
            "description": BACKUP_DESCRIPTION,
        },
        "data": data,
        "summary": summary,
    }


def backup_to_envelope(backup: dict) -> dict:
    """Turn a backup file back into an import envelope."""
    if not isinstance(backup, dict) or not isinstance(backup.get("data"), dict):
        raise ValidationError("Backup file is missing its data section")
    metadata = backup.get("metadata") or {}
    envelope = dict(backup["data"])
    envelope["version"] = metadata.get("version", EXPORT_VERSION)
    return envelope


def write_backup(backup: dict, out_dir: Path, *, day: str) -> Tuple[Path, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    text = json.dumps(backup, indent=2, ensure_ascii=False)
    dated = out_dir / f"backup-{day}.json"
    latest = out_dir / LATEST_BACKUP_NAME
    dated.write_text(text, encoding="utf-8")
    latest.write_text(text, encoding="utf-8")
    return dated, latest


def read_backup(path: Path) -> dict:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Backup file is not valid JSON: {e.msg}")
