from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

COLLECTIONS = ("teamMembers", "projects", "holidays", "vacations", "projectAllocations")


def camel_case(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def camel_row(row: dict) -> dict:
    return {camel_case(k): v for k, v in row.items()}


@dataclass(frozen=True)
class ImportValidation:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors), "warnings": list(self.warnings)}


@dataclass
class ImportResult:
    imported: Dict[str, int] = field(default_factory=lambda: {name: 0 for name in COLLECTIONS})
    skipped: Dict[str, int] = field(default_factory=lambda: {name: 0 for name in COLLECTIONS})
    warnings: List[str] = field(default_factory=list)
    settings_applied: bool = False

    def to_dict(self) -> dict:
        return {
            "message": "Data imported successfully",
            "imported": dict(self.imported),
            "skipped": dict(self.skipped),
            "settingsApplied": self.settings_applied,
            "warnings": list(self.warnings),
        }
