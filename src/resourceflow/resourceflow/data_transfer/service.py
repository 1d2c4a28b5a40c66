from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Set

import pandas as pd

from ..allocations.service import AllocationService
from ..common.validators import pick
from ..core.constants import EXPORT_SOURCE, EXPORT_VERSION
from ..core.enums import ImportMode
from ..core.exceptions import ValidationError
from ..database.bootstrap import clear_tables
from ..database.connection import DatabaseConnection
from ..holidays.service import HolidayService
from ..projects.repository import ProjectRepository
from ..projects.service import ProjectService
from ..settings.service import SettingsService
from ..team_members.repository import TeamMemberRepository
from ..team_members.service import TeamMemberService
from ..vacations.service import VacationService
from .model import COLLECTIONS, ImportResult, ImportValidation, camel_row

logger = logging.getLogger(__name__)

_SHEETS = {
    "teamMembers": "Team Members",
    "projects": "Projects",
    "holidays": "Holidays",
    "vacations": "Vacations",
    "projectAllocations": "Allocations",
}

_LABELS = {
    "teamMembers": "Team member",
    "projects": "Project",
    "holidays": "Holiday",
    "vacations": "Vacation",
    "projectAllocations": "Allocation",
}


def _as_id(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _rows(data: dict, name: str) -> list:
    rows = data.get(name)
    return rows if isinstance(rows, list) else []


def _exported_ids(rows) -> Set[int]:
    return {i for i in (_as_id(row.get("id")) for row in rows) if i is not None}


def validate_import(data) -> ImportValidation:
    """Structural checks before anything is written."""
    errors: list[str] = []
    warnings: list[str] = []

    if not isinstance(data, dict):
        return ImportValidation(errors=["Invalid data format"])

    for name in COLLECTIONS:
        if not isinstance(data.get(name), list):
            errors.append(f"Missing or invalid {name} array")
    if "settings" in data and not isinstance(data["settings"], dict):
        errors.append("Invalid settings object")

    version = data.get("version")
    if version and version != EXPORT_VERSION:
        warnings.append(f"Data version {version} may not be compatible with current version {EXPORT_VERSION}")

    for name in COLLECTIONS:
        for index, row in enumerate(_rows(data, name)):
            if not isinstance(row, dict):
                errors.append(f"{_LABELS[name]} at index {index} is not an object")

    for index, holiday in enumerate(_rows(data, "holidays")):
        if isinstance(holiday, dict) and not (holiday.get("name") and holiday.get("date")):
            errors.append(f"Holiday at index {index} is missing name or date")

    for index, member in enumerate(_rows(data, "teamMembers")):
        if isinstance(member, dict) and not (member.get("name") and member.get("role") and member.get("country")):
            errors.append(f"Team member at index {index} is missing required fields")

    for index, project in enumerate(_rows(data, "projects")):
        if isinstance(project, dict) and not project.get("name"):
            errors.append(f"Project at index {index} is missing name")

    for index, allocation in enumerate(_rows(data, "projectAllocations")):
        if isinstance(allocation, dict) and not (
            pick(allocation, "employeeId", "employee_id") and pick(allocation, "projectId", "project_id")
        ):
            errors.append(f"Allocation at index {index} is missing required fields")

    for index, vacation in enumerate(_rows(data, "vacations")):
        if isinstance(vacation, dict) and not pick(vacation, "employeeId", "employee_id"):
            errors.append(f"Vacation at index {index} is missing employeeId")

    return ImportValidation(errors=errors, warnings=warnings)


class DataTransferService:
    def __init__(
        self,
        conn: DatabaseConnection,
        *,
        members: TeamMemberRepository,
        projects: ProjectRepository,
        member_service: TeamMemberService,
        project_service: ProjectService,
        holiday_service: HolidayService,
        vacation_service: VacationService,
        allocation_service: AllocationService,
        settings_service: SettingsService,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._conn = conn
        self._members = members
        self._projects = projects
        self._member_service = member_service
        self._project_service = project_service
        self._holiday_service = holiday_service
        self._vacation_service = vacation_service
        self._allocation_service = allocation_service
        self._settings_service = settings_service
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def export_data(self) -> dict:
        collections = {
            "teamMembers": [camel_row(m.to_dict()) for m in self._member_service.list()],
            "projects": [camel_row(p.to_dict()) for p in self._project_service.list()],
            "holidays": [camel_row(h.to_dict()) for h in self._holiday_service.list()],
            "vacations": [camel_row(v.to_dict()) for v in self._vacation_service.list()],
            "projectAllocations": [camel_row(a.to_dict()) for a in self._allocation_service.list()],
        }
        settings = self._settings_service.get().to_dict()
        total = sum(len(rows) for rows in collections.values()) + len(settings)
        return {
            **collections,
            "settings": settings,
            "exportDate": self._clock().isoformat(),
            "version": EXPORT_VERSION,
            "metadata": {
                "totalRecords": total,
                "exportSource": EXPORT_SOURCE,
                "exportType": "full",
            },
        }

    def stats(self) -> Dict[str, int]:
        data = self.export_data()
        out = {name: len(data[name]) for name in COLLECTIONS}
        out["settings"] = len(data["settings"])
        out["totalRecords"] = data["metadata"]["totalRecords"]
        return out

    def export_excel(self) -> bytes:
        """One sheet per entity plus a settings sheet."""
        data = self.export_data()
        buf = io.BytesIO()
        with pd.ExcelWriter(buf, engine="openpyxl") as writer:
            for name, sheet in _SHEETS.items():
                pd.DataFrame(data[name]).to_excel(writer, sheet_name=sheet, index=False)
            settings_rows = [{"setting": k, "value": v} for k, v in data["settings"].items()]
            pd.DataFrame(settings_rows).to_excel(writer, sheet_name="Settings", index=False)
        return buf.getvalue()

    def _create_rows(self, result: ImportResult, name: str, rows, create: Callable[[dict], object]) -> Dict[int, int]:
        id_map: Dict[int, int] = {}
        for index, row in enumerate(rows):
            try:
                created = create(row)
            except ValidationError as e:
                result.skipped[name] += 1
                result.warnings.append(f"{_LABELS[name]} at index {index} skipped: {e.message}")
                continue
            result.imported[name] += 1
            old_id = _as_id(row.get("id"))
            if old_id is not None:
                id_map[old_id] = created.id
        return id_map

    def _resolve(self, old_id, id_map: Dict[int, int], exported: Set[int], exists: Callable[[int], bool]) -> Optional[int]:
        candidate = _as_id(old_id)
        if candidate is None:
            return None
        if candidate in id_map:
            return id_map[candidate]
        # exported but not imported: never fall through to an unrelated stored row
        if candidate in exported:
            return None
        return candidate if exists(candidate) else None

    def import_data(self, data, *, mode: ImportMode = ImportMode.APPEND) -> ImportResult:
        validation = validate_import(data)
        if not validation.is_valid:
            raise ValidationError("Import data is invalid", validation.errors)

        result = ImportResult(warnings=list(validation.warnings))
        # clear and inserts commit together; any unexpected error rolls both back
        with self._conn.transaction():
            if mode == ImportMode.REPLACE:
                clear_tables(self._conn)
                logger.info("Cleared existing data before import")
            self._load(data, result)

        logger.info("Imported data (%s): %s", mode.value, result.imported)
        return result

    def _load(self, data: dict, result: ImportResult) -> None:
        member_ids = self._create_rows(result, "teamMembers", data["teamMembers"], self._member_service.create)
        project_ids = self._create_rows(result, "projects", data["projects"], self._project_service.create)
        self._create_rows(result, "holidays", data["holidays"], self._holiday_service.create)

        exported_members = _exported_ids(data["teamMembers"])
        exported_projects = _exported_ids(data["projects"])

        def member_exists(member_id: int) -> bool:
            return self._members.get(member_id=member_id) is not None

        def project_exists(project_id: int) -> bool:
            return self._projects.get(project_id=project_id) is not None

        vacations = []
        for index, row in enumerate(data["vacations"]):
            employee_id = self._resolve(pick(row, "employeeId", "employee_id"), member_ids, exported_members, member_exists)
            if employee_id is None:
                result.skipped["vacations"] += 1
                result.warnings.append(f"Vacation at index {index} skipped: unknown team member")
                continue
            vacations.append({**row, "employeeId": employee_id, "employee_id": employee_id})
        self._create_rows(result, "vacations", vacations, self._vacation_service.create)

        allocations = []
        for index, row in enumerate(data["projectAllocations"]):
            employee_id = self._resolve(pick(row, "employeeId", "employee_id"), member_ids, exported_members, member_exists)
            project_id = self._resolve(pick(row, "projectId", "project_id"), project_ids, exported_projects, project_exists)
            if employee_id is None or project_id is None:
                result.skipped["projectAllocations"] += 1
                result.warnings.append(f"Allocation at index {index} skipped: unknown team member or project")
                continue
            allocations.append(
                {**row, "employeeId": employee_id, "employee_id": employee_id, "projectId": project_id, "project_id": project_id}
            )
        self._create_rows(result, "projectAllocations", allocations, self._allocation_service.create)

        settings = data.get("settings") or {}
        if settings:
            try:
                self._settings_service.update(settings)
                result.settings_applied = True
            except ValidationError as e:
                result.warnings.append(f"Settings skipped: {e.message}")
