from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import require_date
from ..common.validators import has_any, pick, require_non_empty, require_positive_id, sanitize_text
from ..core.constants import MAX_NAME_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from ..team_members.repository import TeamMemberRepository
from .model import Vacation
from .repository import VacationRepository


class VacationService:
    def __init__(self, vacations: VacationRepository, members: TeamMemberRepository):
        self._vacations = vacations
        self._members = members

    def list(self, *, employee_id: Optional[int] = None) -> Sequence[Vacation]:
        return self._vacations.list_all(employee_id=employee_id)

    def get(self, vacation_id: int) -> Vacation:
        vacation = self._vacations.get(vacation_id=int(vacation_id))
        if not vacation:
            raise NotFoundError("Vacation not found")
        return vacation

    def _member_name(self, employee_id: int) -> str:
        member = self._members.get(member_id=employee_id)
        if not member:
            raise ValidationError("Team member does not exist")
        return member.name

    def create(self, payload: dict) -> Vacation:
        employee_id = require_positive_id(pick(payload, "employeeId", "employee_id"), "Employee")
        member_name = self._member_name(employee_id)
        name_input = pick(payload, "employeeName", "employee_name")
        employee_name = require_non_empty(name_input, "Employee name", max_length=MAX_NAME_LENGTH) if name_input else member_name

        start = require_date(pick(payload, "startDate", "start_date"), "Start date")
        end = require_date(pick(payload, "endDate", "end_date"), "End date")
        if start > end:
            raise ValidationError("Start date must be before or equal to end date")

        vacation_type = sanitize_text(payload.get("type"), max_length=30) or "vacation"
        notes = sanitize_text(payload.get("notes")) or None

        vacation_id = self._vacations.create(
            employee_id=employee_id,
            employee_name=employee_name,
            start_date=start,
            end_date=end,
            type=vacation_type,
            notes=notes,
        )
        return Vacation(
            id=vacation_id,
            employee_id=employee_id,
            employee_name=employee_name,
            start_date=start,
            end_date=end,
            type=vacation_type,
            notes=notes,
        )

    def update(self, vacation_id: int, payload: dict) -> Vacation:
        vacation = self.get(vacation_id)
        changes: dict = {}

        if has_any(payload, "employeeId", "employee_id"):
            employee_id = require_positive_id(pick(payload, "employeeId", "employee_id"), "Employee")
            changes["employee_id"] = employee_id
            changes["employee_name"] = self._member_name(employee_id)
        if has_any(payload, "employeeName", "employee_name"):
            changes["employee_name"] = require_non_empty(
                pick(payload, "employeeName", "employee_name"), "Employee name", max_length=MAX_NAME_LENGTH
            )
        if has_any(payload, "startDate", "start_date"):
            changes["start_date"] = require_date(pick(payload, "startDate", "start_date"), "Start date")
        if has_any(payload, "endDate", "end_date"):
            changes["end_date"] = require_date(pick(payload, "endDate", "end_date"), "End date")
        if "type" in payload:
            changes["type"] = sanitize_text(payload["type"], max_length=30) or "vacation"
        if "notes" in payload:
            changes["notes"] = sanitize_text(payload["notes"]) or None

        updated = replace(vacation, **changes)
        if updated.start_date > updated.end_date:
            raise ValidationError("Start date must be before or equal to end date")
        self._vacations.update(vacation=updated)
        return updated

    def delete(self, vacation_id: int) -> None:
        if not self._vacations.delete(vacation_id=int(vacation_id)):
            raise NotFoundError("Vacation not found")
