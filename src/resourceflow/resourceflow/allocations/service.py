from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import require_date
from ..common.validators import has_any, pick, require_number, require_positive_id, sanitize_text
from ..core.constants import DEFAULT_HOURS_PER_DAY, MAX_HOURS_PER_DAY
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..team_members.repository import TeamMemberRepository
from .model import ProjectAllocation
from .repository import AllocationRepository

logger = logging.getLogger(__name__)


def require_hours_per_day(value) -> float:
    return require_number(value, "Hours per day", min_value=0, max_value=MAX_HOURS_PER_DAY)


def check_range(allocation: ProjectAllocation) -> None:
    if allocation.start_date > allocation.end_date:
        raise ValidationError("Start date must be before or equal to end date")


class AllocationService:
    """Plain CRUD over allocations.

    Referenced member and project must exist. Overlap checks live in the planner.
    """

    def __init__(self, allocations: AllocationRepository, members: TeamMemberRepository, projects: ProjectRepository):
        self._allocations = allocations
        self._members = members
        self._projects = projects

    def list(self, *, employee_id: Optional[int] = None, project_id: Optional[int] = None) -> Sequence[ProjectAllocation]:
        return self._allocations.list_all(employee_id=employee_id, project_id=project_id)

    def get(self, allocation_id: int) -> ProjectAllocation:
        allocation = self._allocations.get(allocation_id=int(allocation_id))
        if not allocation:
            raise NotFoundError("Allocation not found")
        return allocation

    def ensure_references(self, *, employee_id: int, project_id: int) -> None:
        if not self._members.get(member_id=employee_id):
            raise ValidationError("Team member does not exist")
        if not self._projects.get(project_id=project_id):
            raise ValidationError("Project does not exist")

    def add(self, draft: ProjectAllocation) -> ProjectAllocation:
        check_range(draft)
        self.ensure_references(employee_id=draft.employee_id, project_id=draft.project_id)
        allocation_id = self._allocations.create(
            employee_id=draft.employee_id,
            project_id=draft.project_id,
            start_date=draft.start_date,
            end_date=draft.end_date,
            hours_per_day=draft.hours_per_day,
            status=draft.status,
        )
        logger.info(
            "Created allocation %s (employee=%s project=%s %s..%s)",
            allocation_id, draft.employee_id, draft.project_id, draft.start_date, draft.end_date,
        )
        return replace(draft, id=allocation_id)

    def save(self, allocation: ProjectAllocation) -> ProjectAllocation:
        check_range(allocation)
        if not self._allocations.update(allocation=allocation):
            raise NotFoundError("Allocation not found")
        return allocation

    def create(self, payload: dict) -> ProjectAllocation:
        hours = pick(payload, "hoursPerDay", "hours_per_day")
        draft = ProjectAllocation(
            id=0,
            employee_id=require_positive_id(pick(payload, "employeeId", "employee_id"), "Employee"),
            project_id=require_positive_id(pick(payload, "projectId", "project_id"), "Project"),
            start_date=require_date(pick(payload, "startDate", "start_date"), "Start date"),
            end_date=require_date(pick(payload, "endDate", "end_date"), "End date"),
            hours_per_day=require_hours_per_day(hours) if hours is not None else DEFAULT_HOURS_PER_DAY,
            status=sanitize_text(payload.get("status"), max_length=20) or "active",
        )
        return self.add(draft)

    def update(self, allocation_id: int, payload: dict) -> ProjectAllocation:
        allocation = self.get(allocation_id)
        changes: dict = {}

        if has_any(payload, "employeeId", "employee_id"):
            changes["employee_id"] = require_positive_id(pick(payload, "employeeId", "employee_id"), "Employee")
        if has_any(payload, "projectId", "project_id"):
            changes["project_id"] = require_positive_id(pick(payload, "projectId", "project_id"), "Project")
        if has_any(payload, "startDate", "start_date"):
            changes["start_date"] = require_date(pick(payload, "startDate", "start_date"), "Start date")
        if has_any(payload, "endDate", "end_date"):
            changes["end_date"] = require_date(pick(payload, "endDate", "end_date"), "End date")
        if has_any(payload, "hoursPerDay", "hours_per_day"):
            changes["hours_per_day"] = require_hours_per_day(pick(payload, "hoursPerDay", "hours_per_day"))
        if "status" in payload:
            changes["status"] = sanitize_text(payload["status"], max_length=20) or "active"

        updated = replace(allocation, **changes)
        if "employee_id" in changes or "project_id" in changes:
            self.ensure_references(employee_id=updated.employee_id, project_id=updated.project_id)
        return self.save(updated)

    def delete(self, allocation_id: int) -> None:
        if not self._allocations.delete(allocation_id=int(allocation_id)):
            raise NotFoundError("Allocation not found")
