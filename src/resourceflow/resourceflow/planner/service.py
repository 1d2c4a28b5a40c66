from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..allocations.conflicts import AllocationSpan, find_conflict
from ..allocations.model import ProjectAllocation
from ..allocations.repository import AllocationRepository
from ..allocations.service import AllocationService, require_hours_per_day
from ..common.datetime_utils import require_date
from ..common.validators import pick, require_enum, require_int, require_positive_id
from ..core.constants import DEFAULT_HOURS_PER_DAY
from ..core.enums import ResizeEdge
from ..core.exceptions import ConflictError
from ..holidays.repository import HolidayRepository
from ..vacations.repository import VacationRepository
from .factory import EditStrategyFactory
from .strategies.base import EditRequest, EditStrategy

logger = logging.getLogger(__name__)


class PlannerService:
    """Calendar gestures: drop creates, move shifts, resize sets one edge."""

    def __init__(
        self,
        allocations: AllocationRepository,
        allocation_service: AllocationService,
        vacations: VacationRepository,
        holidays: HolidayRepository,
        *,
        strategy_factory: Optional[EditStrategyFactory] = None,
    ):
        self._allocations = allocations
        self._allocation_service = allocation_service
        self._vacations = vacations
        self._holidays = holidays
        self._factory = strategy_factory or EditStrategyFactory()

    def _ensure_no_conflict(self, candidate: AllocationSpan) -> None:
        existing = self._allocations.list_all(employee_id=candidate.employee_id, project_id=candidate.project_id)
        clash = find_conflict((AllocationSpan.of(a) for a in existing), candidate)
        if clash:
            raise ConflictError(
                "Employee is already allocated to this project on the selected dates",
                [f"Conflicts with allocation {clash.id} ({clash.start_date.isoformat()} to {clash.end_date.isoformat()})"],
            )

    def drop(self, payload: dict) -> ProjectAllocation:
        employee_id = require_positive_id(pick(payload, "employeeId", "employee_id"), "Employee")
        project_id = require_positive_id(pick(payload, "projectId", "project_id"), "Project")
        day = require_date(payload.get("date"), "Date")
        hours = pick(payload, "hoursPerDay", "hours_per_day")
        hours_per_day = require_hours_per_day(hours) if hours is not None else DEFAULT_HOURS_PER_DAY

        self._allocation_service.ensure_references(employee_id=employee_id, project_id=project_id)
        self._ensure_no_conflict(
            AllocationSpan(id=None, employee_id=employee_id, project_id=project_id, start_date=day, end_date=day)
        )
        draft = ProjectAllocation(
            id=0,
            employee_id=employee_id,
            project_id=project_id,
            start_date=day,
            end_date=day,
            hours_per_day=hours_per_day,
        )
        return self._allocation_service.add(draft)

    def _apply(self, allocation_id: int, strategy: EditStrategy, request: EditRequest) -> ProjectAllocation:
        allocation = self._allocation_service.get(allocation_id)
        new_range = strategy.new_range(allocation, request)
        updated = replace(allocation, start_date=new_range.start, end_date=new_range.end)
        self._ensure_no_conflict(AllocationSpan.of(updated))
        saved = self._allocation_service.save(updated)
        logger.info(
            "Allocation %s now %s..%s (%s)", saved.id, saved.start_date, saved.end_date, type(strategy).__name__
        )
        return saved

    def move(self, allocation_id: int, payload: dict) -> ProjectAllocation:
        offset = require_int(pick(payload, "dayOffset", "day_offset"), "Day offset")
        return self._apply(allocation_id, self._factory.for_move(), EditRequest(day_offset=offset))

    def resize(self, allocation_id: int, payload: dict) -> ProjectAllocation:
        edge = require_enum(ResizeEdge, payload.get("edge"), "Edge")
        target = require_date(payload.get("date"), "Date")
        return self._apply(allocation_id, self._factory.for_resize(edge), EditRequest(target_date=target))

    def cell(self, *, employee_id: int, day: date) -> dict:
        """What the calendar shows in one (employee, date) cell."""
        allocations = [
            a for a in self._allocations.list_overlapping(start=day, end=day, employee_id=employee_id) if a.covers(day)
        ]
        allocations.sort(key=lambda a: a.id)
        vacations = self._vacations.list_overlapping(start=day, end=day, employee_id=employee_id)
        holidays = self._holidays.list_between(start=day, end=day)
        return {
            "employee_id": employee_id,
            "date": day.isoformat(),
            "allocations": [a.to_dict() for a in allocations],
            "vacation": vacations[0].to_dict() if vacations else None,
            "holiday": holidays[0].to_dict() if holidays else None,
            "holidays": [h.to_dict() for h in holidays],
        }
