from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ..allocations.model import ProjectAllocation
from ..allocations.repository import AllocationRepository
from ..common.datetime_utils import add_months, is_weekend, iter_days, month_bounds, overlap
from ..core.constants import DEFAULT_PROJECT_COLOR
from ..core.enums import ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..holidays.model import Holiday
from ..holidays.repository import HolidayRepository
from ..projects.model import Project
from ..projects.repository import ProjectRepository
from ..settings.model import Settings
from ..settings.service import SettingsService
from ..team_members.model import TeamMember
from ..team_members.repository import TeamMemberRepository
from ..vacations.model import Vacation
from ..vacations.repository import VacationRepository
from .calculator.base import CapacityCalculator
from .calculator.standard_calculator import StandardCapacityCalculator
from .model import DayLoad, MemberUtilization, ProjectHours, load_level
from .working_days import holiday_dates_for, is_working_day, vacation_days, weekday_holidays, working_days

MAX_TIMELINE_MONTHS = 24
MAX_DAILY_RANGE_DAYS = 92


class UtilizationReportService:
    """All capacity/utilization arithmetic, bucketed by month or by day."""

    def __init__(
        self,
        members: TeamMemberRepository,
        projects: ProjectRepository,
        holidays: HolidayRepository,
        vacations: VacationRepository,
        allocations: AllocationRepository,
        settings: SettingsService,
        *,
        calculator: Optional[CapacityCalculator] = None,
    ):
        self._members = members
        self._projects = projects
        self._holidays = holidays
        self._vacations = vacations
        self._allocations = allocations
        self._settings = settings
        self._calculator = calculator or StandardCapacityCalculator()

    @property
    def calculator(self) -> CapacityCalculator:
        return self._calculator

    def _get_member(self, member_id: int) -> TeamMember:
        member = self._members.get(member_id=int(member_id))
        if not member:
            raise NotFoundError("Team member not found")
        return member

    def _projects_by_id(self) -> Dict[int, Project]:
        return {p.id: p for p in self._projects.list_all()}

    def _allocated_hours(self, allocation: ProjectAllocation, start: date, end: date, holiday_dates: set) -> float:
        span = overlap(allocation.start_date, allocation.end_date, start, end)
        if not span:
            return 0.0
        days = len(working_days(span[0], span[1], holiday_dates))
        return self._calculator.allocated_hours(hours_per_day=allocation.hours_per_day, working_days=days)

    def _member_month(
        self,
        member: TeamMember,
        month: date,
        *,
        settings: Settings,
        holidays: Sequence[Holiday],
        vacations: Sequence[Vacation],
        allocations: Sequence[ProjectAllocation],
        projects: Dict[int, Project],
    ) -> MemberUtilization:
        first, last = month_bounds(month)
        holiday_dates = holiday_dates_for(holidays, member.country)
        off_days = vacation_days([v for v in vacations if v.employee_id == member.id], first, last, holiday_dates)

        breakdown = self._calculator.capacity(
            weekly_hours=settings.weekly_hours_for(member.country),
            buffer_percent=settings.buffer,
            holiday_days=len(weekday_holidays(first, last, holiday_dates)),
            vacation_days=len(off_days),
        )

        per_project: Dict[int, float] = defaultdict(float)
        for a in allocations:
            if a.employee_id != member.id:
                continue
            per_project[a.project_id] += self._allocated_hours(a, first, last, holiday_dates)

        project_rows = []
        for project_id, hours in sorted(per_project.items(), key=lambda kv: kv[1], reverse=True):
            project = projects.get(project_id)
            project_rows.append(
                ProjectHours(
                    project_id=project_id,
                    project_name=project.name if project else f"Project {project_id}",
                    color=project.color if project else DEFAULT_PROJECT_COLOR,
                    hours=hours,
                )
            )

        allocated = sum(per_project.values())
        return MemberUtilization(
            member_id=member.id,
            member_name=member.name,
            role=member.role,
            country=member.country.value,
            month=first,
            capacity=breakdown,
            allocated_hours=allocated,
            utilization_percent=self._calculator.utilization_percent(allocated, breakdown.available_hours),
            projects=project_rows,
        )

    def _month_inputs(self, month: date, *, employee_id: Optional[int] = None):
        first, last = month_bounds(month)
        return dict(
            settings=self._settings.get(),
            holidays=self._holidays.list_between(start=first, end=last),
            vacations=self._vacations.list_overlapping(start=first, end=last, employee_id=employee_id),
            allocations=self._allocations.list_overlapping(start=first, end=last, employee_id=employee_id),
            projects=self._projects_by_id(),
        )

    def member_month(self, *, member_id: int, month: date) -> MemberUtilization:
        member = self._get_member(member_id)
        return self._member_month(member, month, **self._month_inputs(month, employee_id=member.id))

    def team_month(self, *, month: date) -> List[MemberUtilization]:
        inputs = self._month_inputs(month)
        return [self._member_month(m, month, **inputs) for m in self._members.list_all(active_only=True)]

    def timeline(self, *, member_id: int, start_month: date, months: int) -> List[MemberUtilization]:
        if months < 1 or months > MAX_TIMELINE_MONTHS:
            raise ValidationError(f"months must be between 1 and {MAX_TIMELINE_MONTHS}")
        member = self._get_member(member_id)
        out = []
        for i in range(months):
            month = add_months(start_month, i)
            out.append(self._member_month(member, month, **self._month_inputs(month, employee_id=member.id)))
        return out

    def project_distribution(self, *, month: date) -> List[ProjectHours]:
        """Hours per project for the month, largest first; projects without hours are omitted."""
        first, last = month_bounds(month)
        members = {m.id: m for m in self._members.list_all()}
        holidays = self._holidays.list_between(start=first, end=last)
        projects = self._projects_by_id()

        totals: Dict[int, float] = defaultdict(float)
        for a in self._allocations.list_overlapping(start=first, end=last):
            member = members.get(a.employee_id)
            if not member:
                continue
            totals[a.project_id] += self._allocated_hours(a, first, last, holiday_dates_for(holidays, member.country))

        rows = []
        for project_id, hours in totals.items():
            if hours <= 0:
                continue
            project = projects.get(project_id)
            rows.append(
                ProjectHours(
                    project_id=project_id,
                    project_name=project.name if project else f"Project {project_id}",
                    color=project.color if project else DEFAULT_PROJECT_COLOR,
                    hours=hours,
                )
            )
        rows.sort(key=lambda r: (-r.hours, r.project_name))
        return rows

    def dashboard(self, *, month: date) -> dict:
        members = self.team_month(month=month)
        distribution = self.project_distribution(month=month)
        active_projects = self._projects.list_all(status=ProjectStatus.ACTIVE)

        total_available = sum(m.capacity.available_hours for m in members)
        total_allocated = sum(m.allocated_hours for m in members)
        average = sum(m.utilization_percent for m in members) / len(members) if members else 0.0

        return {
            "month": month.strftime("%Y-%m"),
            "member_count": len(members),
            "active_project_count": len(active_projects),
            "total_available_hours": round(total_available, 2),
            "total_allocated_hours": round(total_allocated, 2),
            "team_utilization_percent": round(self._calculator.utilization_percent(total_allocated, total_available), 2),
            "average_utilization_percent": round(average, 2),
            "over_allocated_members": [m.member_name for m in members if m.over_allocated],
            "members": [m.to_dict() for m in members],
            "charts": {
                "utilization": {
                    "labels": [m.member_name for m in members],
                    "values": [round(m.display_percent, 2) for m in members],
                },
                "projects": {
                    "labels": [p.project_name for p in distribution],
                    "values": [round(p.hours, 2) for p in distribution],
                    "colors": [p.color for p in distribution],
                },
            },
        }

    def daily(self, *, start: date, end: date, employee_id: Optional[int] = None) -> dict:
        """Allocated hours and load level per member per day."""
        if start > end:
            raise ValidationError("Start date must be before or equal to end date")
        if (end - start) > timedelta(days=MAX_DAILY_RANGE_DAYS - 1):
            raise ValidationError(f"Date range must not exceed {MAX_DAILY_RANGE_DAYS} days")

        if employee_id is not None:
            members = [self._get_member(employee_id)]
        else:
            members = list(self._members.list_all(active_only=True))

        settings = self._settings.get()
        holidays = self._holidays.list_between(start=start, end=end)
        vacations = self._vacations.list_overlapping(start=start, end=end, employee_id=employee_id)
        allocations = self._allocations.list_overlapping(start=start, end=end, employee_id=employee_id)
        days = list(iter_days(start, end))

        rows = []
        for member in members:
            holiday_dates = holiday_dates_for(holidays, member.country)
            daily_hours = self._calculator.daily_hours(settings.weekly_hours_for(member.country))
            own_allocations = [a for a in allocations if a.employee_id == member.id]
            own_vacations = [v for v in vacations if v.employee_id == member.id]

            loads = []
            for day in days:
                hours = 0.0
                if is_working_day(day, holiday_dates):
                    hours = sum(a.hours_per_day for a in own_allocations if a.covers(day))
                loads.append(
                    DayLoad(
                        day=day,
                        hours=hours,
                        level=load_level(hours, daily_hours),
                        is_weekend=is_weekend(day),
                        is_holiday=day in holiday_dates,
                        on_vacation=any(v.covers(day) for v in own_vacations),
                    )
                )
            rows.append(
                {
                    "member_id": member.id,
                    "member_name": member.name,
                    "daily_hours": round(daily_hours, 2),
                    "days": [d.to_dict() for d in loads],
                }
            )

        return {"start": start.isoformat(), "end": end.isoformat(), "days": [d.isoformat() for d in days], "members": rows}
