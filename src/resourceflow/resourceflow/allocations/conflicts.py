"""Same-employee, same-project overlap detection.

Shared by the planner service and the client-side allocation cache, so it
works on plain spans instead of repository models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date, ranges_overlap


@dataclass(frozen=True)
class AllocationSpan:
    id: Optional[int]
    employee_id: int
    project_id: int
    start_date: date
    end_date: date

    @classmethod
    def of(cls, allocation) -> "AllocationSpan":
        return cls(
            id=allocation.id,
            employee_id=allocation.employee_id,
            project_id=allocation.project_id,
            start_date=allocation.start_date,
            end_date=allocation.end_date,
        )

    @classmethod
    def from_row(cls, row: dict) -> "AllocationSpan":
        """Build a span from an API row (snake_case or camelCase keys)."""

        def get(*keys):
            for key in keys:
                if key in row:
                    return row[key]
            return None

        start = get("start_date", "startDate")
        end = get("end_date", "endDate")
        return cls(
            id=get("id"),
            employee_id=int(get("employee_id", "employeeId")),
            project_id=int(get("project_id", "projectId")),
            start_date=start if isinstance(start, date) else parse_iso_date(start),
            end_date=end if isinstance(end, date) else parse_iso_date(end),
        )


def find_conflict(existing: Iterable[AllocationSpan], candidate: AllocationSpan) -> Optional[AllocationSpan]:
    """First allocation of the same employee and project overlapping the candidate range.

    The candidate's own id is ignored, so an edited allocation never conflicts with itself.
    """
    for span in existing:
        if candidate.id is not None and span.id == candidate.id:
            continue
        if span.employee_id != candidate.employee_id or span.project_id != candidate.project_id:
            continue
        if ranges_overlap(span.start_date, span.end_date, candidate.start_date, candidate.end_date):
            return span
    return None


def has_conflict(existing: Iterable[AllocationSpan], candidate: AllocationSpan) -> bool:
    return find_conflict(existing, candidate) is not None
