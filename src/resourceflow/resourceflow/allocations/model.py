from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import DEFAULT_HOURS_PER_DAY


@dataclass(frozen=True)
class ProjectAllocation:
    id: int
    employee_id: int
    project_id: int
    start_date: date
    end_date: date
    hours_per_day: float = DEFAULT_HOURS_PER_DAY
    status: str = "active"

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "project_id": self.project_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "hours_per_day": self.hours_per_day,
            "status": self.status,
        }
