from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Vacation:
    id: int
    employee_id: int
    employee_name: str
    start_date: date
    end_date: date
    type: str = "vacation"
    notes: Optional[str] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "type": self.type,
            "notes": self.notes,
        }
