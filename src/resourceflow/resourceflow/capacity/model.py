from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from ..core.enums import LoadLevel
from .calculator.base import CapacityBreakdown


def _r(value: float) -> float:
    return round(float(value), 2)


def clamp_percent(value: float) -> float:
    return min(max(value, 0.0), 100.0)


def load_level(hours: float, daily_hours: float) -> LoadLevel:
    if hours <= 0:
        return LoadLevel.NONE
    if daily_hours <= 0:
        return LoadLevel.OVER
    percent = hours / daily_hours * 100
    if percent <= 25:
        return LoadLevel.LOW
    if percent <= 50:
        return LoadLevel.MEDIUM
    if percent <= 75:
        return LoadLevel.HIGH
    if percent <= 100:
        return LoadLevel.FULL
    return LoadLevel.OVER


@dataclass(frozen=True)
class ProjectHours:
    project_id: int
    project_name: str
    color: str
    hours: float

    def to_dict(self) -> dict:
        return {
            "project_id": self.project_id,
            "project_name": self.project_name,
            "color": self.color,
            "hours": _r(self.hours),
        }


@dataclass(frozen=True)
class MemberUtilization:
    member_id: int
    member_name: str
    role: str
    country: str
    month: date
    capacity: CapacityBreakdown
    allocated_hours: float
    utilization_percent: float
    projects: List[ProjectHours] = field(default_factory=list)

    @property
    def display_percent(self) -> float:
        return clamp_percent(self.utilization_percent)

    @property
    def over_allocated(self) -> bool:
        return self.utilization_percent > 100

    def to_dict(self) -> dict:
        c = self.capacity
        return {
            "member_id": self.member_id,
            "member_name": self.member_name,
            "role": self.role,
            "country": self.country,
            "month": self.month.strftime("%Y-%m"),
            "weekly_hours": _r(c.weekly_hours),
            "daily_hours": _r(c.daily_hours),
            "monthly_hours": _r(c.monthly_hours),
            "buffer_hours": _r(c.buffer_hours),
            "holiday_days": c.holiday_days,
            "holiday_hours": _r(c.holiday_hours),
            "vacation_days": c.vacation_days,
            "vacation_hours": _r(c.vacation_hours),
            "available_hours": _r(c.available_hours),
            "allocated_hours": _r(self.allocated_hours),
            "remaining_hours": _r(c.available_hours - self.allocated_hours),
            "utilization_percent": _r(self.utilization_percent),
            "display_percent": _r(self.display_percent),
            "over_allocated": self.over_allocated,
            "projects": [p.to_dict() for p in self.projects],
        }


@dataclass(frozen=True)
class DayLoad:
    day: date
    hours: float
    level: LoadLevel
    is_weekend: bool
    is_holiday: bool
    on_vacation: bool

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "hours": _r(self.hours),
            "load": self.level.value,
            "is_weekend": self.is_weekend,
            "is_holiday": self.is_holiday,
            "on_vacation": self.on_vacation,
        }
