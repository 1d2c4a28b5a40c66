from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CapacityBreakdown:
    weekly_hours: float
    daily_hours: float
    monthly_hours: float
    buffer_hours: float
    holiday_days: int
    holiday_hours: float
    vacation_days: int
    vacation_hours: float
    available_hours: float


class CapacityCalculator(ABC):
    """Calculator interface (Strategy Pattern for capacity)."""

    @abstractmethod
    def daily_hours(self, weekly_hours: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def capacity(
        self,
        *,
        weekly_hours: float,
        buffer_percent: float,
        holiday_days: int,
        vacation_days: int,
    ) -> CapacityBreakdown:
        raise NotImplementedError

    @abstractmethod
    def allocated_hours(self, *, hours_per_day: float, working_days: int) -> float:
        raise NotImplementedError

    def utilization_percent(self, allocated_hours: float, available_hours: float) -> float:
        if available_hours <= 0:
            return 0.0
        return allocated_hours / available_hours * 100
