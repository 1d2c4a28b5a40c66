from __future__ import annotations

from ...core.constants import WEEKS_PER_MONTH, WORKING_DAYS_PER_WEEK
from .base import CapacityBreakdown, CapacityCalculator


class StandardCapacityCalculator(CapacityCalculator):
    """Standard rule: weekly x weeks-per-month, minus buffer, holidays and vacations, not below 0."""

    def __init__(self, *, weeks_per_month: float = WEEKS_PER_MONTH, working_days_per_week: int = WORKING_DAYS_PER_WEEK):
        self._weeks_per_month = float(weeks_per_month)
        self._working_days_per_week = int(working_days_per_week)

    @property
    def weeks_per_month(self) -> float:
        return self._weeks_per_month

    def daily_hours(self, weekly_hours: float) -> float:
        return weekly_hours / self._working_days_per_week

    def capacity(
        self,
        *,
        weekly_hours: float,
        buffer_percent: float,
        holiday_days: int,
        vacation_days: int,
    ) -> CapacityBreakdown:
        daily = self.daily_hours(weekly_hours)
        monthly = weekly_hours * self._weeks_per_month
        buffer_hours = monthly * buffer_percent / 100
        holiday_hours = daily * holiday_days
        vacation_hours = daily * vacation_days
        available = max(monthly - buffer_hours - holiday_hours - vacation_hours, 0.0)
        return CapacityBreakdown(
            weekly_hours=weekly_hours,
            daily_hours=daily,
            monthly_hours=monthly,
            buffer_hours=buffer_hours,
            holiday_days=holiday_days,
            holiday_hours=holiday_hours,
            vacation_days=vacation_days,
            vacation_hours=vacation_hours,
            available_hours=available,
        )

    def allocated_hours(self, *, hours_per_day: float, working_days: int) -> float:
        return max(hours_per_day, 0.0) * max(working_days, 0)
