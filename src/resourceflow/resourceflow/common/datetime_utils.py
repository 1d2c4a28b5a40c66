from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Tuple

from ..core.exceptions import ValidationError

ISO_DATE = "%Y-%m-%d"
ISO_MONTH = "%Y-%m"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE).date()


def format_iso_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(ISO_DATE) if value else None


def parse_month(value: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    return datetime.strptime(value, ISO_MONTH).date().replace(day=1)


def require_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)")


def optional_date(value, field_name: str) -> Optional[date]:
    if value in (None, ""):
        return None
    return require_date(value, field_name)


def require_month(value: Optional[str], *, default: Optional[date] = None) -> date:
    if not value:
        if default is None:
            raise ValidationError("month is required")
        return default.replace(day=1)
    try:
        return parse_month(value.strip())
    except ValueError:
        raise ValidationError("month must be YYYY-MM")


def month_bounds(month: date) -> Tuple[date, date]:
    last_day = calendar.monthrange(month.year, month.month)[1]
    return month.replace(day=1), month.replace(day=last_day)


def add_months(month: date, count: int) -> date:
    index = month.year * 12 + (month.month - 1) + count
    return date(index // 12, index % 12 + 1, 1)


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def overlap(start: date, end: date, period_start: date, period_end: date) -> Optional[Tuple[date, date]]:
    """Intersection of two inclusive date ranges, or None."""
    lo = max(start, period_start)
    hi = min(end, period_end)
    if lo > hi:
        return None
    return lo, hi


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    return a_start <= b_end and b_start <= a_end


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
