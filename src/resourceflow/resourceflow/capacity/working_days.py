from __future__ import annotations

from datetime import date
from typing import Iterable, List, Set

from ..common.datetime_utils import is_weekend, iter_days, overlap
from ..core.enums import Country
from ..holidays.model import Holiday
from ..vacations.model import Vacation


def holiday_dates_for(holidays: Iterable[Holiday], country: Country) -> Set[date]:
    """Dates of holidays applying to the country (own country or Both), deduplicated."""
    return {h.date for h in holidays if h.applies_to(country)}


def is_working_day(day: date, holiday_dates: Set[date]) -> bool:
    return not is_weekend(day) and day not in holiday_dates


def working_days(start: date, end: date, holiday_dates: Set[date]) -> List[date]:
    return [d for d in iter_days(start, end) if is_working_day(d, holiday_dates)]


def weekday_holidays(start: date, end: date, holiday_dates: Set[date]) -> List[date]:
    return sorted(d for d in holiday_dates if start <= d <= end and not is_weekend(d))


def vacation_days(vacations: Iterable[Vacation], start: date, end: date, holiday_dates: Set[date]) -> Set[date]:
    """Weekdays in [start, end] covered by any vacation, minus days already counted as holidays."""
    days: Set[date] = set()
    for v in vacations:
        span = overlap(v.start_date, v.end_date, start, end)
        if not span:
            continue
        days.update(d for d in iter_days(*span) if is_working_day(d, holiday_dates))
    return days
