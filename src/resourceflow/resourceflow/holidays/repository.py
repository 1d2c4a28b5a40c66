from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayCountry
from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self, *, country: Optional[HolidayCountry] = None, year: Optional[int] = None) -> Sequence[Holiday]:
        """List holidays ordered by date.

        A country filter also returns holidays marked for both countries.
        """

        raise NotImplementedError

    def list_between(self, *, start: date, end: date) -> Sequence[Holiday]:
        raise NotImplementedError

    def get(self, *, holiday_id: int) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, name: str, day: date, country: HolidayCountry) -> int:
        raise NotImplementedError

    def update(self, *, holiday: Holiday) -> bool:
        raise NotImplementedError

    def delete(self, *, holiday_id: int) -> bool:
        raise NotImplementedError
