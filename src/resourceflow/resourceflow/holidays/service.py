from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import require_date
from ..common.validators import require_enum, require_int, require_non_empty
from ..core.constants import MAX_NAME_LENGTH
from ..core.enums import HolidayCountry
from ..core.exceptions import NotFoundError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list(self, *, country: Optional[str] = None, year: Optional[str] = None) -> Sequence[Holiday]:
        country_enum = require_enum(HolidayCountry, country, "Country") if country else None
        year_int = require_int(year, "Year") if year else None
        return self._holidays.list_all(country=country_enum, year=year_int)

    def get(self, holiday_id: int) -> Holiday:
        holiday = self._holidays.get(holiday_id=int(holiday_id))
        if not holiday:
            raise NotFoundError("Holiday not found")
        return holiday

    def create(self, payload: dict) -> Holiday:
        name = require_non_empty(payload.get("name"), "Name", max_length=MAX_NAME_LENGTH)
        day = require_date(payload.get("date"), "Date")
        country = require_enum(HolidayCountry, payload.get("country"), "Country")
        holiday_id = self._holidays.create(name=name, day=day, country=country)
        return Holiday(id=holiday_id, name=name, date=day, country=country)

    def update(self, holiday_id: int, payload: dict) -> Holiday:
        holiday = self.get(holiday_id)
        changes: dict = {}
        if "name" in payload:
            changes["name"] = require_non_empty(payload["name"], "Name", max_length=MAX_NAME_LENGTH)
        if "date" in payload:
            changes["date"] = require_date(payload["date"], "Date")
        if "country" in payload:
            changes["country"] = require_enum(HolidayCountry, payload["country"], "Country")

        updated = replace(holiday, **changes)
        self._holidays.update(holiday=updated)
        return updated

    def delete(self, holiday_id: int) -> None:
        if not self._holidays.delete(holiday_id=int(holiday_id)):
            raise NotFoundError("Holiday not found")
