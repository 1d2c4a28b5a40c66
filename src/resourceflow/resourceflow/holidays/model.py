from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import Country, HolidayCountry


@dataclass(frozen=True)
class Holiday:
    id: int
    name: str
    date: date
    country: HolidayCountry

    def applies_to(self, country: Country) -> bool:
        return self.country.applies_to(country)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date.isoformat(),
            "country": self.country.value,
        }
