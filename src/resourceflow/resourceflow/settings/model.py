from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_BRAZIL_WEEKLY_HOURS, DEFAULT_BUFFER_PERCENT, DEFAULT_CANADA_WEEKLY_HOURS
from ..core.enums import Country

# Stored key -> Settings attribute.
SETTING_KEYS = {
    "buffer": "buffer",
    "canadaHours": "canada_hours",
    "brazilHours": "brazil_hours",
}


@dataclass(frozen=True)
class Settings:
    buffer: float = DEFAULT_BUFFER_PERCENT
    canada_hours: float = DEFAULT_CANADA_WEEKLY_HOURS
    brazil_hours: float = DEFAULT_BRAZIL_WEEKLY_HOURS

    def weekly_hours_for(self, country: Country) -> float:
        if country == Country.CANADA:
            return self.canada_hours
        return self.brazil_hours

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in SETTING_KEYS.items()}
