from __future__ import annotations

from enum import Enum


class Country(str, Enum):
    """Country of a team member; selects weekly hours and holiday set."""

    CANADA = "Canada"
    BRAZIL = "Brazil"


class HolidayCountry(str, Enum):
    CANADA = "Canada"
    BRAZIL = "Brazil"
    BOTH = "Both"

    def applies_to(self, country: Country) -> bool:
        return self is HolidayCountry.BOTH or self.value == country.value


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class ResizeEdge(str, Enum):
    START = "start"
    END = "end"


class LoadLevel(str, Enum):
    """Daily allocation load bucket, used to colour calendar cells."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    FULL = "full"
    OVER = "over"


class ImportMode(str, Enum):
    APPEND = "append"
    REPLACE = "replace"
