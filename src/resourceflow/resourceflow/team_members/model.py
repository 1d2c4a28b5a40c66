from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Country


@dataclass(frozen=True)
class TeamMember:
    id: int
    name: str
    role: str
    country: Country
    allocated_hours: float = 0.0
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "country": self.country.value,
            "allocated_hours": self.allocated_hours,
            "is_active": self.is_active,
        }
