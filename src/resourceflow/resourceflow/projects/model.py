from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.constants import DEFAULT_PROJECT_COLOR
from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    color: str = DEFAULT_PROJECT_COLOR
    status: ProjectStatus = ProjectStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "start_date": format_iso_date(self.start_date),
            "end_date": format_iso_date(self.end_date),
            "color": self.color,
            "status": self.status.value,
        }
