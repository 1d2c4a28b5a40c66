from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...allocations.model import ProjectAllocation


@dataclass(frozen=True)
class EditRequest:
    day_offset: int = 0
    target_date: Optional[date] = None


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


class EditStrategy(ABC):
    """Strategy Pattern: how a calendar gesture changes an allocation's range."""

    @abstractmethod
    def new_range(self, allocation: ProjectAllocation, request: EditRequest) -> DateRange:
        raise NotImplementedError
