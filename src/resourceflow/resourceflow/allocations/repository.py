from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ProjectAllocation


class AllocationRepository(Protocol):
    def list_all(self, *, employee_id: Optional[int] = None, project_id: Optional[int] = None) -> Sequence[ProjectAllocation]:
        raise NotImplementedError

    def list_overlapping(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[ProjectAllocation]:
        raise NotImplementedError

    def get(self, *, allocation_id: int) -> Optional[ProjectAllocation]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        project_id: int,
        start_date: date,
        end_date: date,
        hours_per_day: float,
        status: str,
    ) -> int:
        raise NotImplementedError

    def update(self, *, allocation: ProjectAllocation) -> bool:
        raise NotImplementedError

    def delete(self, *, allocation_id: int) -> bool:
        raise NotImplementedError
