from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Vacation


class VacationRepository(Protocol):
    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[Vacation]:
        raise NotImplementedError

    def list_overlapping(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[Vacation]:
        raise NotImplementedError

    def get(self, *, vacation_id: int) -> Optional[Vacation]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        start_date: date,
        end_date: date,
        type: str,
        notes: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update(self, *, vacation: Vacation) -> bool:
        raise NotImplementedError

    def delete(self, *, vacation_id: int) -> bool:
        raise NotImplementedError
