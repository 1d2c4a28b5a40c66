from __future__ import annotations

from datetime import timedelta

from ...allocations.model import ProjectAllocation
from ...core.exceptions import ValidationError
from .base import DateRange, EditRequest, EditStrategy


class MoveStrategy(EditStrategy):
    """Shift both edges by the same number of days."""

    def new_range(self, allocation: ProjectAllocation, request: EditRequest) -> DateRange:
        try:
            delta = timedelta(days=int(request.day_offset))
            return DateRange(start=allocation.start_date + delta, end=allocation.end_date + delta)
        except OverflowError:
            raise ValidationError(f"Day offset {request.day_offset} moves the allocation out of the supported date range")
