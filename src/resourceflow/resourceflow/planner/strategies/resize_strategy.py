from __future__ import annotations

from ...allocations.model import ProjectAllocation
from ...core.exceptions import ValidationError
from .base import DateRange, EditRequest, EditStrategy


def _target(request: EditRequest):
    if request.target_date is None:
        raise ValidationError("Date is required")
    return request.target_date


class ResizeStartStrategy(EditStrategy):
    def new_range(self, allocation: ProjectAllocation, request: EditRequest) -> DateRange:
        start = _target(request)
        if start > allocation.end_date:
            raise ValidationError("Start date cannot be after end date")
        return DateRange(start=start, end=allocation.end_date)


class ResizeEndStrategy(EditStrategy):
    def new_range(self, allocation: ProjectAllocation, request: EditRequest) -> DateRange:
        end = _target(request)
        if end < allocation.start_date:
            raise ValidationError("End date cannot be before start date")
        return DateRange(start=allocation.start_date, end=end)
