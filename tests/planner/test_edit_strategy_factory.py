from datetime import date

import pytest

from src.resourceflow.resourceflow.allocations.model import ProjectAllocation
from src.resourceflow.resourceflow.core.enums import ResizeEdge
from src.resourceflow.resourceflow.core.exceptions import ValidationError
from src.resourceflow.resourceflow.planner.factory import EditStrategyFactory
from src.resourceflow.resourceflow.planner.strategies.base import EditRequest
from src.resourceflow.resourceflow.planner.strategies.move_strategy import MoveStrategy
from src.resourceflow.resourceflow.planner.strategies.resize_strategy import ResizeEndStrategy, ResizeStartStrategy

ALLOCATION = ProjectAllocation(
    id=1, employee_id=1, project_id=1, start_date=date(2026, 5, 4), end_date=date(2026, 5, 8), hours_per_day=8
)


def test_factory_picks_strategy_per_gesture():
    factory = EditStrategyFactory()

    assert isinstance(factory.for_move(), MoveStrategy)
    assert isinstance(factory.for_resize(ResizeEdge.START), ResizeStartStrategy)
    assert isinstance(factory.for_resize(ResizeEdge.END), ResizeEndStrategy)


def test_move_strategy_accepts_negative_offset():
    new_range = MoveStrategy().new_range(ALLOCATION, EditRequest(day_offset=-4))

    assert (new_range.start, new_range.end) == (date(2026, 4, 30), date(2026, 5, 4))


def test_resize_start_to_end_date_gives_single_day():
    new_range = ResizeStartStrategy().new_range(ALLOCATION, EditRequest(target_date=date(2026, 5, 8)))

    assert new_range.start == new_range.end == date(2026, 5, 8)


def test_move_strategy_rejects_offset_beyond_calendar():
    with pytest.raises(ValidationError):
        MoveStrategy().new_range(ALLOCATION, EditRequest(day_offset=10_000_000))
