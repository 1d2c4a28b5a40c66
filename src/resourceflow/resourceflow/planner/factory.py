from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ResizeEdge
from .strategies.base import EditStrategy
from .strategies.move_strategy import MoveStrategy
from .strategies.resize_strategy import ResizeEndStrategy, ResizeStartStrategy


@dataclass
class EditStrategyFactory:
    """Factory Pattern: choose the edit strategy for a calendar gesture."""

    def for_move(self) -> EditStrategy:
        return MoveStrategy()

    def for_resize(self, edge: ResizeEdge) -> EditStrategy:
        if edge == ResizeEdge.START:
            return ResizeStartStrategy()
        return ResizeEndStrategy()
