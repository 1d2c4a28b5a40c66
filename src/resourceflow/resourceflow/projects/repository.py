from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ProjectStatus
from .model import Project


class ProjectRepository(Protocol):
    def list_all(self, *, status: Optional[ProjectStatus] = None, search: Optional[str] = None) -> Sequence[Project]:
        raise NotImplementedError

    def get(self, *, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        color: str,
        status: ProjectStatus,
    ) -> int:
        raise NotImplementedError

    def update(self, *, project: Project) -> bool:
        raise NotImplementedError

    def delete_cascade(self, *, project_id: int) -> bool:
        """Delete the project and only its own allocations."""

        raise NotImplementedError
