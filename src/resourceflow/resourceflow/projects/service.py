from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import optional_date
from ..common.validators import has_any, pick, require_enum, require_hex_color, require_non_empty, sanitize_text
from ..core.constants import DEFAULT_PROJECT_COLOR
from ..core.enums import ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


def _check_range(project: Project) -> None:
    if project.start_date and project.end_date and project.start_date > project.end_date:
        raise ValidationError("Start date must be before or equal to end date")


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list(self, *, status: Optional[str] = None, search: Optional[str] = None) -> Sequence[Project]:
        status_enum = require_enum(ProjectStatus, status, "Status") if status else None
        term = sanitize_text(search) if search else None
        return self._projects.list_all(status=status_enum, search=term or None)

    def get(self, project_id: int) -> Project:
        project = self._projects.get(project_id=int(project_id))
        if not project:
            raise NotFoundError("Project not found")
        return project

    def create(self, payload: dict) -> Project:
        draft = Project(
            id=0,
            name=require_non_empty(payload.get("name"), "Name", max_length=200),
            start_date=optional_date(pick(payload, "startDate", "start_date"), "Start date"),
            end_date=optional_date(pick(payload, "endDate", "end_date"), "End date"),
            color=require_hex_color(payload.get("color") or DEFAULT_PROJECT_COLOR, "Color"),
            status=require_enum(ProjectStatus, payload.get("status") or ProjectStatus.ACTIVE.value, "Status"),
        )
        _check_range(draft)

        project_id = self._projects.create(
            name=draft.name,
            start_date=draft.start_date,
            end_date=draft.end_date,
            color=draft.color,
            status=draft.status,
        )
        logger.info("Created project %s (%s)", project_id, draft.name)
        return replace(draft, id=project_id)

    def update(self, project_id: int, payload: dict) -> Project:
        project = self.get(project_id)
        changes: dict = {}

        if "name" in payload:
            changes["name"] = require_non_empty(payload["name"], "Name", max_length=200)
        if has_any(payload, "startDate", "start_date"):
            changes["start_date"] = optional_date(pick(payload, "startDate", "start_date"), "Start date")
        if has_any(payload, "endDate", "end_date"):
            changes["end_date"] = optional_date(pick(payload, "endDate", "end_date"), "End date")
        if "color" in payload:
            changes["color"] = require_hex_color(payload["color"], "Color")
        if "status" in payload:
            changes["status"] = require_enum(ProjectStatus, payload["status"], "Status")

        updated = replace(project, **changes)
        _check_range(updated)
        self._projects.update(project=updated)
        return updated

    def delete(self, project_id: int) -> None:
        if not self._projects.delete_cascade(project_id=int(project_id)):
            raise NotFoundError("Project not found")
        logger.info("Deleted project %s with its allocations", project_id)
