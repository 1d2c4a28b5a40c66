from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.constants import DEFAULT_PROJECT_COLOR
from ..core.enums import ProjectStatus
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .model import Project
from .repository import ProjectRepository

_COLUMNS = "id, name, start_date, end_date, color, status"


def _row_to_project(r: dict) -> Project:
    return Project(
        id=int(r["id"]),
        name=r["name"],
        start_date=parse_iso_date(r["start_date"]) if r.get("start_date") else None,
        end_date=parse_iso_date(r["end_date"]) if r.get("end_date") else None,
        color=r.get("color") or DEFAULT_PROJECT_COLOR,
        status=ProjectStatus(r.get("status") or ProjectStatus.ACTIVE.value),
    )


class SQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, status: Optional[ProjectStatus] = None, search: Optional[str] = None) -> Sequence[Project]:
        clauses: list[str] = []
        params: dict = {}
        if status is not None:
            clauses.append("status = :status")
            params["status"] = status.value
        if search:
            clauses.append("LOWER(name) LIKE :search")
            params["search"] = f"%{search.lower()}%"
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, f"SELECT {_COLUMNS} FROM projects {where} ORDER BY name", params))
            return [_row_to_project(r) for r in rows]

    def get(self, *, project_id: int) -> Optional[Project]:
        with db_cursor(self._conn_factory) as conn:
            r = fetchone(execute(conn, f"SELECT {_COLUMNS} FROM projects WHERE id=:id", {"id": int(project_id)}))
            return _row_to_project(r) if r else None

    def create(
        self,
        *,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        color: str,
        status: ProjectStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                INSERT INTO projects(name, start_date, end_date, color, status)
                VALUES(:name, :start_date, :end_date, :color, :status)
                """,
                {
                    "name": name,
                    "start_date": format_iso_date(start_date),
                    "end_date": format_iso_date(end_date),
                    "color": color,
                    "status": status.value,
                },
            )
            return int(result.lastrowid)

    def update(self, *, project: Project) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                UPDATE projects
                SET name=:name, start_date=:start_date, end_date=:end_date, color=:color, status=:status
                WHERE id=:id
                """,
                {
                    "id": project.id,
                    "name": project.name,
                    "start_date": format_iso_date(project.start_date),
                    "end_date": format_iso_date(project.end_date),
                    "color": project.color,
                    "status": project.status.value,
                },
            )
            return result.rowcount > 0

    def delete_cascade(self, *, project_id: int) -> bool:
        params = {"id": int(project_id)}
        with db_cursor(self._conn_factory) as conn:
            execute(conn, "DELETE FROM project_allocations WHERE project_id=:id", params)
            result = execute(conn, "DELETE FROM projects WHERE id=:id", params)
            return result.rowcount > 0
