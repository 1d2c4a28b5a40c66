from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .model import ProjectAllocation
from .repository import AllocationRepository

_COLUMNS = "id, employee_id, project_id, start_date, end_date, hours_per_day, status"


def _row_to_allocation(r: dict) -> ProjectAllocation:
    return ProjectAllocation(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        project_id=int(r["project_id"]),
        start_date=parse_iso_date(r["start_date"]),
        end_date=parse_iso_date(r["end_date"]),
        hours_per_day=float(r["hours_per_day"]),
        status=r.get("status") or "active",
    )


class SQLAllocationRepository(AllocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, employee_id: Optional[int] = None, project_id: Optional[int] = None) -> Sequence[ProjectAllocation]:
        clauses: list[str] = []
        params: dict = {}
        if employee_id is not None:
            clauses.append("employee_id=:employee_id")
            params["employee_id"] = int(employee_id)
        if project_id is not None:
            clauses.append("project_id=:project_id")
            params["project_id"] = int(project_id)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, f"SELECT {_COLUMNS} FROM project_allocations {where} ORDER BY id", params))
            return [_row_to_allocation(r) for r in rows]

    def list_overlapping(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[ProjectAllocation]:
        clauses = ["start_date <= :end", "end_date >= :start"]
        params: dict = {"start": start.isoformat(), "end": end.isoformat()}
        if employee_id is not None:
            clauses.append("employee_id=:employee_id")
            params["employee_id"] = int(employee_id)

        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(
                execute(conn, f"SELECT {_COLUMNS} FROM project_allocations WHERE {' AND '.join(clauses)} ORDER BY id", params)
            )
            return [_row_to_allocation(r) for r in rows]

    def get(self, *, allocation_id: int) -> Optional[ProjectAllocation]:
        with db_cursor(self._conn_factory) as conn:
            r = fetchone(execute(conn, f"SELECT {_COLUMNS} FROM project_allocations WHERE id=:id", {"id": int(allocation_id)}))
            return _row_to_allocation(r) if r else None

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
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                INSERT INTO project_allocations(employee_id, project_id, start_date, end_date, hours_per_day, status)
                VALUES(:employee_id, :project_id, :start_date, :end_date, :hours_per_day, :status)
                """,
                {
                    "employee_id": int(employee_id),
                    "project_id": int(project_id),
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                    "hours_per_day": float(hours_per_day),
                    "status": status,
                },
            )
            return int(result.lastrowid)

    def update(self, *, allocation: ProjectAllocation) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                UPDATE project_allocations
                SET employee_id=:employee_id, project_id=:project_id, start_date=:start_date,
                    end_date=:end_date, hours_per_day=:hours_per_day, status=:status
                WHERE id=:id
                """,
                {
                    "id": allocation.id,
                    "employee_id": allocation.employee_id,
                    "project_id": allocation.project_id,
                    "start_date": allocation.start_date.isoformat(),
                    "end_date": allocation.end_date.isoformat(),
                    "hours_per_day": float(allocation.hours_per_day),
                    "status": allocation.status,
                },
            )
            return result.rowcount > 0

    def delete(self, *, allocation_id: int) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(conn, "DELETE FROM project_allocations WHERE id=:id", {"id": int(allocation_id)})
            return result.rowcount > 0
