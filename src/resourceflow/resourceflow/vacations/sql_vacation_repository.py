from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .model import Vacation
from .repository import VacationRepository

_COLUMNS = "id, employee_id, employee_name, start_date, end_date, type, notes"


def _row_to_vacation(r: dict) -> Vacation:
    return Vacation(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        start_date=parse_iso_date(r["start_date"]),
        end_date=parse_iso_date(r["end_date"]),
        type=r.get("type") or "vacation",
        notes=r.get("notes"),
    )


class SQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[Vacation]:
        where = "WHERE employee_id=:employee_id" if employee_id is not None else ""
        params = {"employee_id": int(employee_id)} if employee_id is not None else {}
        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, f"SELECT {_COLUMNS} FROM vacations {where} ORDER BY start_date, id", params))
            return [_row_to_vacation(r) for r in rows]

    def list_overlapping(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[Vacation]:
        clauses = ["start_date <= :end", "end_date >= :start"]
        params: dict = {"start": start.isoformat(), "end": end.isoformat()}
        if employee_id is not None:
            clauses.append("employee_id=:employee_id")
            params["employee_id"] = int(employee_id)

        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(
                execute(conn, f"SELECT {_COLUMNS} FROM vacations WHERE {' AND '.join(clauses)} ORDER BY start_date, id", params)
            )
            return [_row_to_vacation(r) for r in rows]

    def get(self, *, vacation_id: int) -> Optional[Vacation]:
        with db_cursor(self._conn_factory) as conn:
            r = fetchone(execute(conn, f"SELECT {_COLUMNS} FROM vacations WHERE id=:id", {"id": int(vacation_id)}))
            return _row_to_vacation(r) if r else None

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
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                INSERT INTO vacations(employee_id, employee_name, start_date, end_date, type, notes)
                VALUES(:employee_id, :employee_name, :start_date, :end_date, :type, :notes)
                """,
                {
                    "employee_id": int(employee_id),
                    "employee_name": employee_name,
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                    "type": type,
                    "notes": notes,
                },
            )
            return int(result.lastrowid)

    def update(self, *, vacation: Vacation) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                UPDATE vacations
                SET employee_id=:employee_id, employee_name=:employee_name, start_date=:start_date,
                    end_date=:end_date, type=:type, notes=:notes
                WHERE id=:id
                """,
                {
                    "id": vacation.id,
                    "employee_id": vacation.employee_id,
                    "employee_name": vacation.employee_name,
                    "start_date": vacation.start_date.isoformat(),
                    "end_date": vacation.end_date.isoformat(),
                    "type": vacation.type,
                    "notes": vacation.notes,
                },
            )
            return result.rowcount > 0

    def delete(self, *, vacation_id: int) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(conn, "DELETE FROM vacations WHERE id=:id", {"id": int(vacation_id)})
            return result.rowcount > 0
