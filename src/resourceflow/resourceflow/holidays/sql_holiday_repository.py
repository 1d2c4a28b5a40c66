from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import HolidayCountry
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _row_to_holiday(r: dict) -> Holiday:
    return Holiday(
        id=int(r["id"]),
        name=r["name"],
        date=parse_iso_date(r["date"]),
        country=HolidayCountry(r["country"]),
    )


class SQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, country: Optional[HolidayCountry] = None, year: Optional[int] = None) -> Sequence[Holiday]:
        clauses: list[str] = []
        params: dict = {}
        if country is not None:
            clauses.append("country IN (:country, :both)")
            params["country"] = country.value
            params["both"] = HolidayCountry.BOTH.value
        if year is not None:
            clauses.append("date LIKE :year")
            params["year"] = f"{int(year):04d}-%"
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, f"SELECT id, name, date, country FROM holidays {where} ORDER BY date, id", params))
            return [_row_to_holiday(r) for r in rows]

    def list_between(self, *, start: date, end: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(
                execute(
                    conn,
                    "SELECT id, name, date, country FROM holidays WHERE date BETWEEN :start AND :end ORDER BY date, id",
                    {"start": start.isoformat(), "end": end.isoformat()},
                )
            )
            return [_row_to_holiday(r) for r in rows]

    def get(self, *, holiday_id: int) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as conn:
            r = fetchone(execute(conn, "SELECT id, name, date, country FROM holidays WHERE id=:id", {"id": int(holiday_id)}))
            return _row_to_holiday(r) if r else None

    def create(self, *, name: str, day: date, country: HolidayCountry) -> int:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                "INSERT INTO holidays(name, date, country) VALUES(:name, :date, :country)",
                {"name": name, "date": day.isoformat(), "country": country.value},
            )
            return int(result.lastrowid)

    def update(self, *, holiday: Holiday) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                "UPDATE holidays SET name=:name, date=:date, country=:country WHERE id=:id",
                {
                    "id": holiday.id,
                    "name": holiday.name,
                    "date": holiday.date.isoformat(),
                    "country": holiday.country.value,
                },
            )
            return result.rowcount > 0

    def delete(self, *, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(conn, "DELETE FROM holidays WHERE id=:id", {"id": int(holiday_id)})
            return result.rowcount > 0
