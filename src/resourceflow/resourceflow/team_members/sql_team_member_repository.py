from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Country
from ..database.connection import DatabaseConnection
from ..database.sql_base import bool_from_db, db_cursor, execute, fetchall, fetchone
from .model import TeamMember
from .repository import TeamMemberRepository

_COLUMNS = "id, name, role, country, allocated_hours, is_active"


def _row_to_member(r: dict) -> TeamMember:
    return TeamMember(
        id=int(r["id"]),
        name=r["name"],
        role=r["role"],
        country=Country(r["country"]),
        allocated_hours=float(r.get("allocated_hours") or 0),
        is_active=bool_from_db(r.get("is_active")),
    )


class SQLTeamMemberRepository(TeamMemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, active_only: bool = False) -> Sequence[TeamMember]:
        where = "WHERE is_active = :active" if active_only else ""
        params = {"active": True} if active_only else {}
        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, f"SELECT {_COLUMNS} FROM team_members {where} ORDER BY name", params))
            return [_row_to_member(r) for r in rows]

    def get(self, *, member_id: int) -> Optional[TeamMember]:
        with db_cursor(self._conn_factory) as conn:
            r = fetchone(execute(conn, f"SELECT {_COLUMNS} FROM team_members WHERE id=:id", {"id": int(member_id)}))
            return _row_to_member(r) if r else None

    def create(self, *, name: str, role: str, country: Country, allocated_hours: float, is_active: bool) -> int:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                INSERT INTO team_members(name, role, country, allocated_hours, is_active)
                VALUES(:name, :role, :country, :allocated_hours, :is_active)
                """,
                {
                    "name": name,
                    "role": role,
                    "country": country.value,
                    "allocated_hours": float(allocated_hours),
                    "is_active": bool(is_active),
                },
            )
            return int(result.lastrowid)

    def update(self, *, member: TeamMember) -> bool:
        with db_cursor(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                UPDATE team_members
                SET name=:name, role=:role, country=:country, allocated_hours=:allocated_hours, is_active=:is_active
                WHERE id=:id
                """,
                {
                    "id": member.id,
                    "name": member.name,
                    "role": member.role,
                    "country": member.country.value,
                    "allocated_hours": float(member.allocated_hours),
                    "is_active": bool(member.is_active),
                },
            )
            return result.rowcount > 0

    def delete_cascade(self, *, member_id: int) -> bool:
        params = {"id": int(member_id)}
        with db_cursor(self._conn_factory) as conn:
            execute(conn, "DELETE FROM project_allocations WHERE employee_id=:id", params)
            execute(conn, "DELETE FROM vacations WHERE employee_id=:id", params)
            result = execute(conn, "DELETE FROM team_members WHERE id=:id", params)
            return result.rowcount > 0
