from __future__ import annotations

from typing import Iterable, Tuple

from sqlalchemy import inspect

from ..core.constants import DEFAULT_BRAZIL_WEEKLY_HOURS, DEFAULT_BUFFER_PERCENT, DEFAULT_CANADA_WEEKLY_HOURS
from .connection import DatabaseConnection
from .holiday_data import ALL_HOLIDAYS, HolidayRow
from .schema import TABLES_DELETE_ORDER, metadata
from .sql_base import db_cursor, execute, fetchone

DEFAULT_SETTINGS = {
    "buffer": DEFAULT_BUFFER_PERCENT,
    "canadaHours": DEFAULT_CANADA_WEEKLY_HOURS,
    "brazilHours": DEFAULT_BRAZIL_WEEKLY_HOURS,
}

SAMPLE_MEMBERS = [
    ("Frederico Conte", "Project Manager", "Brazil"),
    ("John Smith", "Senior Developer", "Canada"),
    ("Maria Silva", "Frontend Developer", "Brazil"),
    ("David Johnson", "Backend Developer", "Canada"),
    ("Ana Costa", "UI/UX Designer", "Brazil"),
]

SAMPLE_PROJECTS = [
    ("ResourceFlow Platform", "2026-01-01", "2026-12-31", "#3b82f6"),
    ("Mobile App Development", "2026-02-01", "2026-08-31", "#10b981"),
    ("API Integration", "2026-03-01", "2026-06-30", "#f59e0b"),
    ("Database Optimization", "2026-04-01", "2026-05-31", "#ef4444"),
]

# (member index, project index, start, end, hours_per_day)
SAMPLE_ALLOCATIONS = [
    (0, 0, "2026-01-05", "2026-03-27", 4.0),
    (1, 0, "2026-01-05", "2026-06-26", 6.0),
    (1, 2, "2026-03-02", "2026-04-24", 2.0),
    (2, 1, "2026-02-02", "2026-05-29", 8.0),
    (3, 2, "2026-03-02", "2026-06-30", 5.0),
    (3, 3, "2026-04-01", "2026-05-29", 3.0),
    (4, 1, "2026-02-02", "2026-03-31", 6.0),
]


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create missing tables (idempotent)."""
    metadata.create_all(conn_factory.engine)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine).get_table_names())


def ensure_default_settings(conn_factory: DatabaseConnection) -> int:
    """Insert the default buffer/weekly-hours rows that are missing. Returns how many were added."""
    added = 0
    with db_cursor(conn_factory) as conn:
        for key, value in DEFAULT_SETTINGS.items():
            existing = fetchone(execute(conn, "SELECT id FROM settings WHERE setting_key=:key", {"key": key}))
            if existing:
                continue
            execute(
                conn,
                "INSERT INTO settings(setting_key, setting_value) VALUES(:key, :value)",
                {"key": key, "value": str(value)},
            )
            added += 1
    return added


def seed_sample_data(conn_factory: DatabaseConnection) -> bool:
    """Insert sample members, projects and allocations into an empty store.

    Returns False when team members already exist.
    """
    with db_cursor(conn_factory) as conn:
        count = fetchone(execute(conn, "SELECT COUNT(*) AS n FROM team_members"))
        if count and int(count["n"]) > 0:
            return False

        member_ids: list[int] = []
        for name, role, country in SAMPLE_MEMBERS:
            result = execute(
                conn,
                """
                INSERT INTO team_members(name, role, country, allocated_hours, is_active)
                VALUES(:name, :role, :country, 0, :is_active)
                """,
                {"name": name, "role": role, "country": country, "is_active": True},
            )
            member_ids.append(int(result.lastrowid))

        project_ids: list[int] = []
        for name, start, end, color in SAMPLE_PROJECTS:
            result = execute(
                conn,
                """
                INSERT INTO projects(name, start_date, end_date, color, status)
                VALUES(:name, :start, :end, :color, 'active')
                """,
                {"name": name, "start": start, "end": end, "color": color},
            )
            project_ids.append(int(result.lastrowid))

        for member_idx, project_idx, start, end, hours in SAMPLE_ALLOCATIONS:
            execute(
                conn,
                """
                INSERT INTO project_allocations(employee_id, project_id, start_date, end_date, hours_per_day, status)
                VALUES(:employee_id, :project_id, :start, :end, :hours, 'active')
                """,
                {
                    "employee_id": member_ids[member_idx],
                    "project_id": project_ids[project_idx],
                    "start": start,
                    "end": end,
                    "hours": hours,
                },
            )
    return True


def populate_holidays(conn_factory: DatabaseConnection, holidays: Iterable[HolidayRow] = ALL_HOLIDAYS) -> Tuple[int, int]:
    """Insert holidays, skipping rows with the same name, date and country.

    Returns (inserted, skipped).
    """
    inserted = 0
    skipped = 0
    with db_cursor(conn_factory) as conn:
        for name, day, country in holidays:
            params = {"name": name, "date": day, "country": country}
            existing = fetchone(
                execute(
                    conn,
                    "SELECT id FROM holidays WHERE name=:name AND date=:date AND country=:country",
                    params,
                )
            )
            if existing:
                skipped += 1
                continue
            execute(conn, "INSERT INTO holidays(name, date, country) VALUES(:name, :date, :country)", params)
            inserted += 1
    return inserted, skipped


def clear_tables(conn_factory: DatabaseConnection, *, include_settings: bool = False) -> None:
    with db_cursor(conn_factory) as conn:
        for table in TABLES_DELETE_ORDER:
            execute(conn, f"DELETE FROM {table}")
        if include_settings:
            execute(conn, "DELETE FROM settings")
