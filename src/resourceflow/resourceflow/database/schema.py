from __future__ import annotations

from sqlalchemy import Boolean, Column, Float, ForeignKey, Index, Integer, MetaData, String, Table, Text

metadata = MetaData()

# Dates are stored as ISO "YYYY-MM-DD" strings, the same format used on the wire.

team_members = Table(
    "team_members",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("role", String(100), nullable=False),
    Column("country", String(20), nullable=False),
    Column("allocated_hours", Float, nullable=False, default=0),
    Column("is_active", Boolean, nullable=False, default=True),
)

projects = Table(
    "projects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("start_date", String(10), nullable=True),
    Column("end_date", String(10), nullable=True),
    Column("color", String(7), nullable=False, default="#3b82f6"),
    Column("status", String(20), nullable=False, default="active"),
)

holidays = Table(
    "holidays",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("date", String(10), nullable=False),
    Column("country", String(10), nullable=False),
)

vacations = Table(
    "vacations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("employee_id", Integer, ForeignKey("team_members.id"), nullable=False),
    Column("employee_name", String(100), nullable=False),
    Column("start_date", String(10), nullable=False),
    Column("end_date", String(10), nullable=False),
    Column("type", String(30), nullable=False, default="vacation"),
    Column("notes", Text, nullable=True),
)

project_allocations = Table(
    "project_allocations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("employee_id", Integer, ForeignKey("team_members.id"), nullable=False),
    Column("project_id", Integer, ForeignKey("projects.id"), nullable=False),
    Column("start_date", String(10), nullable=False),
    Column("end_date", String(10), nullable=False),
    Column("hours_per_day", Float, nullable=False, default=8),
    Column("status", String(20), nullable=False, default="active"),
)

settings = Table(
    "settings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("setting_key", String(50), nullable=False, unique=True),
    Column("setting_value", String(50), nullable=False),
)

Index("idx_allocations_employee_project", project_allocations.c.employee_id, project_allocations.c.project_id)
Index("idx_vacations_employee", vacations.c.employee_id)
Index("idx_holidays_date", holidays.c.date)

# Child tables first, so deletes never trip foreign keys.
TABLES_DELETE_ORDER = ("project_allocations", "vacations", "holidays", "projects", "team_members")
