from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace

import pytest

from src.resourceflow.resourceflow.allocations.model import ProjectAllocation
from src.resourceflow.resourceflow.allocations.service import AllocationService
from src.resourceflow.resourceflow.holidays.model import Holiday
from src.resourceflow.resourceflow.main import create_app
from src.resourceflow.resourceflow.projects.model import Project
from src.resourceflow.resourceflow.settings.service import SettingsService
from src.resourceflow.resourceflow.team_members.model import TeamMember
from src.resourceflow.resourceflow.vacations.model import Vacation


class _FakeStore:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, object] = {}

    def _add(self, row) -> int:
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = replace(row, id=rid)
        return rid

    def _save(self, row) -> bool:
        if row.id not in self.rows:
            return False
        self.rows[row.id] = row
        return True

    def _remove(self, rid) -> bool:
        return self.rows.pop(int(rid), None) is not None


class FakeMembers(_FakeStore):
    def list_all(self, *, active_only=False):
        return [m for m in self.rows.values() if m.is_active or not active_only]

    def get(self, *, member_id):
        return self.rows.get(int(member_id))

    def create(self, *, name, role, country, allocated_hours, is_active):
        return self._add(
            TeamMember(id=0, name=name, role=role, country=country, allocated_hours=allocated_hours, is_active=is_active)
        )

    def update(self, *, member):
        return self._save(member)

    def delete_cascade(self, *, member_id):
        return self._remove(member_id)


class FakeProjects(_FakeStore):
    def list_all(self, *, status=None, search=None):
        out = list(self.rows.values())
        if status is not None:
            out = [p for p in out if p.status == status]
        if search:
            out = [p for p in out if search.lower() in p.name.lower()]
        return out

    def get(self, *, project_id):
        return self.rows.get(int(project_id))

    def create(self, *, name, start_date, end_date, color, status):
        return self._add(Project(id=0, name=name, start_date=start_date, end_date=end_date, color=color, status=status))

    def update(self, *, project):
        return self._save(project)

    def delete_cascade(self, *, project_id):
        return self._remove(project_id)


class FakeHolidays(_FakeStore):
    def list_all(self, *, country=None, year=None):
        return sorted(self.rows.values(), key=lambda h: h.date)

    def list_between(self, *, start, end):
        return [h for h in self.list_all() if start <= h.date <= end]

    def get(self, *, holiday_id):
        return self.rows.get(int(holiday_id))

    def create(self, *, name, day, country):
        return self._add(Holiday(id=0, name=name, date=day, country=country))

    def update(self, *, holiday):
        return self._save(holiday)

    def delete(self, *, holiday_id):
        return self._remove(holiday_id)


class FakeVacations(_FakeStore):
    def list_all(self, *, employee_id=None):
        return [v for v in self.rows.values() if employee_id is None or v.employee_id == employee_id]

    def list_overlapping(self, *, start, end, employee_id=None):
        return [v for v in self.list_all(employee_id=employee_id) if v.start_date <= end and v.end_date >= start]

    def get(self, *, vacation_id):
        return self.rows.get(int(vacation_id))

    def create(self, *, employee_id, employee_name, start_date, end_date, type, notes):
        return self._add(
            Vacation(
                id=0,
                employee_id=employee_id,
                employee_name=employee_name,
                start_date=start_date,
                end_date=end_date,
                type=type,
                notes=notes,
            )
        )

    def update(self, *, vacation):
        return self._save(vacation)

    def delete(self, *, vacation_id):
        return self._remove(vacation_id)


class FakeAllocations(_FakeStore):
    def list_all(self, *, employee_id=None, project_id=None):
        out = sorted(self.rows.values(), key=lambda a: a.id)
        if employee_id is not None:
            out = [a for a in out if a.employee_id == employee_id]
        if project_id is not None:
            out = [a for a in out if a.project_id == project_id]
        return out

    def list_overlapping(self, *, start, end, employee_id=None):
        return [a for a in self.list_all(employee_id=employee_id) if a.start_date <= end and a.end_date >= start]

    def get(self, *, allocation_id):
        return self.rows.get(int(allocation_id))

    def create(self, *, employee_id, project_id, start_date, end_date, hours_per_day, status):
        return self._add(
            ProjectAllocation(
                id=0,
                employee_id=employee_id,
                project_id=project_id,
                start_date=start_date,
                end_date=end_date,
                hours_per_day=hours_per_day,
                status=status,
            )
        )

    def update(self, *, allocation):
        return self._save(allocation)

    def delete(self, *, allocation_id):
        return self._remove(allocation_id)


class FakeSettings:
    def __init__(self, values=None):
        self.values = dict(values or {})

    def get_all(self):
        return dict(self.values)

    def upsert(self, *, key, value):
        self.values[key] = value


@pytest.fixture
def repos():
    members = FakeMembers()
    projects = FakeProjects()
    allocations = FakeAllocations()
    return SimpleNamespace(
        members=members,
        projects=projects,
        holidays=FakeHolidays(),
        vacations=FakeVacations(),
        allocations=allocations,
        settings=FakeSettings(),
    )


@pytest.fixture
def settings_service(repos):
    return SettingsService(repos.settings)


@pytest.fixture
def allocation_service(repos):
    return AllocationService(repos.allocations, repos.members, repos.projects)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DATABASE_URL": "sqlite://", "AUTO_INIT_DB": True, "AUTO_SEED_DB": False, "LOG_LEVEL": "WARNING"})
    app.config["TESTING"] = True
    yield app
    app.extensions["resourceflow"].conn.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
