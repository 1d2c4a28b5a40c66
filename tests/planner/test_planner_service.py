from datetime import date

import pytest

from src.resourceflow.resourceflow.core.enums import Country, ProjectStatus
from src.resourceflow.resourceflow.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.resourceflow.resourceflow.planner.service import PlannerService


@pytest.fixture
def planner(repos, allocation_service):
    return PlannerService(repos.allocations, allocation_service, repos.vacations, repos.holidays)


@pytest.fixture
def ids(repos):
    member = repos.members.create(name="Ana", role="Designer", country=Country.BRAZIL, allocated_hours=0, is_active=True)
    project = repos.projects.create(name="API", start_date=None, end_date=None, color="#f59e0b", status=ProjectStatus.ACTIVE)
    other = repos.projects.create(name="DB", start_date=None, end_date=None, color="#ef4444", status=ProjectStatus.ACTIVE)
    return member, project, other


def test_drop_creates_single_day_allocation(planner, ids):
    member, project, _ = ids
    allocation = planner.drop({"employeeId": member, "projectId": project, "date": "2026-03-10"})

    assert allocation.start_date == allocation.end_date == date(2026, 3, 10)
    assert allocation.hours_per_day == 8


def test_drop_on_same_project_and_day_is_a_conflict(planner, repos, ids):
    member, project, _ = ids
    planner.drop({"employeeId": member, "projectId": project, "date": "2026-03-10"})

    with pytest.raises(ConflictError):
        planner.drop({"employeeId": member, "projectId": project, "date": "2026-03-10"})
    assert len(repos.allocations.list_all()) == 1


def test_drop_on_other_project_same_day_is_allowed(planner, repos, ids):
    member, project, other = ids
    planner.drop({"employeeId": member, "projectId": project, "date": "2026-03-10", "hoursPerDay": 4})
    planner.drop({"employeeId": member, "projectId": other, "date": "2026-03-10", "hoursPerDay": 4})

    assert len(repos.allocations.list_all()) == 2


def test_drop_requires_existing_member(planner, ids):
    _, project, _ = ids
    with pytest.raises(ValidationError):
        planner.drop({"employeeId": 999, "projectId": project, "date": "2026-03-10"})


def test_move_shifts_both_edges(planner, ids, allocation_service):
    member, project, _ = ids
    created = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-06"}
    )

    moved = planner.move(created.id, {"dayOffset": -2})

    assert (moved.start_date, moved.end_date) == (date(2026, 2, 28), date(2026, 3, 4))


def test_move_into_existing_allocation_is_rejected(planner, ids, allocation_service):
    member, project, _ = ids
    first = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-03"}
    )
    allocation_service.create({"employeeId": member, "projectId": project, "startDate": "2026-03-10", "endDate": "2026-03-10"})

    with pytest.raises(ConflictError):
        planner.move(first.id, {"dayOffset": 7})
    assert allocation_service.get(first.id).start_date == date(2026, 3, 2)


def test_move_over_itself_is_not_a_conflict(planner, ids, allocation_service):
    member, project, _ = ids
    created = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-06"}
    )

    moved = planner.move(created.id, {"dayOffset": 1})

    assert moved.end_date == date(2026, 3, 7)


def test_resize_end_extends_range(planner, ids, allocation_service):
    member, project, _ = ids
    created = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-06"}
    )

    resized = planner.resize(created.id, {"edge": "end", "date": "2026-03-13"})

    assert (resized.start_date, resized.end_date) == (date(2026, 3, 2), date(2026, 3, 13))


def test_resize_start_past_end_is_invalid(planner, ids, allocation_service):
    member, project, _ = ids
    created = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-06"}
    )

    with pytest.raises(ValidationError):
        planner.resize(created.id, {"edge": "start", "date": "2026-03-09"})


def test_resize_unknown_edge_is_invalid(planner, ids, allocation_service):
    member, project, _ = ids
    created = allocation_service.create(
        {"employeeId": member, "projectId": project, "startDate": "2026-03-02", "endDate": "2026-03-06"}
    )

    with pytest.raises(ValidationError):
        planner.resize(created.id, {"edge": "middle", "date": "2026-03-04"})


def test_move_missing_allocation_raises_not_found(planner):
    with pytest.raises(NotFoundError):
        planner.move(42, {"dayOffset": 1})


def test_cell_lists_allocations_and_vacation(planner, repos, ids, allocation_service):
    member, project, other = ids
    allocation_service.create({"employeeId": member, "projectId": other, "startDate": "2026-03-01", "endDate": "2026-03-31"})
    allocation_service.create({"employeeId": member, "projectId": project, "startDate": "2026-03-10", "endDate": "2026-03-10"})
    repos.vacations.create(
        employee_id=member,
        employee_name="Ana",
        start_date=date(2026, 3, 10),
        end_date=date(2026, 3, 12),
        type="vacation",
        notes=None,
    )

    cell = planner.cell(employee_id=member, day=date(2026, 3, 10))

    assert [a["project_id"] for a in cell["allocations"]] == [other, project]
    assert cell["vacation"]["employee_name"] == "Ana"
    assert cell["holiday"] is None
