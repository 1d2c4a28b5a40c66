from datetime import date

import pytest

from src.resourceflow.resourceflow.capacity.model import load_level
from src.resourceflow.resourceflow.capacity.service import UtilizationReportService
from src.resourceflow.resourceflow.core.enums import Country, HolidayCountry, LoadLevel, ProjectStatus
from src.resourceflow.resourceflow.core.exceptions import NotFoundError, ValidationError

MARCH = date(2026, 3, 1)


@pytest.fixture
def service(repos, settings_service):
    return UtilizationReportService(
        repos.members,
        repos.projects,
        repos.holidays,
        repos.vacations,
        repos.allocations,
        settings_service,
    )


@pytest.fixture
def team(repos):
    canadian = repos.members.create(name="John", role="Dev", country=Country.CANADA, allocated_hours=0, is_active=True)
    brazilian = repos.members.create(name="Maria", role="Dev", country=Country.BRAZIL, allocated_hours=0, is_active=True)
    project = repos.projects.create(name="Platform", start_date=None, end_date=None, color="#3b82f6", status=ProjectStatus.ACTIVE)
    return canadian, brazilian, project


def _allocate(repos, employee_id, project_id, start, end, hours=8.0):
    return repos.allocations.create(
        employee_id=employee_id,
        project_id=project_id,
        start_date=start,
        end_date=end,
        hours_per_day=hours,
        status="active",
    )


def test_month_without_holidays_or_vacations(service, team):
    canadian, _, _ = team
    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.capacity.available_hours == pytest.approx(120)
    assert row.allocated_hours == 0
    assert row.utilization_percent == 0


def test_monday_to_friday_allocation_counts_five_days(service, repos, team):
    canadian, _, project = team
    _allocate(repos, canadian, project, date(2026, 3, 2), date(2026, 3, 6))

    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.allocated_hours == pytest.approx(40)
    assert row.utilization_percent == pytest.approx(40 / 120 * 100)
    assert row.projects[0].project_name == "Platform"


def test_weekend_days_in_range_are_not_counted(service, repos, team):
    canadian, _, project = team
    # Saturday to Sunday of the following week
    _allocate(repos, canadian, project, date(2026, 3, 7), date(2026, 3, 15))

    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.allocated_hours == pytest.approx(40)


def test_country_holiday_only_applies_to_that_country(service, repos, team):
    canadian, brazilian, project = team
    repos.holidays.create(name="Local", day=date(2026, 3, 4), country=HolidayCountry.CANADA)
    _allocate(repos, canadian, project, date(2026, 3, 2), date(2026, 3, 6))
    _allocate(repos, brazilian, project, date(2026, 3, 2), date(2026, 3, 6))

    ca = service.member_month(member_id=canadian, month=MARCH)
    br = service.member_month(member_id=brazilian, month=MARCH)

    assert ca.allocated_hours == pytest.approx(32)
    assert ca.capacity.holiday_hours == pytest.approx(7.5)
    assert br.allocated_hours == pytest.approx(40)
    assert br.capacity.holiday_hours == 0


def test_both_holiday_applies_to_every_country(service, repos, team):
    canadian, brazilian, project = team
    repos.holidays.create(name="Shared", day=date(2026, 3, 4), country=HolidayCountry.BOTH)
    _allocate(repos, canadian, project, date(2026, 3, 2), date(2026, 3, 6))
    _allocate(repos, brazilian, project, date(2026, 3, 2), date(2026, 3, 6))

    assert service.member_month(member_id=canadian, month=MARCH).allocated_hours == pytest.approx(32)
    assert service.member_month(member_id=brazilian, month=MARCH).allocated_hours == pytest.approx(32)


def test_vacation_days_already_holidays_are_not_double_counted(service, repos, team):
    canadian, _, _ = team
    repos.holidays.create(name="Local", day=date(2026, 3, 10), country=HolidayCountry.CANADA)
    repos.vacations.create(
        employee_id=canadian,
        employee_name="John",
        start_date=date(2026, 3, 9),
        end_date=date(2026, 3, 15),
        type="vacation",
        notes=None,
    )

    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.capacity.holiday_days == 1
    assert row.capacity.vacation_days == 4
    assert row.capacity.available_hours == pytest.approx(150 - 30 - 7.5 - 30)


def test_over_allocation_is_flagged_and_display_clamped(service, repos, team):
    canadian, _, project = team
    _allocate(repos, canadian, project, date(2026, 3, 1), date(2026, 3, 31))

    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.allocated_hours == pytest.approx(22 * 8)
    assert row.utilization_percent > 100
    assert row.over_allocated is True
    assert row.display_percent == 100


def test_settings_change_weekly_hours(service, repos, settings_service, team):
    canadian, _, _ = team
    settings_service.update({"canadaHours": 40, "buffer": 0})

    row = service.member_month(member_id=canadian, month=MARCH)

    assert row.capacity.available_hours == pytest.approx(160)


def test_project_distribution_sums_hours_per_project(service, repos, team):
    canadian, brazilian, project = team
    other = repos.projects.create(name="Mobile", start_date=None, end_date=None, color="#10b981", status=ProjectStatus.ACTIVE)
    _allocate(repos, canadian, project, date(2026, 3, 2), date(2026, 3, 6), hours=4)
    _allocate(repos, brazilian, project, date(2026, 3, 2), date(2026, 3, 6), hours=4)
    _allocate(repos, brazilian, other, date(2026, 3, 2), date(2026, 3, 3), hours=2)

    rows = service.project_distribution(month=MARCH)

    assert [(r.project_name, r.hours) for r in rows] == [("Platform", 40), ("Mobile", 4)]


def test_dashboard_totals(service, repos, team):
    canadian, _, project = team
    _allocate(repos, canadian, project, date(2026, 3, 2), date(2026, 3, 6))

    data = service.dashboard(month=MARCH)

    assert data["member_count"] == 2
    assert data["active_project_count"] == 1
    assert data["total_allocated_hours"] == pytest.approx(40)
    assert data["total_available_hours"] == pytest.approx(120 + 140.8)
    assert data["charts"]["utilization"]["labels"] == ["John", "Maria"]


def test_timeline_covers_consecutive_months(service, team):
    canadian, _, _ = team
    rows = service.timeline(member_id=canadian, start_month=date(2026, 11, 1), months=3)

    assert [r.month for r in rows] == [date(2026, 11, 1), date(2026, 12, 1), date(2027, 1, 1)]


def test_timeline_rejects_out_of_range_month_count(service, team):
    canadian, _, _ = team
    with pytest.raises(ValidationError):
        service.timeline(member_id=canadian, start_month=MARCH, months=0)


def test_unknown_member_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.member_month(member_id=999, month=MARCH)


def test_daily_view_reports_load_per_day(service, repos, team):
    canadian, _, project = team
    _allocate(repos, canadian, project, date(2026, 3, 6), date(2026, 3, 9), hours=6)

    data = service.daily(start=date(2026, 3, 6), end=date(2026, 3, 9), employee_id=canadian)
    days = data["members"][0]["days"]

    assert [d["hours"] for d in days] == [6, 0, 0, 6]
    assert days[0]["load"] == LoadLevel.FULL.value
    assert days[1]["is_weekend"] is True


def test_load_level_buckets():
    assert load_level(0, 8) == LoadLevel.NONE
    assert load_level(2, 8) == LoadLevel.LOW
    assert load_level(4, 8) == LoadLevel.MEDIUM
    assert load_level(6, 8) == LoadLevel.HIGH
    assert load_level(8, 8) == LoadLevel.FULL
    assert load_level(9, 8) == LoadLevel.OVER
