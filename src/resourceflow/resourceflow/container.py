from __future__ import annotations

from dataclasses import dataclass

from .allocations.service import AllocationService
from .allocations.sql_allocation_repository import SQLAllocationRepository
from .capacity.calculator.standard_calculator import StandardCapacityCalculator
from .capacity.service import UtilizationReportService
from .core.constants import WEEKS_PER_MONTH
from .data_transfer.service import DataTransferService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.service import HolidayService
from .holidays.sql_holiday_repository import SQLHolidayRepository
from .planner.factory import EditStrategyFactory
from .planner.service import PlannerService
from .projects.service import ProjectService
from .projects.sql_project_repository import SQLProjectRepository
from .settings.service import SettingsService
from .settings.sql_settings_repository import SQLSettingsRepository
from .team_members.service import TeamMemberService
from .team_members.sql_team_member_repository import SQLTeamMemberRepository
from .vacations.service import VacationService
from .vacations.sql_vacation_repository import SQLVacationRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    members_repo: SQLTeamMemberRepository
    projects_repo: SQLProjectRepository
    holidays_repo: SQLHolidayRepository
    vacations_repo: SQLVacationRepository
    allocations_repo: SQLAllocationRepository
    settings_repo: SQLSettingsRepository

    team_member_service: TeamMemberService
    project_service: ProjectService
    holiday_service: HolidayService
    vacation_service: VacationService
    allocation_service: AllocationService
    settings_service: SettingsService
    utilization_service: UtilizationReportService
    planner_service: PlannerService
    data_transfer_service: DataTransferService


def build_container(*, database_url: str, echo: bool = False, weeks_per_month: float = WEEKS_PER_MONTH) -> Container:
    conn = DatabaseConnection(DBConfig(url=database_url, echo=echo))

    members_repo = SQLTeamMemberRepository(conn)
    projects_repo = SQLProjectRepository(conn)
    holidays_repo = SQLHolidayRepository(conn)
    vacations_repo = SQLVacationRepository(conn)
    allocations_repo = SQLAllocationRepository(conn)
    settings_repo = SQLSettingsRepository(conn)

    team_member_service = TeamMemberService(members_repo)
    project_service = ProjectService(projects_repo)
    holiday_service = HolidayService(holidays_repo)
    vacation_service = VacationService(vacations_repo, members_repo)
    allocation_service = AllocationService(allocations_repo, members_repo, projects_repo)
    settings_service = SettingsService(settings_repo)
    utilization_service = UtilizationReportService(
        members_repo,
        projects_repo,
        holidays_repo,
        vacations_repo,
        allocations_repo,
        settings_service,
        calculator=StandardCapacityCalculator(weeks_per_month=weeks_per_month),
    )
    planner_service = PlannerService(
        allocations_repo,
        allocation_service,
        vacations_repo,
        holidays_repo,
        strategy_factory=EditStrategyFactory(),
    )
    data_transfer_service = DataTransferService(
        conn,
        members=members_repo,
        projects=projects_repo,
        member_service=team_member_service,
        project_service=project_service,
        holiday_service=holiday_service,
        vacation_service=vacation_service,
        allocation_service=allocation_service,
        settings_service=settings_service,
    )

    return Container(
        conn=conn,
        members_repo=members_repo,
        projects_repo=projects_repo,
        holidays_repo=holidays_repo,
        vacations_repo=vacations_repo,
        allocations_repo=allocations_repo,
        settings_repo=settings_repo,
        team_member_service=team_member_service,
        project_service=project_service,
        holiday_service=holiday_service,
        vacation_service=vacation_service,
        allocation_service=allocation_service,
        settings_service=settings_service,
        utilization_service=utilization_service,
        planner_service=planner_service,
        data_transfer_service=data_transfer_service,
    )
