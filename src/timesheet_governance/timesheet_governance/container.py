from __future__ import annotations

from dataclasses import dataclass

from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .occurrences.mysql_occurrence_repository import MySQLOccurrenceRepository
from .occurrences.service import OccurrenceService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.service import PunchImportService
from .settings import AppSettings
from .worklog.calculator.standard_calculator import StandardWorklogCalculator
from .worklog.mysql_worklog_repository import MySQLWorklogRepository
from .worklog.service import WorklogService


@dataclass(frozen=True)
class Container:
    settings: AppSettings
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    punches_repo: MySQLPunchRepository
    worklogs_repo: MySQLWorklogRepository
    occurrences_repo: MySQLOccurrenceRepository

    worklog_service: WorklogService
    occurrence_service: OccurrenceService
    employee_service: EmployeeService
    dashboard_service: DashboardService
    punch_import_service: PunchImportService


def build_container(settings: AppSettings) -> Container:
    conn = DatabaseConnection(settings.db)

    employees_repo = MySQLEmployeeRepository(conn)
    punches_repo = MySQLPunchRepository(conn)
    worklogs_repo = MySQLWorklogRepository(conn)
    occurrences_repo = MySQLOccurrenceRepository(conn)

    worklog_service = WorklogService(
        punches_repo,
        worklogs_repo,
        employees_repo,
        config=settings.workday,
        tz=settings.tz,
        calculator=StandardWorklogCalculator(),
    )
    occurrence_service = OccurrenceService(occurrences_repo, employees_repo)
    employee_service = EmployeeService(employees_repo, occurrences_repo)
    dashboard_service = DashboardService(employees_repo, occurrences_repo, worklogs_repo)
    punch_import_service = PunchImportService(punches_repo, employees_repo, tz=settings.tz)

    return Container(
        settings=settings,
        conn=conn,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        worklogs_repo=worklogs_repo,
        occurrences_repo=occurrences_repo,
        worklog_service=worklog_service,
        occurrence_service=occurrence_service,
        employee_service=employee_service,
        dashboard_service=dashboard_service,
        punch_import_service=punch_import_service,
    )
