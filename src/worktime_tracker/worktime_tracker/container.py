from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .clock.mysql_time_entry_repository import MySQLTimeEntryRepository
from .clock.repository import TimeEntryRepository
from .clock.service import ClockService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    entries_repo: TimeEntryRepository

    auth_service: AuthService
    clock_service: ClockService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    users_repo: UserRepository,
    entries_repo: TimeEntryRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        users_repo=users_repo,
        entries_repo=entries_repo,
        auth_service=AuthService(users_repo),
        clock_service=ClockService(entries_repo),
        report_service=ReportService(entries_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        entries_repo=MySQLTimeEntryRepository(conn),
        conn=conn,
    )
