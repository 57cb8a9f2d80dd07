from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .admin.auth_service import AdminAuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceLogRepository
from .attendance.repository import AttendanceLogRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_OFFICE_SSID, ITEMS_PER_PAGE
from .database.connection import DatabaseConnection, DBConfig
from .network.gate import NetworkPolicy
from .reports.service import ReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    logs_repo: AttendanceLogRepository
    settings_repo: SettingsRepository

    network_policy: NetworkPolicy
    auth_service: AdminAuthService
    attendance_service: AttendanceService
    report_service: ReportService
    settings_service: SettingsService


def build_services(
    *,
    logs_repo: AttendanceLogRepository,
    settings_repo: SettingsRepository,
    network_policy: NetworkPolicy,
    admin_email: str = "",
    admin_password_hash: str = "",
    tz: Optional[tzinfo] = None,
    office_ssid: str = DEFAULT_OFFICE_SSID,
    page_size: int = ITEMS_PER_PAGE,
) -> Container:
    """Wire services around whatever repositories the caller provides."""

    return Container(
        logs_repo=logs_repo,
        settings_repo=settings_repo,
        network_policy=network_policy,
        auth_service=AdminAuthService(admin_email=admin_email, admin_password_hash=admin_password_hash),
        attendance_service=AttendanceService(logs_repo, tz=tz),
        report_service=ReportService(logs_repo, tz=tz, page_size=page_size),
        settings_service=SettingsService(settings_repo, default_office_ssid=office_ssid),
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        logs_repo=MySQLAttendanceLogRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        **options,
    )
