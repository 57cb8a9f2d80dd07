from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional

from ..attendance.repository import AttendanceLogRepository
from ..common.datetime_utils import to_local, today_local
from ..core.constants import ITEMS_PER_PAGE
from ..core.exceptions import ValidationError
from ..payroll.calculator.base import HoursCalculator
from ..payroll.calculator.standard_calculator import ShiftWindowHoursCalculator
from ..sessions.filters import ALL_STUDENTS, filter_sessions, paginate, total_hours, unique_student_names
from ..sessions.model import DailySession
from ..sessions.reconcile import reconcile
from .export import export_filename, write_xlsx
from .formatting import format_date, format_hours, format_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    total_logs: int
    today_activity: int
    sessions: list[DailySession]


@dataclass(frozen=True)
class AdminView:
    rows: list[dict]
    page: int
    total_pages: int
    total_results: int
    unique_names: list[str]
    total_logs: int
    today_activity: int
    filtered_total_hours: str

    def as_dict(self) -> dict:
        return {
            "rows": self.rows,
            "page": self.page,
            "total_pages": self.total_pages,
            "total_results": self.total_results,
            "unique_names": self.unique_names,
            "total_logs": self.total_logs,
            "today_activity": self.today_activity,
            "filtered_total_hours": self.filtered_total_hours,
        }


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes


class ReportService:
    """Admin read side: every call re-fetches the logs and reconciles them."""

    def __init__(
        self,
        logs: AttendanceLogRepository,
        *,
        tz: Optional[tzinfo] = None,
        calculator: Optional[HoursCalculator] = None,
        page_size: int = ITEMS_PER_PAGE,
    ):
        self._logs = logs
        self._tz = tz
        self._calculator = calculator or ShiftWindowHoursCalculator()
        self._page_size = int(page_size)

    def snapshot(self, *, today: Optional[date] = None) -> Snapshot:
        logs = self._logs.list_all()
        today = today or today_local(self._tz)

        records = [log.as_record() for log in logs]
        sessions = reconcile(records, tz=self._tz, calculator=self._calculator)

        today_count = 0
        for log in logs:
            local = to_local(log.logged_at, self._tz)
            if local is not None and local.date() == today:
                today_count += 1

        logger.debug("snapshot: %d logs -> %d sessions", len(logs), len(sessions))
        return Snapshot(total_logs=len(logs), today_activity=today_count, sessions=sessions)

    def build_admin_view(
        self,
        *,
        student: Optional[str] = ALL_STUDENTS,
        month: Optional[str] = None,
        page: int = 1,
        today: Optional[date] = None,
    ) -> AdminView:
        snap = self.snapshot(today=today)
        filtered = filter_sessions(snap.sessions, student=student, month=month)
        current = paginate(filtered, page=page, page_size=self._page_size)

        return AdminView(
            rows=[self._to_row(s) for s in current.items],
            page=current.page,
            total_pages=current.total_pages,
            total_results=current.total_items,
            unique_names=unique_student_names(snap.sessions),
            total_logs=snap.total_logs,
            today_activity=snap.today_activity,
            filtered_total_hours=format_hours(total_hours(filtered)),
        )

    def export_xlsx(self, *, student: Optional[str] = ALL_STUDENTS, month: Optional[str] = None) -> ExportFile:
        filtered = filter_sessions(self.snapshot().sessions, student=student, month=month)
        if not filtered:
            raise ValidationError("No records to export.")
        return ExportFile(filename=export_filename(student=student, month=month), content=write_xlsx(filtered))

    def latest_marker(self) -> dict:
        total, latest = self._logs.latest_marker()
        return {"total_logs": total, "latest_logged_at": latest.isoformat() if latest else None}

    def _to_row(self, s: DailySession) -> dict:
        return {
            "id": s.session_id,
            "student_name": s.student_key,
            "date": format_date(s.work_date),
            "work_date": s.work_date.isoformat(),
            "time_in": format_time(s.time_in),
            "time_out": format_time(s.time_out),
            "has_time_in": s.time_in is not None,
            "has_time_out": s.time_out is not None,
            "total_hours": format_hours(s.effective_hours),
            "task_accomplishment": s.task_note,
        }
