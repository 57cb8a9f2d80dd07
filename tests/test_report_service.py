from __future__ import annotations

import io
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from openpyxl import load_workbook

from ojt_attendance.attendance.model import AttendanceLog
from ojt_attendance.core.exceptions import ValidationError
from ojt_attendance.reports.export import export_filename
from ojt_attendance.reports.service import ReportService

MANILA = ZoneInfo("Asia/Manila")


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def log(log_id, name, status, logged_at, task=None) -> AttendanceLog:
    return AttendanceLog(
        log_id=log_id,
        student_name=name,
        student_id="OJT-SYSTEM-FIXED-001",
        status=status,
        task_accomplishment=task,
        logged_at=logged_at,
    )


class FakeLogsRepo:
    def __init__(self, logs):
        self._logs = logs
        self.list_calls = 0

    def list_all(self):
        self.list_calls += 1
        return list(self._logs)

    def latest_marker(self):
        if not self._logs:
            return 0, None
        return len(self._logs), max(l.logged_at for l in self._logs)


# Newest first, the way the repository returns them. Manila is UTC+8.
LOGS = [
    log(6, "bea", "Time Out", utc(2026, 2, 2, 9, 30), "Ongoing..."),
    log(5, "Bea ", "Time In", utc(2026, 2, 2, 0, 15)),
    log(4, "Alex", "Time Out", utc(2026, 1, 31, 5, 1), "Inventory"),
    log(3, "alex", "Time In", utc(2026, 1, 31, 0, 0)),
    log(2, "Alex", "Time Out", utc(2026, 1, 30, 9, 0), "Setup"),
    log(1, "Alex", "Time In", utc(2026, 1, 29, 22, 30)),
]


def make_service(logs=LOGS, page_size=5):
    repo = FakeLogsRepo(logs)
    return ReportService(repo, tz=MANILA, page_size=page_size), repo


def test_snapshot_groups_by_manila_day():
    svc, _ = make_service()

    snap = svc.snapshot(today=date(2026, 2, 2))

    assert snap.total_logs == 6
    assert snap.today_activity == 2
    assert [(s.student_key, s.work_date) for s in snap.sessions] == [
        ("BEA", date(2026, 2, 2)),
        ("ALEX", date(2026, 1, 31)),
        ("ALEX", date(2026, 1, 30)),
    ]


def test_admin_view_rows_and_totals():
    svc, _ = make_service()

    view = svc.build_admin_view(student="alex", today=date(2026, 2, 2))

    assert view.total_results == 2
    assert view.unique_names == ["ALEX", "BEA"]
    # Jan 31: 08:00-13:01 -> 4.02; Jan 30: 06:30-17:00 clipped -> 8.00
    assert [r["total_hours"] for r in view.rows] == ["4.02", "8.00"]
    assert view.filtered_total_hours == "12.02"
    assert view.rows[0]["time_in"] == "08:00 AM"
    assert view.rows[0]["task_accomplishment"] == "Inventory"
    assert view.rows[0]["date"] == "January 31, 2026"


def test_admin_view_placeholder_for_missing_side():
    svc, _ = make_service(LOGS[1:])

    view = svc.build_admin_view(today=date(2026, 2, 2))
    bea = view.rows[0]

    assert bea["time_out"] == "--:--"
    assert bea["has_time_out"] is False
    assert bea["total_hours"] == "0.00"
    assert bea["task_accomplishment"] == "No task reported"


def test_admin_view_paginates():
    svc, _ = make_service(page_size=2)

    view = svc.build_admin_view(page=2, today=date(2026, 2, 2))

    assert view.total_pages == 2
    assert view.page == 2
    assert len(view.rows) == 1


def test_every_view_refetches():
    svc, repo = make_service()
    svc.build_admin_view(today=date(2026, 2, 2))
    svc.build_admin_view(today=date(2026, 2, 2))
    assert repo.list_calls == 2


def test_export_xlsx_headers_and_name():
    svc, _ = make_service()

    export = svc.export_xlsx(student="Alex", month="2026-01")

    assert export.filename == "OJT_Report_2026-01_Alex.xlsx"
    sheet = load_workbook(io.BytesIO(export.content))["Attendance"]
    headers = [c.value for c in next(sheet.iter_rows(min_row=1, max_row=1))]
    assert headers == ["STUDENT NAME", "DATE", "TIME IN", "TIME OUT", "HOURS", "TASK"]
    assert sheet.max_row == 3


def test_export_empty_selection_fails():
    svc, _ = make_service()
    with pytest.raises(ValidationError):
        svc.export_xlsx(student="nobody")


def test_export_filename_defaults():
    assert export_filename(student="all", month=None) == "OJT_Report_Full_History.xlsx"
    assert export_filename(student="All", month="2026-01") == "OJT_Report_2026-01_All.xlsx"
    assert export_filename(student="Juan Dela Cruz", month="") == "OJT_Report_Full_History_Juan_Dela_Cruz.xlsx"


def test_latest_marker():
    svc, _ = make_service()
    assert svc.latest_marker() == {"total_logs": 6, "latest_logged_at": "2026-02-02T09:30:00+00:00"}
