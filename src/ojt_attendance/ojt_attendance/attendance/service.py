from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.enums import AttendanceAction
from ..core.exceptions import NetworkAccessDenied, ValidationError
from ..qr.poster import parse_qr_payload
from .classifier import classify_action
from .model import ScanReceipt
from .repository import AttendanceLogRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: a student records a time-in or time-out by scanning the QR."""

    def __init__(self, logs: AttendanceLogRepository, *, tz: Optional[tzinfo] = None):
        self._logs = logs
        self._tz = tz

    def local_date(self, moment: datetime) -> date:
        if moment.tzinfo is None:
            return moment.date()
        return moment.astimezone(self._tz).date() if self._tz else moment.astimezone().date()

    def has_timed_in_today(self, device_time_in_date: Optional[date], *, now: Optional[datetime] = None) -> bool:
        now = now or now_utc()
        return device_time_in_date is not None and device_time_in_date == self.local_date(now)

    def record_scan(
        self,
        *,
        student_name: str,
        action,
        qr_text: str,
        task: Optional[str] = None,
        network_authorized: bool,
        device_time_in_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> ScanReceipt:
        """Validate one scan and append it to attendance_logs.

        Checks run in the order a student would hit them: name, task for
        time-out, network, device already timed in, QR payload.
        """

        now = now or now_utc()
        name = require_non_empty(student_name, "Student name")

        kind = classify_action(action)
        if kind is AttendanceAction.UNKNOWN:
            raise ValidationError("Attendance type must be time-in or time-out")

        task_text = (task or "").strip()
        if kind is AttendanceAction.TIME_OUT and not task_text:
            raise ValidationError("Task accomplishment is required for Time Out")

        if not network_authorized:
            raise NetworkAccessDenied("Network not authorized, connect to the office WiFi first")

        if kind is AttendanceAction.TIME_IN and self.has_timed_in_today(device_time_in_date, now=now):
            raise ValidationError("This device has already timed in today")

        session_id = parse_qr_payload(qr_text)

        log_id = self._logs.insert_log(
            student_name=name,
            student_id=session_id,
            status=kind.label,
            task_accomplishment=task_text if kind is AttendanceAction.TIME_OUT else "",
            logged_at=now,
        )
        logger.info("recorded %s for %r (log_id=%s)", kind.label, name, log_id)
        return ScanReceipt(log_id=log_id, student_name=name, action=kind, logged_at=now)
