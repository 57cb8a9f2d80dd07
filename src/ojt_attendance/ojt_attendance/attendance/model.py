from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceAction


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one scan action, already in the viewer's timezone."""

    student_name: str
    timestamp: datetime
    status: str
    action: AttendanceAction
    task_note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceLog:
    """Row of attendance_logs, as stored (logged_at is UTC)."""

    log_id: int
    student_name: str
    student_id: Optional[str]
    status: str
    task_accomplishment: Optional[str]
    logged_at: datetime

    def as_record(self) -> dict:
        """Raw-record shape consumed by sessions.reconcile."""
        return {
            "id": self.log_id,
            "student_name": self.student_name,
            "status": self.status,
            "timestamp": self.logged_at,
            "task_accomplishment": self.task_accomplishment,
        }


@dataclass(frozen=True)
class ScanReceipt:
    log_id: int
    student_name: str
    action: AttendanceAction
    logged_at: datetime
