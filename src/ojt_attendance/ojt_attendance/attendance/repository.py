from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceLog


class AttendanceLogRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceLog]:
        """Every log, newest first."""

        raise NotImplementedError

    def insert_log(
        self,
        *,
        student_name: str,
        student_id: Optional[str],
        status: str,
        task_accomplishment: Optional[str],
        logged_at: datetime,
    ) -> int:
        raise NotImplementedError

    def latest_marker(self) -> tuple[int, Optional[datetime]]:
        """(row count, newest logged_at) used by polling clients."""

        raise NotImplementedError
