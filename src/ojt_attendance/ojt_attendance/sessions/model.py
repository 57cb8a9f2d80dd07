from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class DailySession:
    """Read-model: one student's reconciled attendance for one calendar day."""

    student_key: str
    work_date: date
    time_in: Optional[datetime]
    time_out: Optional[datetime]
    effective_hours: Decimal
    task_note: str
    first_seen: datetime

    @property
    def session_id(self) -> str:
        return f"{self.student_key}-{self.work_date.isoformat()}"

    @property
    def is_complete(self) -> bool:
        return self.time_in is not None and self.time_out is not None
