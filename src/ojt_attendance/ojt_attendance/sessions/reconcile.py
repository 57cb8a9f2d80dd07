"""Daily-session reconciliation.

Raw scan events are grouped into one record per (student, calendar day). Each
group keeps the last time-in and time-out seen in processing order, the last
real task note, and paid hours computed over the fixed shift window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from ..attendance.classifier import classify_action
from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import to_local
from ..core.constants import NO_TASK_NOTE, ONGOING_NOTE, UNKNOWN_STUDENT
from ..core.enums import AttendanceAction
from ..payroll.calculator.base import HoursCalculator
from ..payroll.calculator.standard_calculator import ZERO_HOURS, ShiftWindowHoursCalculator
from .model import DailySession

logger = logging.getLogger(__name__)

RawRecord = Union[AttendanceEvent, Mapping[str, Any]]

_NAME_FIELDS = ("name", "student_name", "studentName")
_STATUS_FIELDS = ("status", "type")
_TIMESTAMP_FIELDS = ("timestamp", "logged_at", "created_at")
_NOTE_FIELDS = ("task_accomplishment", "task", "taskNote")


def normalize_student_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    return cleaned.upper() if cleaned else UNKNOWN_STUDENT


def _first_present(record: Mapping[str, Any], fields: tuple[str, ...]) -> Any:
    for field in fields:
        value = record.get(field)
        if value not in (None, ""):
            return value
    return None


def coerce_event(record: Any, *, tz: Optional[tzinfo] = None) -> Optional[AttendanceEvent]:
    """Build an AttendanceEvent from a loosely-shaped record.

    Returns None when the record cannot take part in grouping (not a mapping,
    or no usable timestamp). Events are re-anchored to `tz` like mappings.
    """

    if isinstance(record, AttendanceEvent):
        timestamp = to_local(record.timestamp, tz)
        if timestamp is None:
            return None
        return replace(record, timestamp=timestamp)
    if not isinstance(record, Mapping):
        return None

    timestamp = to_local(_first_present(record, _TIMESTAMP_FIELDS), tz)
    if timestamp is None:
        return None

    status = _first_present(record, _STATUS_FIELDS)
    note = _first_present(record, _NOTE_FIELDS)
    name = _first_present(record, _NAME_FIELDS)
    return AttendanceEvent(
        student_name=str(name) if name is not None else "",
        timestamp=timestamp,
        status=str(status) if status is not None else "",
        action=classify_action(status),
        task_note=str(note) if note is not None else None,
    )


@dataclass
class _Group:
    student_key: str
    work_date: date
    first_seen: datetime
    time_in: Optional[datetime] = None
    time_out: Optional[datetime] = None
    task_note: str = ""


def reconcile(
    records: Iterable[RawRecord],
    *,
    tz: Optional[tzinfo] = None,
    calculator: Optional[HoursCalculator] = None,
) -> list[DailySession]:
    """Group raw events into DailySession records, most recent day first."""

    calculator = calculator or ShiftWindowHoursCalculator()
    groups: dict[tuple[str, date], _Group] = {}
    skipped = 0

    for record in records:
        event = coerce_event(record, tz=tz)
        if event is None:
            skipped += 1
            continue

        key = (normalize_student_name(event.student_name), event.timestamp.date())
        group = groups.get(key)
        if group is None:
            group = _Group(student_key=key[0], work_date=key[1], first_seen=event.timestamp)
            groups[key] = group

        if event.action is AttendanceAction.TIME_IN:
            group.time_in = event.timestamp
        elif event.action is AttendanceAction.TIME_OUT:
            group.time_out = event.timestamp
            if event.task_note and event.task_note != ONGOING_NOTE:
                group.task_note = event.task_note

    if skipped:
        logger.debug("reconcile skipped %d record(s) without a usable timestamp", skipped)

    sessions = [_to_session(g, calculator) for g in groups.values()]
    sessions.sort(key=lambda s: (s.work_date, s.first_seen), reverse=True)
    return sessions


def _to_session(group: _Group, calculator: HoursCalculator) -> DailySession:
    hours: Decimal = ZERO_HOURS
    if group.time_in is not None and group.time_out is not None:
        hours = calculator.worked_hours(group.time_in, group.time_out)

    return DailySession(
        student_key=group.student_key,
        work_date=group.work_date,
        time_in=group.time_in,
        time_out=group.time_out,
        effective_hours=hours,
        task_note=group.task_note or NO_TASK_NOTE,
        first_seen=group.first_seen,
    )
