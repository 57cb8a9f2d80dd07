from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from ojt_attendance.core.exceptions import ValidationError
from ojt_attendance.sessions.filters import filter_sessions, paginate, total_hours, unique_student_names
from ojt_attendance.sessions.model import DailySession


def make_session(name: str, day: date, hours: str = "0.00") -> DailySession:
    return DailySession(
        student_key=name,
        work_date=day,
        time_in=None,
        time_out=None,
        effective_hours=Decimal(hours),
        task_note="No task reported",
        first_seen=datetime.combine(day, datetime.min.time()),
    )


SESSIONS = [
    make_session("ALICE", date(2024, 2, 2), "8.00"),
    make_session("BOB", date(2024, 2, 1), "4.02"),
    make_session("ALICE", date(2024, 1, 31), "5.00"),
]


def test_filter_all_keeps_everything_in_order():
    assert filter_sessions(SESSIONS) == SESSIONS


def test_filter_by_student_normalizes_selector():
    result = filter_sessions(SESSIONS, student=" alice ")
    assert [s.work_date for s in result] == [date(2024, 2, 2), date(2024, 1, 31)]


def test_filter_by_month():
    result = filter_sessions(SESSIONS, month="2024-02")
    assert [s.student_key for s in result] == ["ALICE", "BOB"]


def test_filter_by_student_and_month():
    result = filter_sessions(SESSIONS, student="ALICE", month="2024-01")
    assert len(result) == 1
    assert result[0].work_date == date(2024, 1, 31)


def test_filter_rejects_bad_month():
    with pytest.raises(ValidationError):
        filter_sessions(SESSIONS, month="Feb 2024")


def test_unique_names_sorted_and_distinct():
    assert unique_student_names(SESSIONS) == ["ALICE", "BOB"]


def test_total_hours():
    assert total_hours(SESSIONS) == Decimal("17.02")
    assert total_hours([]) == Decimal("0.00")


def test_paginate_slices_and_counts_pages():
    items = list(range(12))

    first = paginate(items, page=1, page_size=5)
    last = paginate(items, page=3, page_size=5)

    assert first.items == [0, 1, 2, 3, 4]
    assert first.total_pages == 3
    assert not first.has_prev and first.has_next
    assert last.items == [10, 11]
    assert last.has_prev and not last.has_next


def test_paginate_past_end_is_empty():
    page = paginate([1, 2], page=4, page_size=5)
    assert page.items == []
    assert page.total_pages == 1


def test_paginate_empty_has_zero_pages():
    assert paginate([], page=1).total_pages == 0


@pytest.mark.parametrize("page,page_size", [(0, 5), (1, 0), ("x", 5)])
def test_paginate_rejects_invalid_arguments(page, page_size):
    with pytest.raises(ValidationError):
        paginate([1, 2, 3], page=page, page_size=page_size)


def test_student_named_all_is_not_the_all_selector():
    sessions = SESSIONS + [make_session("ALL", date(2024, 2, 3), "3.00")]

    assert filter_sessions(sessions, student="All") == [sessions[-1]]
    assert filter_sessions(sessions, student="all") == sessions
