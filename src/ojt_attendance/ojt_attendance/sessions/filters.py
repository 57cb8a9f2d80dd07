from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, Optional, Sequence, TypeVar

from ..common.validators import optional_year_month, require_positive_int
from ..core.constants import ITEMS_PER_PAGE
from .model import DailySession
from .reconcile import normalize_student_name

T = TypeVar("T")

ALL_STUDENTS = "all"


def filter_sessions(
    sessions: Sequence[DailySession],
    *,
    student: Optional[str] = ALL_STUDENTS,
    month: Optional[str] = None,
) -> list[DailySession]:
    """Narrow by student name and/or YYYY-MM month, keeping order."""

    year_month = optional_year_month(month)
    wanted = None
    if student and student != ALL_STUDENTS:
        wanted = normalize_student_name(student)

    out: list[DailySession] = []
    for s in sessions:
        if wanted is not None and s.student_key != wanted:
            continue
        if year_month is not None and (s.work_date.year, s.work_date.month) != year_month:
            continue
        out.append(s)
    return out


def unique_student_names(sessions: Sequence[DailySession]) -> list[str]:
    return sorted({s.student_key for s in sessions})


def total_hours(sessions: Sequence[DailySession]) -> Decimal:
    return sum((s.effective_hours for s in sessions), Decimal("0.00")).quantize(Decimal("0.01"))


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: Sequence[T], *, page: int = 1, page_size: int = ITEMS_PER_PAGE) -> Page[T]:
    page = require_positive_int(page, "page")
    page_size = require_positive_int(page_size, "page_size")

    total = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total,
        total_pages=math.ceil(total / page_size),
    )
