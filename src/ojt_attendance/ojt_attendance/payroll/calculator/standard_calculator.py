from __future__ import annotations

from datetime import datetime, time
from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import LUNCH_DEDUCTION_HOURS, LUNCH_THRESHOLD_HOURS, SHIFT_END, SHIFT_START
from .base import HoursCalculator

_SECONDS_PER_HOUR = Decimal(3600)
_CENTS = Decimal("0.01")
ZERO_HOURS = Decimal("0.00")


class ShiftWindowHoursCalculator(HoursCalculator):
    """Standard rule: clip to the shift window, then deduct lunch above a threshold.

    - window is anchored to the time-in's calendar date
    - early arrivals count from shift start, late departures stop at shift end
    - more than `lunch_threshold_hours` loses exactly `lunch_deduction_hours`
    - result is rounded half-up to 2 decimals and never below 0
    """

    def __init__(
        self,
        *,
        shift_start: time = SHIFT_START,
        shift_end: time = SHIFT_END,
        lunch_threshold_hours: float = LUNCH_THRESHOLD_HOURS,
        lunch_deduction_hours: float = LUNCH_DEDUCTION_HOURS,
    ):
        self._shift_start = shift_start
        self._shift_end = shift_end
        self._lunch_threshold = Decimal(str(lunch_threshold_hours))
        self._lunch_deduction = Decimal(str(lunch_deduction_hours))

    def shift_window(self, time_in: datetime) -> tuple[datetime, datetime]:
        day = time_in.date()
        start = datetime.combine(day, self._shift_start, tzinfo=time_in.tzinfo)
        end = datetime.combine(day, self._shift_end, tzinfo=time_in.tzinfo)
        return start, end

    def worked_hours(self, time_in: datetime, time_out: datetime) -> Decimal:
        start, end = self.shift_window(time_in)
        effective_in = max(time_in, start)
        effective_out = min(time_out, end)

        seconds = Decimal(str((effective_out - effective_in).total_seconds()))
        hours = max(Decimal(0), seconds / _SECONDS_PER_HOUR)
        if hours > self._lunch_threshold:
            hours -= self._lunch_deduction

        return max(ZERO_HOURS, hours.quantize(_CENTS, rounding=ROUND_HALF_UP))
