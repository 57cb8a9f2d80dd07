from datetime import datetime, time
from decimal import Decimal

from ojt_attendance.payroll.calculator.standard_calculator import ShiftWindowHoursCalculator


def test_standard_calculator_clips_and_subtracts_lunch():
    calc = ShiftWindowHoursCalculator()
    assert calc.worked_hours(datetime(2025, 1, 1, 7, 0), datetime(2025, 1, 1, 19, 0)) == Decimal("8.00")


def test_short_day_has_no_lunch_deduction():
    calc = ShiftWindowHoursCalculator()
    assert calc.worked_hours(datetime(2025, 1, 1, 13, 0), datetime(2025, 1, 1, 16, 30)) == Decimal("3.50")


def test_time_out_before_time_in_is_zero():
    calc = ShiftWindowHoursCalculator()
    assert calc.worked_hours(datetime(2025, 1, 1, 15, 0), datetime(2025, 1, 1, 9, 0)) == Decimal("0.00")


def test_whole_day_outside_window_is_zero():
    calc = ShiftWindowHoursCalculator()
    assert calc.worked_hours(datetime(2025, 1, 1, 18, 0), datetime(2025, 1, 1, 21, 0)) == Decimal("0.00")


def test_custom_window():
    calc = ShiftWindowHoursCalculator(shift_start=time(9, 0), shift_end=time(18, 0), lunch_threshold_hours=4)
    assert calc.worked_hours(datetime(2025, 1, 1, 8, 0), datetime(2025, 1, 1, 13, 30)) == Decimal("3.50")


def test_exact_half_hundredth_rounds_up():
    # 1h 0m 18s is exactly 1.005 hours
    calc = ShiftWindowHoursCalculator()
    assert calc.worked_hours(datetime(2025, 1, 1, 9, 0, 0), datetime(2025, 1, 1, 10, 0, 18)) == Decimal("1.01")
