# tests/test_date_utils.py
from datetime import date

from date_utils import (
    parse_date,
    days_in_month,
    correct_rent_due_date,
    add_months,
    calculate_month_difference,
)

# ----------------------------
# Due-date clamping
# ----------------------------

def test_due_day_31_in_30_day_month_falls_on_30th():
    assert correct_rent_due_date(2024, 4, 31) == date(2024, 4, 30)
    assert correct_rent_due_date(2025, 9, 31) == date(2025, 9, 30)

def test_february_leap_and_non_leap():
    assert correct_rent_due_date(2024, 2, 30) == date(2024, 2, 29)
    assert correct_rent_due_date(2023, 2, 30) == date(2023, 2, 28)
    # century rules: 2000 is leap, 1900 is not
    assert correct_rent_due_date(2000, 2, 31) == date(2000, 2, 29)
    assert correct_rent_due_date(1900, 2, 29) == date(1900, 2, 28)

def test_day_within_month_is_kept():
    assert correct_rent_due_date(2024, 2, 15) == date(2024, 2, 15)
    assert correct_rent_due_date(2024, 1, 31) == date(2024, 1, 31)

def test_month_overflow_rolls_into_next_or_previous_year():
    assert correct_rent_due_date(2024, 13, 15) == date(2025, 1, 15)
    assert correct_rent_due_date(2024, 0, 31) == date(2023, 12, 31)
    assert correct_rent_due_date(2023, 14, 30) == date(2024, 2, 29)

def test_days_in_month():
    assert [days_in_month(2024, m) for m in range(1, 13)] == [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    assert days_in_month(2023, 2) == 28

def test_add_months_uses_due_day_not_previous_clamped_day():
    feb = date(2024, 2, 29)  # clamped from 31
    assert add_months(feb, 1, 31) == date(2024, 3, 31)
    assert add_months(date(2024, 12, 31), 2, 31) == date(2025, 2, 28)

# ----------------------------
# Month difference
# ----------------------------

def test_month_difference_same_year():
    assert calculate_month_difference(date(2024, 3, 31), date(2024, 1, 15)) == 2
    assert calculate_month_difference(date(2024, 3, 1), date(2024, 3, 31)) == 0

def test_month_difference_across_years():
    assert calculate_month_difference(date(2025, 2, 1), date(2024, 11, 30)) == 3
    assert calculate_month_difference(date(2027, 1, 1), date(2024, 1, 1)) == 36

def test_month_difference_negative_for_any_overshoot():
    assert calculate_month_difference(date(2023, 12, 31), date(2024, 1, 1)) == -1
    assert calculate_month_difference(date(2022, 1, 1), date(2024, 6, 1)) == -29

def test_parse_date():
    assert parse_date("2024-02-29") == date(2024, 2, 29)
