"""
date_utils.py
Lightweight calendar helpers for rent schedules.

- parse_date("YYYY-MM-DD")              -> date
- days_in_month(year, month)            -> 28..31
- correct_rent_due_date(year, month, d) -> date with d clamped to the month length
- add_months(d, n, day)                 -> due date n months after d (year roll-over)
- calculate_month_difference(end, start)-> whole months between the two, day ignored
"""

from __future__ import annotations
from datetime import date
from calendar import monthrange


def parse_date(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _normalise(year: int, month: int):
    # month is 1-based; 13 -> January of next year, 0 -> December of previous
    y, m0 = divmod(month - 1, 12)
    return year + y, m0 + 1


def days_in_month(year: int, month: int) -> int:
    year, month = _normalise(year, month)
    return monthrange(year, month)[1]


def correct_rent_due_date(year: int, month: int, day_of_month_rent_due: int) -> date:
    """
    Due date for the given month. A due day past the end of the month
    (31 in April, 30 in February) falls on the month's last day.
    """
    year, month = _normalise(year, month)
    last_day = monthrange(year, month)[1]
    return date(year, month, min(day_of_month_rent_due, last_day))


def add_months(d: date, n: int, day_of_month_rent_due: int) -> date:
    return correct_rent_due_date(d.year, d.month + n, day_of_month_rent_due)


def calculate_month_difference(end_date: date, start_date: date) -> int:
    """Months from start_date's month to end_date's month; negative if end is earlier."""
    return (end_date.year * 12 + end_date.month) - (start_date.year * 12 + start_date.month)
