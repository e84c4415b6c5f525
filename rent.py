"""
rent.py
Month-by-month rent schedule for a single lease.

Core:
- calculate_monthly_rent(contract)       -> list of MonthlyRentRecord, lease-start month
                                            through the month containing window_end_date
- calculate_first_month_rent(...)         -> 1 or 2 seed records (prorated first month)
- calculate_new_monthly_rent(prev, rate)  -> prev * (1 + rate), unrounded

Conventions:
- Proration uses a fixed 30-day month regardless of the calendar month.
- Rent changes every `rent_rate_change_frequency` months, counted from the
  first full-rent due date.
- Vacancy is derived from the sign of rent_change_rate only.
"""

from __future__ import annotations
import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from contract import (
    Contract,
    MonthlyRentRecord,
    MonthlyRentRecords,
    Number,
    to_decimal,
    validate_contract,
)
from date_utils import add_months, calculate_month_difference, correct_rent_due_date

logger = logging.getLogger(__name__)

PRORATION_DAYS = Decimal(30)
CENT = Decimal("0.01")


# ------------------------------
# Helpers
# ------------------------------
def round2(value: Number) -> Decimal:
    """Round half-up to cents."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def is_vacant(rent_change_rate: Number) -> bool:
    return to_decimal(rent_change_rate) < 0


def calculate_new_monthly_rent(previous_rent: Number, rent_change_rate: Number) -> Decimal:
    return to_decimal(previous_rent) * (1 + to_decimal(rent_change_rate))


# ------------------------------
# First month
# ------------------------------
def calculate_first_month_rent(
    day_of_month_rent_due: int,
    lease_start_date: date,
    base_monthly_rent: Number,
    rent_change_rate: Number,
) -> MonthlyRentRecords:
    """
    Seed records for the lease-start month.

    due day == start day : [full rent on the due date]
    due day <  start day : [prorated rent on this month's (already passed) due date]
    due day >  start day : [prorated stub on lease_start_date, full rent on the due date]
    """
    base = to_decimal(base_monthly_rent)
    vacancy = is_vacant(rent_change_rate)
    start_day = lease_start_date.day
    due_date = correct_rent_due_date(
        lease_start_date.year, lease_start_date.month, day_of_month_rent_due
    )

    if day_of_month_rent_due == start_day:
        return [MonthlyRentRecord(vacancy, base, due_date)]

    fraction = Decimal(day_of_month_rent_due - start_day) / PRORATION_DAYS

    if day_of_month_rent_due < start_day:
        return [MonthlyRentRecord(vacancy, round2(base * (1 - fraction)), due_date)]

    return [
        MonthlyRentRecord(vacancy, round2(base * fraction), lease_start_date),
        MonthlyRentRecord(vacancy, base, due_date),
    ]


# ------------------------------
# Schedule
# ------------------------------
def calculate_monthly_rent(contract: Contract) -> MonthlyRentRecords:
    """
    Vacancy, rent amount and due date for each month from the lease start
    through the month containing contract.window_end_date.

    Raises InvalidInput / InvalidConfiguration (see contract.validate_contract).
    """
    validate_contract(contract)

    rate = to_decimal(contract.rent_change_rate)
    freq = contract.rent_rate_change_frequency
    due_day = contract.day_of_month_rent_due
    vacancy = is_vacant(rate)

    records = calculate_first_month_rent(
        due_day, contract.lease_start_date, contract.base_monthly_rent, rate
    )
    logger.debug(
        "seeded %d first-month record(s), first due %s",
        len(records),
        records[-1].rent_due_date,
    )

    last_due = records[-1].rent_due_date
    if calculate_month_difference(contract.window_end_date, last_due) < 0:
        logger.warning(
            "window ends %s before the first due date %s; returning first month only",
            contract.window_end_date,
            last_due,
        )

    current_rent = records[-1].rent_amount
    elapsed = 0
    while calculate_month_difference(contract.window_end_date, last_due) >= 1:
        elapsed += 1
        last_due = add_months(last_due, 1, due_day)
        if elapsed % freq == 0:
            current_rent = round2(calculate_new_monthly_rent(current_rent, rate))
            logger.debug("rent changed to %s on %s (month %d)", current_rent, last_due, elapsed)
        else:
            current_rent = round2(current_rent)
        records.append(MonthlyRentRecord(vacancy, current_rent, last_due))

    return records


def records_in_window(
    records: Iterable[MonthlyRentRecord], window_start: date, window_end: date
) -> MonthlyRentRecords:
    """Records whose due date falls inside [window_start, window_end]."""
    return [r for r in records if window_start <= r.rent_due_date <= window_end]
