"""
contract.py
Lease contract inputs and monthly rent records.

- Contract           : immutable lease terms + requested report window
- MonthlyRentRecord  : one row of the rent schedule (vacancy, amount, due date)
- validate_contract  : precondition checks raised before any schedule is built

Money is carried as Decimal. Plain ints/floats are accepted and converted
through str(), so 1234.56 stays 1234.56 instead of its binary expansion.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Union

Number = Union[Decimal, int, float, str]


class InvalidInput(ValueError):
    """A contract field is outside its allowed range."""


class InvalidConfiguration(ValueError):
    """The contract terms cannot produce a schedule (e.g. zero change frequency)."""


def to_decimal(x: Number) -> Decimal:
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


@dataclass(frozen=True)
class Contract:
    base_monthly_rent: Number      # starting monthly rent
    lease_start_date: date
    window_start_date: date
    window_end_date: date
    day_of_month_rent_due: int     # 1..31, clamped per month
    rent_rate_change_frequency: int  # months between rent changes
    rent_change_rate: Number       # decimal fraction, negative = vacant


@dataclass(frozen=True)
class MonthlyRentRecord:
    vacancy: bool
    rent_amount: Decimal
    rent_due_date: date


MonthlyRentRecords = List[MonthlyRentRecord]


def validate_contract(contract: Contract) -> None:
    """Raise InvalidInput / InvalidConfiguration for contracts that cannot be scheduled."""
    day = contract.day_of_month_rent_due
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
        raise InvalidInput(f"day_of_month_rent_due must be an integer in 1..31, got {day!r}")

    freq = contract.rent_rate_change_frequency
    if isinstance(freq, bool) or not isinstance(freq, int) or freq < 1:
        raise InvalidConfiguration(
            f"rent_rate_change_frequency must be a positive number of months, got {freq!r}"
        )
