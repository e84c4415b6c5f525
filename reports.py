"""
reports.py
Tabular views and exports of a rent schedule.

- schedule_dataframe(records) -> pandas DataFrame (one row per due date)
- schedule_summary(records)   -> dict of headline numbers
- build_schedule_csv(records) -> CSV bytes for download
"""

from __future__ import annotations
from decimal import Decimal
from typing import Dict, Optional

import numpy as np
import pandas as pd

from contract import MonthlyRentRecords

COLUMNS = ["rent_due_date", "vacancy", "rent_amount", "cumulative_rent"]


def schedule_dataframe(records: MonthlyRentRecords) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=COLUMNS)
    df = pd.DataFrame(
        {
            "rent_due_date": [r.rent_due_date for r in records],
            "vacancy": [r.vacancy for r in records],
            "rent_amount": [float(r.rent_amount) for r in records],
        }
    )
    df["cumulative_rent"] = df["rent_amount"].cumsum().round(2)
    return df[COLUMNS]


def schedule_summary(records: MonthlyRentRecords) -> Dict[str, Optional[object]]:
    """Headline numbers for a schedule. Escalations count month-to-month changes after the first full rent."""
    if not records:
        return {
            "months": 0,
            "first_due_date": None,
            "last_due_date": None,
            "total_rent": Decimal("0.00"),
            "escalations": 0,
        }
    # start from the first full-rent record so a prorated stub is not counted
    amounts = np.round([float(r.rent_amount) for r in records[_seed_len(records) - 1:]], 2)
    changes = np.diff(amounts)
    return {
        "months": len(records),
        "first_due_date": records[0].rent_due_date,
        "last_due_date": records[-1].rent_due_date,
        "total_rent": sum((r.rent_amount for r in records), Decimal("0")).quantize(Decimal("0.01")),
        "escalations": int(np.count_nonzero(changes)),
    }


def _seed_len(records: MonthlyRentRecords) -> int:
    # two seed records share the lease-start month
    if len(records) >= 2 and (
        records[0].rent_due_date.year,
        records[0].rent_due_date.month,
    ) == (records[1].rent_due_date.year, records[1].rent_due_date.month):
        return 2
    return 1


def build_schedule_csv(records: MonthlyRentRecords) -> bytes:
    df = schedule_dataframe(records)
    return df.to_csv(index=False).encode("utf-8")
