"""Date and day-count helpers.

Public helpers accept and return standard Python types (`datetime.date`);
QuantLib types only appear where a curve needs them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import QuantLib as ql


def to_date(value: Any) -> date:
    """Convert a date-like input to `datetime.date`.

    Accepts `datetime.date`, `datetime.datetime`, an ISO 'YYYY-MM-DD' string
    or a QuantLib.Date.
    """
    if value is None:
        raise TypeError("date value is required")

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as e:
            raise TypeError(f"Date string must be ISO format 'YYYY-MM-DD'. Got {value!r}.") from e

    if isinstance(value, ql.Date):
        return date(int(value.year()), int(value.month()), int(value.dayOfMonth()))

    raise TypeError(
        "Date must be datetime.date/datetime, ISO string 'YYYY-MM-DD' or QuantLib.Date. "
        f"Got {type(value).__name__}."
    )


def to_optional_date(value: Any) -> date | None:
    return None if value is None else to_date(value)


def to_ql_date(value: Any) -> ql.Date:
    """Convert a date-like input to `QuantLib.Date`."""
    d = to_date(value)
    return ql.Date(d.day, d.month, d.year)


def get_day_count(name: str = "ACT365F") -> ql.DayCounter:
    """Return a QuantLib day-count convention by a simple name."""
    key = name.replace(" ", "").upper()

    if key in {"ACT365F", "ACT/365F", "ACT365"}:
        return ql.Actual365Fixed()
    if key in {"ACT360", "ACT/360"}:
        return ql.Actual360()
    if key in {"30/360", "30_360", "30360"}:
        return ql.Thirty360(ql.Thirty360.BondBasis)

    raise ValueError(f"Unknown day count {name!r}. Supported: ACT365F, ACT360, 30/360")
