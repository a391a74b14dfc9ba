"""Date manipulation utilities

All arithmetic is on local calendar dates; datetime.date carries no
time-of-day, so day steps can't be skewed by daylight-saving transitions.
"""

import re
from datetime import date, timedelta
from typing import Any, Optional

from dateutil.relativedelta import FR, relativedelta

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today() -> date:
    """Wall-clock local date, the only ambient input of the engine"""
    return date.today()


def to_iso(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def to_date(iso: str) -> date:
    """Convert a YYYY-MM-DD string to a date (raises ValueError if impossible)"""
    year, month, day = (int(part) for part in iso.split("-"))
    return date(year, month, day)


def is_valid_iso_date(value: Any) -> bool:
    """Strict YYYY-MM-DD shape check plus round-trip equality (rejects Feb 30)"""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return False
    try:
        return to_iso(to_date(value)) == value
    except ValueError:
        return False


def parse_iso_date(value: Any) -> Optional[date]:
    """Date for a valid ISO string, None otherwise"""
    if isinstance(value, date):
        return value
    return to_date(value) if is_valid_iso_date(value) else None


def add_days(from_date: date, days: int) -> date:
    return from_date + timedelta(days=days)


def add_months_same_day(base: date, months: int) -> date:
    """
    Add calendar months keeping the day-of-month.

    Clamps to the last day of shorter months:
        2024-01-31 + 1 month -> 2024-02-29
        2023-01-31 + 1 month -> 2023-02-28
    """
    return base + relativedelta(months=months)


def last_day_of_month(base: date) -> date:
    return base + relativedelta(day=31)


def last_friday_of_month(base: date) -> date:
    """Walk back from month end to the nearest Friday"""
    return base + relativedelta(day=31, weekday=FR(-1))


def days_between(a_iso: Any, b_iso: Any) -> Optional[int]:
    """Absolute whole days between two ISO dates, None when either is invalid"""
    a = parse_iso_date(a_iso)
    b = parse_iso_date(b_iso)
    if a is None or b is None:
        return None
    return abs((a - b).days)
