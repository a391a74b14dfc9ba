"""Recurrence expansion - turns a frequency rule and first due date into dates"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from clearahead.utils.date_utils import (
    add_days,
    add_months_same_day,
    last_day_of_month,
    last_friday_of_month,
    parse_iso_date,
)

logger = logging.getLogger(__name__)

# Bound on month steps taken while fast-forwarding (~20 years)
MAX_FAST_FORWARD_PERIODS = 240

FALLBACK_PERIOD_DAYS = 30


class Frequency(str, Enum):
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    FOUR_WEEKLY = "four_weekly"
    MONTHLY = "monthly"
    LAST_DAY_OF_MONTH = "last_day_of_month"
    LAST_FRIDAY_OF_MONTH = "last_friday_of_month"


FREQUENCY_LABELS = {
    Frequency.WEEKLY: "Weekly",
    Frequency.FORTNIGHTLY: "Fortnightly",
    Frequency.FOUR_WEEKLY: "4-weekly",
    Frequency.MONTHLY: "Monthly",
    Frequency.LAST_DAY_OF_MONTH: "Last day of month",
    Frequency.LAST_FRIDAY_OF_MONTH: "Last Friday of month",
}

# Older saved data used "4-weekly"
FREQUENCY_ALIASES = {"4-weekly": Frequency.FOUR_WEEKLY}


@dataclass(frozen=True)
class RecurrenceRule:
    """How a frequency advances: fixed day steps, or month steps with an optional resolver"""

    period_days: Optional[int] = None
    monthly: bool = False
    resolve: Optional[Callable[[date], date]] = None

    def anchor(self, d: date) -> date:
        """Pin a date to the special day of its month (identity for plain rules)"""
        return self.resolve(d) if self.resolve else d

    def advance(self, d: date) -> date:
        if self.monthly:
            return self.anchor(add_months_same_day(d, 1))
        return add_days(d, self.period_days)


FREQUENCY_POLICY: Dict[Frequency, RecurrenceRule] = {
    Frequency.WEEKLY: RecurrenceRule(period_days=7),
    Frequency.FORTNIGHTLY: RecurrenceRule(period_days=14),
    Frequency.FOUR_WEEKLY: RecurrenceRule(period_days=28),
    Frequency.MONTHLY: RecurrenceRule(monthly=True),
    Frequency.LAST_DAY_OF_MONTH: RecurrenceRule(monthly=True, resolve=last_day_of_month),
    Frequency.LAST_FRIDAY_OF_MONTH: RecurrenceRule(monthly=True, resolve=last_friday_of_month),
}

# Unknown or empty frequencies still expand, on a 30-day cadence
FALLBACK_RULE = RecurrenceRule(period_days=FALLBACK_PERIOD_DAYS)


def parse_frequency(value: Any) -> Optional[Frequency]:
    """Known Frequency for a raw value, None for anything unrecognized"""
    if isinstance(value, Frequency):
        return value
    if not isinstance(value, str):
        return None
    if value in FREQUENCY_ALIASES:
        return FREQUENCY_ALIASES[value]
    try:
        return Frequency(value)
    except ValueError:
        return None


def rule_for(frequency: Any) -> RecurrenceRule:
    parsed = parse_frequency(frequency)
    return FREQUENCY_POLICY[parsed] if parsed is not None else FALLBACK_RULE


def pretty_frequency(value: Any) -> str:
    if not value:
        return "—"
    parsed = parse_frequency(value)
    return FREQUENCY_LABELS[parsed] if parsed is not None else str(value)


def expand_occurrences(
    window_start: date,
    first_occurrence: Any,
    frequency: Any,
    window_end: date,
) -> List[date]:
    """
    List every occurrence inside [window_start, window_end], ascending.

    Steps:
    1. Seed from the first due date (special monthly rules snap to that month's day)
    2. Fast-forward to the window: fixed-day rules jump whole periods at once,
       month rules step at most MAX_FAST_FORWARD_PERIODS times and the
       collect loop walks on from wherever they stopped
    3. Collect occurrences until past window_end

    Monthly rules step from the previous occurrence, so a 31st anchor settles
    on the 28th/29th once it has passed February.

    Returns:
        Occurrence dates; empty if first_occurrence is absent or not a valid date
    """
    first = parse_iso_date(first_occurrence)
    if first is None:
        return []

    rule = rule_for(frequency)
    cursor = rule.anchor(first)

    if cursor < window_start:
        if rule.monthly:
            periods = 0
            while cursor < window_start and periods < MAX_FAST_FORWARD_PERIODS:
                cursor = rule.advance(cursor)
                periods += 1
            if cursor < window_start:
                logger.warning(
                    "Recurrence fast-forward cap reached",
                    extra={"first_occurrence": first.isoformat(), "frequency": str(frequency)},
                )
        else:
            # Jump straight to the first period on or after window_start
            behind = (window_start - cursor).days
            cursor = add_days(cursor, -(-behind // rule.period_days) * rule.period_days)

    occurrences = []
    while cursor <= window_end:
        if cursor >= window_start:
            occurrences.append(cursor)
        cursor = rule.advance(cursor)

    return occurrences
