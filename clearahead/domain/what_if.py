"""Hypothetical purchases projected without touching the spending log"""

from typing import Any, Optional

from clearahead.domain.models import EventKind, SpendingEntry, TimelineEvent
from clearahead.domain.money import parse_money
from clearahead.utils.date_utils import parse_iso_date, to_iso

DEFAULT_WHAT_IF_LABEL = "Purchase"


def build_what_if_event(name: Optional[str], amount: Any, on: Any) -> Optional[TimelineEvent]:
    """Single negative what-if event, or None when amount/date can't be used"""
    parsed_amount = parse_money(amount)
    parsed_date = parse_iso_date(on)
    if parsed_amount is None or parsed_date is None:
        return None

    label = (name or "").strip() or DEFAULT_WHAT_IF_LABEL
    return TimelineEvent(date=parsed_date, kind=EventKind.WHAT_IF, label=label, amount=-parsed_amount)


def what_if_to_spending(event: TimelineEvent, entry_id: str) -> SpendingEntry:
    """Turn an accepted what-if purchase into a real spending log entry"""
    return SpendingEntry(
        id=entry_id,
        date=to_iso(event.date),
        amount=str(abs(event.amount)),
        note=event.label,
    )
