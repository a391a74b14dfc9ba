"""Timeline insights - totals and biggest movers across a projection"""

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Tuple

from clearahead.domain.models import EventKind, ProjectionResult

TOP_LABELS = 5


@dataclass(frozen=True)
class TimelineInsights:
    """Aggregates derived from a projection timeline"""

    income_total: Decimal
    outgoing_total: Decimal
    net: Decimal
    lowest: Decimal
    highest: Decimal
    top_outgoing: Tuple[Tuple[str, Decimal], ...]
    top_incoming: Tuple[Tuple[str, Decimal], ...]


def _top(totals: Dict[str, Decimal]) -> Tuple[Tuple[str, Decimal], ...]:
    # Stable on ties: labels keep first-seen order
    ranked: List[Tuple[str, Decimal]] = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return tuple(ranked[:TOP_LABELS])


def summarize_timeline(result: ProjectionResult) -> TimelineInsights:
    """
    Summarize money in/out over the window.

    highest includes the opening balance; outgoings are grouped by label as
    absolute amounts, incomings only count income events.
    """
    income_total = Decimal(0)
    outgoing_total = Decimal(0)
    highest = result.opening
    outgoing_by_label: Dict[str, Decimal] = defaultdict(Decimal)
    incoming_by_label: Dict[str, Decimal] = defaultdict(Decimal)

    for entry in result.events:
        if entry.amount == 0:
            continue
        highest = max(highest, entry.running)

        if entry.amount > 0:
            income_total += entry.amount
        else:
            outgoing_total += -entry.amount

        if entry.kind is EventKind.INCOME and entry.amount > 0:
            incoming_by_label[entry.label] += entry.amount
        elif entry.kind is not EventKind.INCOME and entry.amount < 0:
            outgoing_by_label[entry.label] += -entry.amount

    return TimelineInsights(
        income_total=income_total,
        outgoing_total=outgoing_total,
        net=income_total - outgoing_total,
        lowest=result.lowest,
        highest=highest,
        top_outgoing=_top(outgoing_by_label),
        top_incoming=_top(incoming_by_label),
    )
