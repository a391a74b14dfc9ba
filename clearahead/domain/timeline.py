"""Lookahead projection engine - core cash-flow timeline logic"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from clearahead.domain.confidence import estimate_confidence
from clearahead.domain.goals import plan_goal
from clearahead.domain.models import (
    EVENT_PREFIXES,
    EventKind,
    ProjectionInputs,
    ProjectionResult,
    RecurringObligation,
    TimelineEntry,
    TimelineEvent,
)
from clearahead.domain.money import parse_money
from clearahead.domain.policy import active_vehicle_costs, scheduled_amount
from clearahead.domain.recurrence import expand_occurrences
from clearahead.utils.date_utils import add_days, parse_iso_date

# Outgoings sort before income on the same day: money leaves before it arrives
KIND_PRIORITY = {
    EventKind.BILL: 0,
    EventKind.SPEND: 0,
    EventKind.GOAL: 0,
    EventKind.WHAT_IF: 0,
    EventKind.INCOME: 1,
}

START_LABEL = "Start"
GOAL_DEFAULT_LABEL = "Goal set-aside"


def _in_window(d: date, start: date, window_end: date) -> bool:
    return start <= d <= window_end


def spending_events(inputs: ProjectionInputs, start: date, window_end: date) -> List[TimelineEvent]:
    """One negative event per logged spend inside the window"""
    events = []
    for entry in inputs.spending:
        d = parse_iso_date(entry.date)
        if d is None or not _in_window(d, start, window_end):
            continue
        amount = parse_money(entry.amount)
        if amount is None or amount == 0:
            continue
        events.append(TimelineEvent(date=d, kind=EventKind.SPEND, label=entry.note or "Spending", amount=-amount))
    return events


def extra_window_events(
    extra_events: Iterable[TimelineEvent], start: date, window_end: date
) -> List[TimelineEvent]:
    """Caller-supplied events (what-if purchases) kept verbatim when in range"""
    return [
        ev for ev in extra_events
        if ev is not None and isinstance(ev.date, date) and _in_window(ev.date, start, window_end)
    ]


def goal_events(inputs: ProjectionInputs, start: date, window_end: date) -> List[TimelineEvent]:
    """
    Weekly set-aside events for goals included in the calculation.

    Fixed 7-day cadence from the projection start through
    min(window_end, target_date), regardless of the goal's per-month view.
    """
    if not inputs.goals_enabled:
        return []

    events = []
    for goal in inputs.goals:
        if not goal.include_in_calc:
            continue
        plan = plan_goal(start, goal)
        if not plan.ok or plan.per_week is None or plan.per_week <= 0:
            continue

        name = (goal.name or "").strip()
        label = name or GOAL_DEFAULT_LABEL
        last_day = min(window_end, plan.target_date)

        d = start
        while d <= last_day:
            events.append(TimelineEvent(date=d, kind=EventKind.GOAL, label=label, amount=-plan.per_week))
            d = add_days(d, 7)
    return events


def obligation_events(
    obligation: RecurringObligation,
    kind: EventKind,
    start: date,
    window_end: date,
) -> List[TimelineEvent]:
    """Expand one recurring obligation into signed events"""
    amount = scheduled_amount(obligation)
    if amount is None or parse_iso_date(obligation.anchor_date) is None:
        return []

    signed = amount if kind is EventKind.INCOME else -amount
    occurrences = expand_occurrences(start, obligation.anchor_date, obligation.frequency, window_end)
    return [TimelineEvent(date=d, kind=kind, label=obligation.label, amount=signed) for d in occurrences]


def collect_events(
    inputs: ProjectionInputs,
    start: date,
    window_end: date,
    extra_events: Iterable[TimelineEvent] = (),
) -> List[TimelineEvent]:
    """Gather events from every source, unsorted"""
    events = []
    events.extend(spending_events(inputs, start, window_end))
    events.extend(extra_window_events(extra_events, start, window_end))
    events.extend(goal_events(inputs, start, window_end))

    for income in inputs.incomes:
        if income.enabled:
            events.extend(obligation_events(income, EventKind.INCOME, start, window_end))

    for bill in inputs.bills:
        if bill.enabled:
            events.extend(obligation_events(bill, EventKind.BILL, start, window_end))

    for sub_cost in active_vehicle_costs(inputs.vehicle):
        events.extend(obligation_events(sub_cost, EventKind.BILL, start, window_end))

    return events


def _tie_break_label(ev: TimelineEvent) -> str:
    # Named set-asides compare as "Goal • <name>"; every other kind by its bare label
    if ev.kind is EventKind.GOAL and ev.label != GOAL_DEFAULT_LABEL:
        return f"{EVENT_PREFIXES[EventKind.GOAL]} • {ev.label}"
    return ev.label


def sort_events(events: Iterable[TimelineEvent]) -> List[TimelineEvent]:
    """Order by date, then outgoings before income, then label"""
    return sorted(events, key=lambda ev: (ev.date, KIND_PRIORITY.get(ev.kind, 0), _tie_break_label(ev)))


def project(
    inputs: ProjectionInputs,
    window_weeks: int,
    extra_events: Optional[Iterable[TimelineEvent]] = None,
) -> ProjectionResult:
    """
    Project the running balance across the lookahead window.

    Flow:
    1. Resolve start date, window end (start + window_weeks * 7 days) and opening balance
    2. Collect spending, what-if, goal, income, bill and vehicle events
    3. Sort conservatively (outgoings first on shared days)
    4. Accumulate running balance from a synthetic "Start" entry, tracking the
       lowest point (first occurrence wins on ties)
    5. Attach the confidence rating for the same snapshot

    The window is projected as given; bounding it is the caller's policy.
    The lowest balance may be negative (overdraft is representable).
    """
    start = inputs.resolved_start_date()
    window_end = add_days(start, window_weeks * 7)
    opening = parse_money(inputs.balance)
    if opening is None:
        opening = Decimal(0)

    events = sort_events(collect_events(inputs, start, window_end, extra_events or ()))

    running = opening
    lowest = opening
    lowest_date = start
    timeline = [TimelineEntry(date=start, kind=EventKind.START, label=START_LABEL, amount=Decimal(0), running=running)]

    for ev in events:
        running += ev.amount
        timeline.append(TimelineEntry(date=ev.date, kind=ev.kind, label=ev.label, amount=ev.amount, running=running))
        if running < lowest:
            lowest = running
            lowest_date = ev.date

    confidence = estimate_confidence(inputs)

    return ProjectionResult(
        opening=opening,
        start_date=start,
        window_end=window_end,
        timeline=tuple(timeline),
        lowest=lowest,
        lowest_date=lowest_date,
        confidence=confidence.level,
        reasons=confidence.reasons,
    )
