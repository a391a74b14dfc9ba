"""Confidence estimation - how much to trust a projection given the inputs"""

from datetime import date
from typing import List, Optional, Tuple

from clearahead.domain.goals import plan_goal
from clearahead.domain.models import Confidence, ConfidenceLevel, ProjectionInputs
from clearahead.domain.policy import active_vehicle_costs, obligation_gaps
from clearahead.utils.date_utils import parse_iso_date, today as wall_clock_today

# Spending logs older than this many days pull the rating down a level
STALE_SPENDING_DAYS = 7

DOWNGRADE = {
    ConfidenceLevel.HIGH: ConfidenceLevel.MEDIUM,
    ConfidenceLevel.MEDIUM: ConfidenceLevel.LOW,
    ConfidenceLevel.LOW: ConfidenceLevel.LOW,
}


def count_completeness(inputs: ProjectionInputs) -> Tuple[int, int]:
    """
    Count enabled items and the details they are missing.

    Returns: (enabled_count, missing)
    """
    enabled_count = 0
    missing = 0

    for obligation in list(inputs.incomes) + list(inputs.bills):
        if not obligation.enabled:
            continue
        enabled_count += 1
        missing += len(obligation_gaps(obligation))

    for sub_cost in active_vehicle_costs(inputs.vehicle):
        enabled_count += 1
        missing += len(obligation_gaps(sub_cost))

    if inputs.goals_enabled:
        start = inputs.resolved_start_date()
        for goal in inputs.goals:
            if not goal.include_in_calc:
                continue
            enabled_count += 1
            if not plan_goal(start, goal).ok:
                missing += 1

    return enabled_count, missing


def last_spending_date(inputs: ProjectionInputs) -> Optional[date]:
    dates = [d for d in (parse_iso_date(s.date) for s in inputs.spending) if d is not None]
    return max(dates) if dates else None


def estimate_confidence(inputs: ProjectionInputs, today: Optional[date] = None) -> Confidence:
    """
    Rate the projection High/Medium/Low from data completeness and spending recency.

    Rules:
    - Nothing enabled: Low
    - 3+ missing details: Low; 1-2: Medium; none: High
    - No spending logged: High drops to Medium
    - Latest spend STALE_SPENDING_DAYS+ old: drop one level
    - Goal notes are informational and never change the level

    Independent of the projected amounts.
    """
    today = today or inputs.today or wall_clock_today()
    enabled_count, missing = count_completeness(inputs)

    level = ConfidenceLevel.HIGH
    reasons: List[str] = []

    if enabled_count == 0:
        level = ConfidenceLevel.LOW
        reasons.append("No income/bills are enabled yet.")
    elif missing >= 3:
        level = ConfidenceLevel.LOW
        reasons.append("Some enabled items are missing an amount or date.")
    elif missing > 0:
        level = ConfidenceLevel.MEDIUM
        reasons.append("Some enabled items are missing details.")

    last_spend = last_spending_date(inputs)
    if last_spend is None:
        if level is ConfidenceLevel.HIGH:
            level = ConfidenceLevel.MEDIUM
        reasons.append("No spending has been logged yet, so day-to-day purchases aren’t reflected.")
    else:
        days_since = abs((today - last_spend).days)
        if days_since >= STALE_SPENDING_DAYS:
            level = DOWNGRADE[level]
            reasons.append(f"Last spending log was {days_since} days ago, so accuracy may be drifting.")
        else:
            reasons.append("Spending was logged recently, so day-to-day accuracy is stronger.")

    if inputs.goals_enabled and inputs.goals:
        included = [g for g in inputs.goals if g.include_in_calc]
        if len(included) < len(inputs.goals):
            reasons.append(
                "Some savings goals are set but not included in calculations "
                "(so ‘may be available’ is more optimistic)."
            )
        if not included:
            reasons.append("Savings goals are on, but none are included in calculations.")

    return Confidence(level=level, reasons=tuple(reasons))
