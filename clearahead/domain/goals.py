"""Savings goal planning - linear set-aside rate toward a target date"""

from decimal import Decimal
from typing import Any, Optional

from clearahead.domain.models import Goal, GoalPlan
from clearahead.domain.money import parse_money
from clearahead.utils.date_utils import parse_iso_date


def plan_goal(start_date: Any, goal: Optional[Goal]) -> GoalPlan:
    """
    Compute how much must be set aside per week/month to hit a goal.

    Simple linear amortization (no compounding):
        per_week  = target / (days / 7)
        per_month = target / (days / 30)

    Never raises: an unusable goal comes back as GoalPlan(ok=False, message=...)
    """
    if goal is None:
        return GoalPlan(ok=False, message="Goal is missing.")

    start = parse_iso_date(start_date)
    if start is None:
        return GoalPlan(ok=False, message="Start date is invalid.")

    target_amount = parse_money(goal.target_amount)
    if target_amount is None or target_amount <= 0:
        return GoalPlan(ok=False, message="Enter a target amount.")

    target = parse_iso_date(goal.target_date)
    if target is None:
        return GoalPlan(ok=False, message="Enter a valid target date.")

    days = (target - start).days
    if days <= 0:
        return GoalPlan(ok=False, message="Target date must be after the start date.")

    return GoalPlan(
        ok=True,
        target_amount=target_amount,
        days=days,
        per_week=target_amount * 7 / Decimal(days),
        per_month=target_amount * 30 / Decimal(days),
        start_date=start,
        target_date=target,
    )
