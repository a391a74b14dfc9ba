"""Unit tests for savings goal planning"""

from datetime import date
from decimal import Decimal
from clearahead.domain.goals import plan_goal
from clearahead.domain.models import Goal


def test_plan_goal_linear_rates():
    """Test per-week and per-month set-asides are a straight split"""
    goal = Goal(id="g1", name="Holiday", target_amount="700", target_date="2024-01-29")

    plan = plan_goal("2024-01-01", goal)

    assert plan.ok is True
    assert plan.days == 28
    assert plan.per_week == Decimal("175")
    assert plan.per_month == Decimal("750")
    assert plan.target_date == date(2024, 1, 29)


def test_plan_goal_accepts_date_start():
    goal = Goal(id="g1", target_amount="£1,400", target_date="2024-01-15")

    plan = plan_goal(date(2024, 1, 1), goal)

    assert plan.ok is True
    assert plan.per_week == Decimal("700")


def test_plan_goal_target_on_start_date_fails():
    """Test a target date equal to the start date is rejected"""
    goal = Goal(id="g1", target_amount="500", target_date="2024-01-01")

    plan = plan_goal("2024-01-01", goal)

    assert plan.ok is False
    assert plan.message == "Target date must be after the start date."


def test_plan_goal_target_before_start_fails():
    plan = plan_goal("2024-01-10", Goal(id="g1", target_amount="500", target_date="2024-01-01"))
    assert plan.ok is False
    assert "after the start date" in plan.message


def test_plan_goal_failure_messages():
    """Test each unusable input returns a reason instead of raising"""
    assert plan_goal("2024-01-01", None).message == "Goal is missing."
    assert plan_goal("2024-02-30", Goal(id="g", target_amount="5", target_date="2024-03-01")).message == (
        "Start date is invalid."
    )
    assert plan_goal("2024-01-01", Goal(id="g", target_amount="0", target_date="2024-03-01")).message == (
        "Enter a target amount."
    )
    assert plan_goal("2024-01-01", Goal(id="g", target_amount="abc", target_date="2024-03-01")).message == (
        "Enter a target amount."
    )
    assert plan_goal("2024-01-01", Goal(id="g", target_amount="50", target_date="soon")).message == (
        "Enter a valid target date."
    )
