"""Unit tests for confidence estimation"""

from datetime import date
from clearahead.domain.catalog import vehicle_sub_cost
from clearahead.domain.confidence import count_completeness, estimate_confidence
from clearahead.domain.models import ConfidenceLevel, Goal, ProjectionInputs, SpendingEntry, VehicleCosts

TODAY = date(2024, 1, 20)
RECENT_SPEND = (SpendingEntry(id="s", date="2024-01-18", amount="12", note="Lunch"),)


def test_nothing_enabled_is_low():
    """Test an empty snapshot is Low with the reason first"""
    confidence = estimate_confidence(ProjectionInputs(), today=TODAY)

    assert confidence.level is ConfidenceLevel.LOW
    assert confidence.reasons[0] == "No income/bills are enabled yet."
    assert "No spending has been logged yet" in confidence.reasons[1]


def test_complete_data_with_recent_spending_is_high(make_income, make_bill):
    inputs = ProjectionInputs(incomes=(make_income(),), bills=(make_bill(),), spending=RECENT_SPEND)

    confidence = estimate_confidence(inputs, today=TODAY)

    assert confidence.level is ConfidenceLevel.HIGH
    assert confidence.reasons == ("Spending was logged recently, so day-to-day accuracy is stronger.",)


def test_missing_details_lower_confidence(make_income, make_bill):
    """Test 1-2 missing details give Medium, 3+ give Low"""
    one_missing = ProjectionInputs(
        incomes=(make_income(),), bills=(make_bill(amount=""),), spending=RECENT_SPEND
    )
    three_missing = ProjectionInputs(
        incomes=(make_income(),), bills=(make_bill(amount="", due_date="2024-02-31", frequency=""),),
        spending=RECENT_SPEND,
    )

    assert count_completeness(one_missing) == (2, 1)
    assert estimate_confidence(one_missing, today=TODAY).level is ConfidenceLevel.MEDIUM
    assert count_completeness(three_missing) == (2, 3)
    low = estimate_confidence(three_missing, today=TODAY)
    assert low.level is ConfidenceLevel.LOW
    assert low.reasons[0] == "Some enabled items are missing an amount or date."


def test_no_spending_downgrades_high_to_medium(make_income):
    confidence = estimate_confidence(ProjectionInputs(incomes=(make_income(),)), today=TODAY)

    assert confidence.level is ConfidenceLevel.MEDIUM
    assert confidence.reasons == ("No spending has been logged yet, so day-to-day purchases aren’t reflected.",)


def test_stale_spending_downgrades_one_level(make_income, make_bill):
    """Test spending logged 7+ days ago drops a level and cites the day count"""
    stale = (SpendingEntry(id="s", date="2024-01-10", amount="12"),)
    high_inputs = ProjectionInputs(incomes=(make_income(),), spending=stale)
    medium_inputs = ProjectionInputs(incomes=(make_income(),), bills=(make_bill(amount=""),), spending=stale)

    high = estimate_confidence(high_inputs, today=TODAY)
    medium = estimate_confidence(medium_inputs, today=TODAY)

    assert high.level is ConfidenceLevel.MEDIUM
    assert "Last spending log was 10 days ago, so accuracy may be drifting." in high.reasons
    assert medium.level is ConfidenceLevel.LOW


def test_stale_threshold_is_seven_days(make_income):
    six_days = ProjectionInputs(incomes=(make_income(),), spending=(SpendingEntry(id="s", date="2024-01-14", amount="1"),))
    seven_days = ProjectionInputs(incomes=(make_income(),), spending=(SpendingEntry(id="s", date="2024-01-13", amount="1"),))

    assert estimate_confidence(six_days, today=TODAY).level is ConfidenceLevel.HIGH
    assert estimate_confidence(seven_days, today=TODAY).level is ConfidenceLevel.MEDIUM


def test_latest_valid_spending_date_is_used(make_income):
    spending = (
        SpendingEntry(id="a", date="2024-01-02", amount="1"),
        SpendingEntry(id="b", date="2024-01-19", amount="1"),
        SpendingEntry(id="c", date="not a date", amount="1"),
    )
    confidence = estimate_confidence(ProjectionInputs(incomes=(make_income(),), spending=spending), today=TODAY)

    assert confidence.level is ConfidenceLevel.HIGH


def test_today_comes_from_snapshot_when_not_passed(make_income):
    inputs = ProjectionInputs(incomes=(make_income(),), spending=RECENT_SPEND, today=date(2024, 3, 1))

    confidence = estimate_confidence(inputs)

    assert confidence.level is ConfidenceLevel.MEDIUM
    assert any("43 days ago" in r for r in confidence.reasons)


def test_vehicle_sub_costs_only_count_when_non_zero():
    """Test zero/blank sub-costs are neither enabled nor missing"""
    zero_only = VehicleCosts(
        enabled=True,
        finance=vehicle_sub_cost("finance", amount="0", due_date="bad"),
        insurance=vehicle_sub_cost("insurance", amount="", due_date=None),
    )
    one_undated = VehicleCosts(
        enabled=True,
        finance=vehicle_sub_cost("finance", amount="200", due_date="bad"),
        tax=vehicle_sub_cost("tax", amount="15", due_date="2024-01-05"),
    )

    assert count_completeness(ProjectionInputs(vehicle=zero_only)) == (0, 0)
    assert estimate_confidence(ProjectionInputs(vehicle=zero_only), today=TODAY).level is ConfidenceLevel.LOW
    assert count_completeness(ProjectionInputs(vehicle=one_undated)) == (2, 1)


def test_included_goals_count_toward_completeness(make_income):
    goals = (
        Goal(id="g1", target_amount="500", target_date="2024-06-01"),
        Goal(id="g2", target_amount="", target_date="2024-06-01"),
        Goal(id="g3", target_amount="500", target_date="2024-06-01", include_in_calc=False),
    )
    inputs = ProjectionInputs(start_date="2024-01-01", incomes=(make_income(),), goals=goals, goals_enabled=True)

    assert count_completeness(inputs) == (3, 1)


def test_goal_honesty_reasons_do_not_change_level(make_income):
    """Test goal notes are informational only"""
    some_excluded = ProjectionInputs(
        start_date="2024-01-01",
        incomes=(make_income(),),
        spending=RECENT_SPEND,
        goals=(
            Goal(id="g1", target_amount="500", target_date="2024-06-01"),
            Goal(id="g2", target_amount="500", target_date="2024-06-01", include_in_calc=False),
        ),
        goals_enabled=True,
    )
    none_included = ProjectionInputs(
        start_date="2024-01-01",
        incomes=(make_income(),),
        spending=RECENT_SPEND,
        goals=(Goal(id="g2", target_amount="500", target_date="2024-06-01", include_in_calc=False),),
        goals_enabled=True,
    )

    excluded = estimate_confidence(some_excluded, today=TODAY)
    nothing = estimate_confidence(none_included, today=TODAY)

    assert excluded.level is ConfidenceLevel.HIGH
    assert any("not included in calculations" in r for r in excluded.reasons)
    assert nothing.level is ConfidenceLevel.HIGH
    assert nothing.reasons[-1] == "Savings goals are on, but none are included in calculations."
