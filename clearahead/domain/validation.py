"""Readiness checks - the messages shown before a projection is attempted"""

from typing import List

from clearahead.domain.models import ProjectionInputs, RecurringObligation
from clearahead.domain.policy import GAP_AMOUNT, GAP_DATE, GAP_FREQUENCY, active_vehicle_costs, obligation_gaps

AMOUNT_EXAMPLES = "2900, 2,900, 2.900, 2 900,50"


def _income_messages(income: RecurringObligation) -> List[str]:
    messages = []
    gaps = obligation_gaps(income)
    if GAP_AMOUNT in gaps:
        messages.append(f"Income • {income.label}: enter an amount (you can type {AMOUNT_EXAMPLES}).")
    if GAP_DATE in gaps:
        messages.append(f"Income • {income.label}: choose a valid next payment date.")
    if GAP_FREQUENCY in gaps:
        messages.append(f"Income • {income.label}: choose a frequency.")
    return messages


def _bill_messages(bill: RecurringObligation, prefix: str = "Bill") -> List[str]:
    messages = []
    gaps = obligation_gaps(bill)
    if GAP_AMOUNT in gaps:
        messages.append(f"{prefix} • {bill.label}: enter an amount (examples: {AMOUNT_EXAMPLES}).")
    if GAP_DATE in gaps:
        messages.append(f"{prefix} • {bill.label}: choose a valid due date.")
    if GAP_FREQUENCY in gaps:
        messages.append(f"{prefix} • {bill.label}: choose a frequency.")
    return messages


def collect_input_problems(inputs: ProjectionInputs) -> List[str]:
    """
    User-facing reasons the snapshot isn't ready to project.

    Requirements:
    - At least one income is ticked
    - Every enabled income/bill has an amount, a valid date and a frequency
    - Vehicle sub-costs are only checked once they carry a non-zero amount
    """
    problems = []

    active_incomes = [inc for inc in inputs.incomes if inc.enabled]
    if not active_incomes:
        problems.append("Tick at least one income.")
    for income in active_incomes:
        problems.extend(_income_messages(income))

    for bill in inputs.bills:
        if bill.enabled:
            problems.extend(_bill_messages(bill))

    for sub_cost in active_vehicle_costs(inputs.vehicle):
        problems.extend(_bill_messages(sub_cost, prefix="Vehicle"))

    return problems


def can_project(inputs: ProjectionInputs) -> bool:
    return not collect_input_problems(inputs)
