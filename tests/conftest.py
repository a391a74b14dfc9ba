"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable

from clearahead.domain.catalog import vehicle_sub_cost
from clearahead.domain.models import (
    ObligationKind,
    ProjectionInputs,
    RecurringObligation,
    SpendingEntry,
    VehicleCosts,
)

START = date(2024, 1, 1)


@pytest.fixture
def make_income() -> Callable[..., RecurringObligation]:
    """Factory for enabled income records"""

    def _make(label="Wage / Salary", amount="1500", frequency="monthly", next_date="2024-01-10",
              kind=ObligationKind.WAGE, enabled=True):
        return RecurringObligation(
            id=f"income_{label}",
            label=label,
            kind=kind,
            enabled=enabled,
            amount=amount,
            frequency=frequency,
            anchor_date=next_date,
        )

    return _make


@pytest.fixture
def make_bill() -> Callable[..., RecurringObligation]:
    """Factory for enabled fixed bills"""

    def _make(label="Rent / Housing", amount="500", frequency="monthly", due_date="2024-01-15", enabled=True):
        return RecurringObligation(
            id=f"bill_{label}",
            label=label,
            kind=ObligationKind.FIXED_BILL,
            enabled=enabled,
            amount=amount,
            frequency=frequency,
            anchor_date=due_date,
        )

    return _make


@pytest.fixture
def household_inputs(make_income, make_bill) -> ProjectionInputs:
    """Salary, rent, a car on finance and a recent grocery shop"""
    return ProjectionInputs(
        start_date="2024-01-01",
        balance="1,000",
        incomes=(make_income(),),
        bills=(make_bill(), make_bill(label="Council Tax", amount="150", due_date="2024-01-01")),
        vehicle=VehicleCosts(
            enabled=True,
            finance=vehicle_sub_cost("finance", amount="200", due_date="2024-01-20"),
            insurance=vehicle_sub_cost("insurance", amount="", due_date="2024-01-05"),
            tax=vehicle_sub_cost("tax", amount="0", due_date="2024-01-05"),
            breakdown=vehicle_sub_cost("breakdown", amount="8.50", frequency="monthly", due_date="2024-01-28"),
        ),
        spending=(SpendingEntry(id="s1", date="2024-01-01", amount="45.20", note="Groceries"),),
        today=START,
    )


@pytest.fixture
def stored_snapshot() -> dict:
    """Snapshot in the application's saved shape, plus a `today` override"""
    return {
        "startDate": "2024-01-01",
        "startDateAuto": True,
        "balance": "£1,000.00",
        "incomes": [
            {"id": "wages_salary", "type": "wage", "label": "Wage / Salary", "enabled": True,
             "amount": "1,500", "frequency": "monthly", "nextDate": "2024-01-10"},
            {"id": "child_benefit", "type": "benefit", "label": "Child Benefit", "enabled": False,
             "amount": "", "frequency": "weekly", "nextDate": "2024-01-01"},
        ],
        "bills": [
            {"id": "rent_housing", "label": "Rent / Housing", "enabled": True,
             "amount": "500", "frequency": "monthly", "dueDate": "2024-01-15"},
            {"id": "vehicle_costs", "label": "Vehicle costs", "enabled": True,
             "amount": "200", "frequency": "monthly", "dueDate": "2024-01-01"},
        ],
        "vehicle": {
            "finance": "200", "financeFreq": "monthly", "financeDue": "2024-01-20",
            "insurance": "", "insuranceFreq": "monthly", "insuranceDue": "2024-01-01",
            "tax": "", "taxFreq": "monthly", "taxDue": "2024-01-01",
            "breakdown": "", "breakdownFreq": "monthly", "breakdownDue": "2024-01-01",
        },
        "spendDate": "2024-01-01",
        "spendAmount": "",
        "spendNote": "",
        "spendItems": [
            {"id": "s1", "date": "2024-01-01", "amount": "30", "note": "Groceries"},
        ],
        "goalsEnabled": False,
        "goals": [],
        "today": "2024-01-01",
    }
