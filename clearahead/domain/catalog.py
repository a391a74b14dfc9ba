"""Built-in income and bill catalog offered before the user adds custom entries"""

from datetime import date
from typing import List, Optional

from clearahead.domain.models import ObligationKind, RecurringObligation, VehicleCosts
from clearahead.utils.date_utils import to_iso

# (id, label, kind, default frequency)
INCOME_CATALOG = [
    ("wages_salary", "Wage / Salary", ObligationKind.WAGE, "monthly"),
    ("universal_credit", "Universal Credit", ObligationKind.BENEFIT, "monthly"),
    ("child_benefit", "Child Benefit", ObligationKind.BENEFIT, "weekly"),
    ("esa", "Employment and Support Allowance (ESA)", ObligationKind.BENEFIT, "monthly"),
    ("jsa", "Jobseeker’s Allowance (JSA)", ObligationKind.BENEFIT, "monthly"),
    ("housing_benefit", "Housing Benefit", ObligationKind.BENEFIT, "monthly"),
    ("pension_credit", "Pension Credit", ObligationKind.BENEFIT, "monthly"),
    ("income_support", "Income Support", ObligationKind.BENEFIT, "monthly"),
    ("maternity_allowance", "Maternity Allowance", ObligationKind.BENEFIT, "monthly"),
    ("state_pension", "State Pension", ObligationKind.BENEFIT, "monthly"),
    ("dla", "Disability Living Allowance (DLA)", ObligationKind.BENEFIT, "monthly"),
    ("pip", "Personal Independence Payment (PIP)", ObligationKind.BENEFIT, "four_weekly"),
    ("carers_allowance", "Carers Allowance", ObligationKind.BENEFIT, "weekly"),
    ("attendance_allowance", "Attendance Allowance", ObligationKind.BENEFIT, "weekly"),
    ("other_income_1", "Other income", ObligationKind.OTHER_INCOME, "monthly"),
]

BILL_CATALOG = [
    ("rent_housing", "Rent / Housing"),
    ("council_tax", "Council Tax"),
    ("gas", "Gas"),
    ("electric", "Electric"),
    ("water", "Water"),
    ("phone", "Phone"),
    ("internet", "Internet"),
    ("tv_licence", "TV Licence"),
    ("home_insurance", "Home Insurance"),
    ("child_maintenance", "Child maintenance"),
    ("credit_cards", "Credit cards (minimum payments)"),
    ("other_essential_bills", "Other essential bills"),
]

# Denormalized "Vehicle costs" bill row: its switch enables the sub-costs, it is never projected itself
VEHICLE_COSTS_BILL_ID = "vehicle_costs"

# Vehicle sub-cost slot -> label used on timeline events
VEHICLE_SUB_COST_LABELS = {
    "finance": "Vehicle payment / finance",
    "insurance": "Car insurance",
    "tax": "Car tax",
    "breakdown": "Breakdown cover",
}


def default_incomes(on: date) -> List[RecurringObligation]:
    """Disabled catalog incomes with next payment date set to `on`"""
    return [
        RecurringObligation(id=id_, label=label, kind=kind, frequency=freq, anchor_date=to_iso(on))
        for id_, label, kind, freq in INCOME_CATALOG
    ]


def default_bills(on: date) -> List[RecurringObligation]:
    """Disabled catalog bills, all monthly, due on `on`"""
    return [
        RecurringObligation(id=id_, label=label, kind=ObligationKind.FIXED_BILL, anchor_date=to_iso(on))
        for id_, label in BILL_CATALOG
    ]


def vehicle_sub_cost(
    slot: str,
    amount=None,
    frequency: Optional[str] = "monthly",
    due_date: Optional[str] = None,
) -> RecurringObligation:
    """Vehicle sub-cost record for one of the four fixed slots"""
    return RecurringObligation(
        id=f"vehicle_{slot}",
        label=VEHICLE_SUB_COST_LABELS[slot],
        kind=ObligationKind.VEHICLE_SUB_BILL,
        enabled=True,
        amount=amount,
        frequency=frequency,
        anchor_date=due_date,
    )


def default_vehicle_costs(on: date) -> VehicleCosts:
    return VehicleCosts(
        enabled=False,
        **{slot: vehicle_sub_cost(slot, due_date=to_iso(on)) for slot in VEHICLE_SUB_COST_LABELS},
    )
