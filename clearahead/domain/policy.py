"""Missing-data policy shared by projection, confidence and readiness checks

Keeping these rules in one place means the validation messages and the
projection can't disagree about which records count.
"""

from decimal import Decimal
from typing import List, Optional

from clearahead.domain.models import ObligationKind, RecurringObligation, VehicleCosts
from clearahead.domain.money import parse_money
from clearahead.utils.date_utils import is_valid_iso_date

GAP_AMOUNT = "amount"
GAP_DATE = "date"
GAP_FREQUENCY = "frequency"


def skips_zero_amount(kind: ObligationKind) -> bool:
    """Vehicle sub-costs left at zero are treated as not in use"""
    return kind is ObligationKind.VEHICLE_SUB_BILL


def scheduled_amount(obligation: RecurringObligation) -> Optional[Decimal]:
    """Amount to project for an obligation, None when it contributes no events"""
    amount = parse_money(obligation.amount)
    if amount is None:
        return None
    if amount == 0 and skips_zero_amount(obligation.kind):
        return None
    return amount


def is_in_use(obligation: RecurringObligation) -> bool:
    """Whether an enabled obligation counts toward completeness at all"""
    if skips_zero_amount(obligation.kind):
        return scheduled_amount(obligation) is not None
    return True


def obligation_gaps(obligation: RecurringObligation) -> List[str]:
    """Fields an in-use obligation is missing (amount/date/frequency)"""
    if not is_in_use(obligation):
        return []

    gaps = []
    if not skips_zero_amount(obligation.kind) and parse_money(obligation.amount) is None:
        gaps.append(GAP_AMOUNT)
    if not is_valid_iso_date(obligation.anchor_date):
        gaps.append(GAP_DATE)
    if not obligation.frequency:
        gaps.append(GAP_FREQUENCY)
    return gaps


def active_vehicle_costs(vehicle: VehicleCosts) -> List[RecurringObligation]:
    """Sub-costs that are projected: parent enabled and amount non-zero"""
    if not vehicle.enabled:
        return []
    return [c for c in vehicle.sub_costs() if is_in_use(c)]


def vehicle_total(vehicle: VehicleCosts) -> Decimal:
    """Denormalized parent-bill total; absent sub-cost amounts count as zero"""
    return sum((parse_money(c.amount) or Decimal(0) for c in vehicle.sub_costs()), Decimal(0))
