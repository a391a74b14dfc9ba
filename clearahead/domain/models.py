"""Domain models - immutable snapshots of caller-owned financial records"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple

from clearahead.utils.date_utils import parse_iso_date, today as wall_clock_today


class ObligationKind(str, Enum):
    """Closed set of recurring obligation variants"""

    WAGE = "wage"
    BENEFIT = "benefit"
    OTHER_INCOME = "other_income"
    FIXED_BILL = "fixed_bill"
    VEHICLE_SUB_BILL = "vehicle_sub_bill"

    @property
    def is_income(self) -> bool:
        return self in INCOME_KINDS


INCOME_KINDS = frozenset({ObligationKind.WAGE, ObligationKind.BENEFIT, ObligationKind.OTHER_INCOME})


class EventKind(str, Enum):
    """Timeline event classification"""

    START = "start"
    INCOME = "income"
    BILL = "bill"
    SPEND = "spend"
    GOAL = "goal"
    WHAT_IF = "whatif"


class ConfidenceLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class RecurringObligation:
    """Income source or bill as entered by the user.

    amount, frequency and anchor_date are kept raw; the engine re-parses them
    on every projection and tolerates malformed values.
    """

    id: str
    label: str
    kind: ObligationKind
    enabled: bool = False
    amount: Any = None
    frequency: Optional[str] = "monthly"
    anchor_date: Optional[str] = None  # next payment date (income) or due date (bill)


@dataclass(frozen=True)
class VehicleCosts:
    """Vehicle costs parent bill with its four independently scheduled sub-costs"""

    enabled: bool = False
    finance: Optional[RecurringObligation] = None
    insurance: Optional[RecurringObligation] = None
    tax: Optional[RecurringObligation] = None
    breakdown: Optional[RecurringObligation] = None

    def sub_costs(self) -> List[RecurringObligation]:
        """Sub-costs in display order, skipping slots the caller never filled"""
        return [c for c in (self.finance, self.insurance, self.tax, self.breakdown) if c is not None]


@dataclass(frozen=True)
class SpendingEntry:
    """One-off outgoing logged by the user"""

    id: str
    date: Optional[str]
    amount: Any
    note: str = ""


@dataclass(frozen=True)
class Goal:
    """Savings goal; include_in_calc controls whether set-asides are projected"""

    id: str
    name: str = ""
    target_amount: Any = None
    target_date: Optional[str] = None
    include_in_calc: bool = True


@dataclass(frozen=True)
class GoalPlan:
    """Linear set-aside plan for a goal, or the reason one can't be made"""

    ok: bool
    message: str = ""
    target_amount: Optional[Decimal] = None
    days: Optional[int] = None
    per_week: Optional[Decimal] = None
    per_month: Optional[Decimal] = None
    start_date: Optional[date] = None
    target_date: Optional[date] = None


@dataclass(frozen=True)
class TimelineEvent:
    """Single dated, signed cash movement (computed, never stored)"""

    date: date
    kind: EventKind
    label: str
    amount: Decimal


@dataclass(frozen=True)
class TimelineEntry:
    """Timeline event with the running balance after it is applied"""

    date: date
    kind: EventKind
    label: str
    amount: Decimal
    running: Decimal

    @property
    def display_label(self) -> str:
        if self.kind is EventKind.START:
            return self.label
        return f"{EVENT_PREFIXES[self.kind]} • {self.label}"


EVENT_PREFIXES = {
    EventKind.INCOME: "Income",
    EventKind.BILL: "Bill",
    EventKind.SPEND: "Spending",
    EventKind.GOAL: "Goal",
    EventKind.WHAT_IF: "What-if",
}


@dataclass(frozen=True)
class ProjectionInputs:
    """Full caller snapshot consumed by a single projection call"""

    start_date: Optional[str] = None
    balance: Any = None
    incomes: Tuple[RecurringObligation, ...] = ()
    bills: Tuple[RecurringObligation, ...] = ()
    vehicle: VehicleCosts = field(default_factory=VehicleCosts)
    spending: Tuple[SpendingEntry, ...] = ()
    goals: Tuple[Goal, ...] = ()
    goals_enabled: bool = False
    today: Optional[date] = None  # overrides the wall clock for reproducible runs

    def resolved_start_date(self) -> date:
        """Snapshot start date, falling back to today when absent or invalid"""
        start = parse_iso_date(self.start_date)
        if start is not None:
            return start
        return self.today or wall_clock_today()


@dataclass(frozen=True)
class Confidence:
    """Qualitative confidence rating with the reasons behind it"""

    level: ConfidenceLevel
    reasons: Tuple[str, ...]


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a lookahead projection"""

    opening: Decimal
    start_date: date
    window_end: date
    timeline: Tuple[TimelineEntry, ...]
    lowest: Decimal
    lowest_date: date
    confidence: ConfidenceLevel
    reasons: Tuple[str, ...]

    @property
    def events(self) -> Tuple[TimelineEntry, ...]:
        """Timeline without the synthetic opening entry"""
        return self.timeline[1:]
