"""Pydantic schemas for the caller-owned snapshot and the combined lookahead response"""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, model_validator

from clearahead.domain.catalog import VEHICLE_COSTS_BILL_ID, VEHICLE_SUB_COST_LABELS, vehicle_sub_cost
from clearahead.domain.insights import TimelineInsights
from clearahead.domain.models import (
    Goal,
    ObligationKind,
    ProjectionInputs,
    ProjectionResult,
    RecurringObligation,
    SpendingEntry,
    VehicleCosts,
)

RawAmount = Optional[Union[str, int, float, Decimal]]

# Income `type` tag as saved by the application -> kind
STORED_INCOME_TYPES = {
    "wage": "wage",
    "wage_job": "wage",
    "benefit": "benefit",
    "other": "other_income",
}


class IncomeSchema(BaseModel):
    """Income source: wage, benefit or other income"""

    id: str = Field(..., min_length=1)
    label: str = ""
    kind: Literal["wage", "benefit", "other_income"] = "other_income"
    enabled: bool = False
    amount: RawAmount = None
    frequency: Optional[str] = "monthly"
    next_date: Optional[str] = Field(None, validation_alias=AliasChoices("next_date", "nextDate"))

    @model_validator(mode="before")
    @classmethod
    def kind_from_stored_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "kind" not in data and "type" in data:
            data = {**data, "kind": STORED_INCOME_TYPES.get(data["type"], "other_income")}
        return data

    def to_domain(self) -> RecurringObligation:
        return RecurringObligation(
            id=self.id,
            label=self.label,
            kind=ObligationKind(self.kind),
            enabled=self.enabled,
            amount=self.amount,
            frequency=self.frequency,
            anchor_date=self.next_date,
        )


class BillSchema(BaseModel):
    """Fixed essential bill"""

    id: str = Field(..., min_length=1)
    label: str = ""
    kind: Literal["fixed_bill"] = "fixed_bill"
    enabled: bool = False
    amount: RawAmount = None
    frequency: Optional[str] = "monthly"
    due_date: Optional[str] = Field(None, validation_alias=AliasChoices("due_date", "dueDate"))

    def to_domain(self) -> RecurringObligation:
        return RecurringObligation(
            id=self.id,
            label=self.label,
            kind=ObligationKind.FIXED_BILL,
            enabled=self.enabled,
            amount=self.amount,
            frequency=self.frequency,
            anchor_date=self.due_date,
        )


class VehicleSubCostSchema(BaseModel):
    amount: RawAmount = None
    frequency: Optional[str] = "monthly"
    due_date: Optional[str] = Field(None, validation_alias=AliasChoices("due_date", "dueDate"))


class VehicleSchema(BaseModel):
    """Vehicle costs parent bill; enabled switches all four sub-costs on"""

    enabled: bool = False
    finance: VehicleSubCostSchema = Field(default_factory=VehicleSubCostSchema)
    insurance: VehicleSubCostSchema = Field(default_factory=VehicleSubCostSchema)
    tax: VehicleSubCostSchema = Field(default_factory=VehicleSubCostSchema)
    breakdown: VehicleSubCostSchema = Field(default_factory=VehicleSubCostSchema)

    @model_validator(mode="before")
    @classmethod
    def nest_flat_sub_costs(cls, data: Any) -> Any:
        """Accept the saved flat shape: finance, financeFreq, financeDue, insurance, ..."""
        if not isinstance(data, dict):
            return data
        nested = dict(data)
        for slot in VEHICLE_SUB_COST_LABELS:
            if isinstance(nested.get(slot), dict):
                continue
            sub = {}
            if slot in nested:
                sub["amount"] = nested.pop(slot)
            if f"{slot}Freq" in nested:
                sub["frequency"] = nested.pop(f"{slot}Freq")
            if f"{slot}Due" in nested:
                sub["due_date"] = nested.pop(f"{slot}Due")
            if sub:
                nested[slot] = sub
        return nested

    def to_domain(self) -> VehicleCosts:
        slots = {"finance": self.finance, "insurance": self.insurance, "tax": self.tax, "breakdown": self.breakdown}
        return VehicleCosts(
            enabled=self.enabled,
            **{
                slot: vehicle_sub_cost(slot, amount=sub.amount, frequency=sub.frequency, due_date=sub.due_date)
                for slot, sub in slots.items()
            },
        )


class SpendingSchema(BaseModel):
    id: str
    date: Optional[str] = None
    amount: RawAmount = None
    note: str = ""

    def to_domain(self) -> SpendingEntry:
        return SpendingEntry(id=self.id, date=self.date, amount=self.amount, note=self.note.strip())


class GoalSchema(BaseModel):
    id: str
    name: str = ""
    target_amount: RawAmount = Field(None, validation_alias=AliasChoices("target_amount", "targetAmount"))
    target_date: Optional[str] = Field(None, validation_alias=AliasChoices("target_date", "targetDate"))
    include_in_calc: bool = Field(True, validation_alias=AliasChoices("include_in_calc", "includeInCalc"))

    def to_domain(self) -> Goal:
        return Goal(
            id=self.id,
            name=self.name,
            target_amount=self.target_amount,
            target_date=self.target_date,
            include_in_calc=self.include_in_calc,
        )


class WhatIfSchema(BaseModel):
    """Hypothetical purchase to compare against the baseline"""

    name: str = ""
    amount: RawAmount = None
    date: Optional[str] = None


class LookaheadRequest(BaseModel):
    """Full snapshot the application hands over on every recomputation"""

    start_date: Optional[str] = Field(None, validation_alias=AliasChoices("start_date", "startDate"))
    balance: RawAmount = None
    incomes: List[IncomeSchema] = Field(default_factory=list)
    bills: List[BillSchema] = Field(default_factory=list)
    vehicle: VehicleSchema = Field(default_factory=VehicleSchema)
    spending: List[SpendingSchema] = Field(
        default_factory=list, validation_alias=AliasChoices("spending", "spendItems")
    )
    goals: List[GoalSchema] = Field(default_factory=list)
    goals_enabled: bool = Field(False, validation_alias=AliasChoices("goals_enabled", "goalsEnabled"))
    window_weeks: Optional[int] = Field(None, description="Requested lookahead; clamped by the service")
    what_if: Optional[WhatIfSchema] = None
    today: Optional[date] = Field(None, description="Overrides the wall clock (tests, replays)")

    def to_inputs(self) -> ProjectionInputs:
        """
        Convert to engine inputs.

        The application keeps a "Vehicle costs" bill row whose switch turns the
        vehicle sub-costs on and whose amount is only their display total. The
        row drives `vehicle.enabled` and is never projected as a fixed bill.
        """
        vehicle = self.vehicle.to_domain()
        bills = []
        for bill in self.bills:
            if bill.id == VEHICLE_COSTS_BILL_ID:
                vehicle = replace(vehicle, enabled=bill.enabled)
                continue
            bills.append(bill.to_domain())

        return ProjectionInputs(
            start_date=self.start_date,
            balance=self.balance,
            incomes=tuple(i.to_domain() for i in self.incomes),
            bills=tuple(bills),
            vehicle=vehicle,
            spending=tuple(s.to_domain() for s in self.spending),
            goals=tuple(g.to_domain() for g in self.goals),
            goals_enabled=self.goals_enabled,
            today=self.today,
        )


class TimelineEntrySchema(BaseModel):
    date: date
    kind: str
    label: str
    display_label: str
    amount: Decimal
    running: Decimal


class ProjectionSchema(BaseModel):
    opening: Decimal
    start_date: date
    window_end: date
    timeline: List[TimelineEntrySchema]
    lowest: Decimal
    lowest_date: date
    confidence: str
    reasons: List[str]

    @classmethod
    def from_result(cls, result: ProjectionResult) -> "ProjectionSchema":
        return cls(
            opening=result.opening,
            start_date=result.start_date,
            window_end=result.window_end,
            timeline=[
                TimelineEntrySchema(
                    date=e.date,
                    kind=e.kind.value,
                    label=e.label,
                    display_label=e.display_label,
                    amount=e.amount,
                    running=e.running,
                )
                for e in result.timeline
            ],
            lowest=result.lowest,
            lowest_date=result.lowest_date,
            confidence=result.confidence.value,
            reasons=list(result.reasons),
        )


class LabelTotalSchema(BaseModel):
    label: str
    amount: Decimal


class InsightsSchema(BaseModel):
    income_total: Decimal
    outgoing_total: Decimal
    net: Decimal
    lowest: Decimal
    highest: Decimal
    top_outgoing: List[LabelTotalSchema]
    top_incoming: List[LabelTotalSchema]

    @classmethod
    def from_insights(cls, insights: TimelineInsights) -> "InsightsSchema":
        return cls(
            income_total=insights.income_total,
            outgoing_total=insights.outgoing_total,
            net=insights.net,
            lowest=insights.lowest,
            highest=insights.highest,
            top_outgoing=[LabelTotalSchema(label=label, amount=amount) for label, amount in insights.top_outgoing],
            top_incoming=[LabelTotalSchema(label=label, amount=amount) for label, amount in insights.top_incoming],
        )


class LookaheadResponse(BaseModel):
    """Combined result consumed by the application"""

    projection_id: str
    window_weeks: int
    projection: ProjectionSchema
    safe_number: Decimal
    insights: InsightsSchema
    problems: List[str]
    what_if: Optional[ProjectionSchema] = None
    what_if_safe_number: Optional[Decimal] = None
