from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from savings_tracker.core.cadence import normalize_selected_days


def new_id() -> str:
    return uuid4().hex


TimeUnit = Literal["days", "weeks", "months", "years"]


class Deposit(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=new_id)
    amount: float = Field(gt=0)
    timestamp: datetime


class GoalPlan(BaseModel):
    """The user-editable part of a goal (what the goal form collects)."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    target_amount: float = Field(gt=0)
    # empty means "assume every day of the week"
    selected_days: List[int] = Field(default_factory=list)

    # user's original plan, kept for display only
    declared_daily_amount: Optional[float] = Field(default=None, gt=0)
    time_value: Optional[int] = Field(default=None, ge=1)
    time_unit: Optional[TimeUnit] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("selected_days", mode="before")
    @classmethod
    def normalize_days(cls, value: object) -> List[int]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("selected_days must be a list of weekday numbers")
        return sorted(normalize_selected_days(value))


class Goal(GoalPlan):
    id: str = Field(default_factory=new_id)
    start_date: datetime
    deposits: List[Deposit] = Field(default_factory=list)


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["prospective", "adaptive", "already_met"]
    remaining_deposits_needed: int = Field(ge=0)
    deposits_per_week: int = Field(ge=1, le=7)
    total_weeks: int = Field(ge=0)
    total_days: int = Field(ge=0)
    total_months: int = Field(ge=0)
    total_years: int = Field(ge=0)
    end_date: Optional[datetime] = None
    display_text: str


class NoEstimate(BaseModel):
    """Not enough data to project; distinct from an already-met goal."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["no_estimate"] = "no_estimate"
    reason: str
