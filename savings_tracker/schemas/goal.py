"""Data contracts for the goal and estimate endpoints."""

from __future__ import annotations

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from savings_tracker.models import Goal, NoEstimate, ProjectionResult

EstimatePayload = Annotated[Union[ProjectionResult, NoEstimate], Field(discriminator="kind")]


class HealthResponse(BaseModel):
    status: str


class EstimateRequest(BaseModel):
    """Inputs of the goal form's live "estimated time" preview."""

    model_config = ConfigDict(extra="forbid")

    goal_amount: float = Field(..., description="Target amount of the goal.")
    periodic_amount: float = Field(..., description="Amount the user plans to deposit each time.")
    selected_days: List[StrictInt] = Field(
        default_factory=list,
        description="Weekdays (0 = Sunday) deposits are made on; empty means every day.",
    )


class DepositRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: float = Field(..., gt=0, description="Deposited amount.")


class GoalSummary(BaseModel):
    """Everything a goal card or progress view renders for one goal."""

    goal: Goal
    is_current: bool
    current_savings: float = Field(..., ge=0)
    remaining_amount: float = Field(..., ge=0)
    progress_percent: float = Field(..., ge=0, le=100)
    goal_reached: bool
    deposit_count: int = Field(..., ge=0)
    days_remaining: Optional[int] = Field(default=None, ge=0)
    estimate: EstimatePayload
    estimated_time_text: str
    target_period_text: Optional[str] = None
    selected_day_names: List[str]


class GoalListResponse(BaseModel):
    current_goal_id: Optional[str] = None
    goals: List[GoalSummary]


class CurrentGoalResponse(BaseModel):
    goal: Optional[GoalSummary] = None
