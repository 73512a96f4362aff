"""
Goal projection engine.

Two estimation modes share one rounding policy: deposit counts and week
counts always round up, so an estimate never understates the time needed.

  prospective: before any deposit, from a declared per-deposit amount
  adaptive:    after deposits exist, from the running average deposit size

End dates advance in whole weeks from an explicit "now" argument.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable, Optional, Union

from savings_tracker.core.cadence import deposits_per_week, normalize_selected_days
from savings_tracker.core.duration import format_duration
from savings_tracker.core.savings import current_savings, remaining_amount
from savings_tracker.models import Goal, NoEstimate, ProjectionResult

Estimate = Union[ProjectionResult, NoEstimate]

def _result(
    kind: str,
    remaining_deposits: int,
    per_week: int,
    total_weeks: int,
    total_days: int,
    end_date: Optional[datetime],
) -> ProjectionResult:
    return ProjectionResult(
        kind=kind,
        remaining_deposits_needed=remaining_deposits,
        deposits_per_week=per_week,
        total_weeks=total_weeks,
        total_days=total_days,
        total_months=math.ceil(total_days / 30),
        total_years=math.ceil(total_days / 365),
        end_date=end_date,
        display_text=format_duration(total_days, total_weeks, per_week),
    )


def project_prospective(
    goal_amount: float,
    periodic_amount: float,
    selected_days: Iterable[int],
    now: Optional[datetime] = None,
) -> Estimate:
    """
    Feasibility estimate at goal-creation time.

    With an empty cadence one deposit lands every calendar day, so total_days
    equals the deposit count directly instead of rounding through weeks.
    end_date is only filled in when `now` is supplied.
    """
    days = normalize_selected_days(selected_days)
    if goal_amount <= 0 or periodic_amount <= 0:
        return NoEstimate(reason="goal amount and deposit amount must both be positive")

    deposits_needed = math.ceil(goal_amount / periodic_amount)
    per_week = deposits_per_week(days)

    if not days:
        total_days = deposits_needed
        total_weeks = math.ceil(total_days / 7)
        end_date = now + timedelta(days=total_days) if now is not None else None
    else:
        total_weeks = math.ceil(deposits_needed / per_week)
        total_days = total_weeks * 7
        end_date = now + timedelta(weeks=total_weeks) if now is not None else None

    return _result("prospective", deposits_needed, per_week, total_weeks, total_days, end_date)


def project_adaptive(goal: Goal, now: datetime) -> Estimate:
    """Remaining time from the average size of the deposits made so far."""
    per_week = deposits_per_week(goal.selected_days)
    savings = current_savings(goal)
    remaining = remaining_amount(goal)
    if remaining == 0:
        return _result("already_met", 0, per_week, 0, 0, now)

    if not goal.deposits:
        return NoEstimate(reason="no deposits recorded yet")

    avg_deposit = savings / len(goal.deposits)
    if avg_deposit <= 0:
        return NoEstimate(reason="average deposit is not positive")

    remaining_deposits = math.ceil(remaining / avg_deposit)
    total_weeks = math.ceil(remaining_deposits / per_week)
    total_days = total_weeks * 7
    end_date = now + timedelta(weeks=total_weeks)

    return _result("adaptive", remaining_deposits, per_week, total_weeks, total_days, end_date)


def estimate_goal(goal: Goal, now: datetime) -> Estimate:
    """
    Pick the estimation mode for a stored goal.

    A goal without deposits but with a declared per-deposit amount gets the
    prospective estimate for its full target; every other goal is adaptive.
    """
    if not goal.deposits and goal.declared_daily_amount:
        return project_prospective(
            goal.target_amount, goal.declared_daily_amount, goal.selected_days, now
        )
    return project_adaptive(goal, now)


__all__ = [
    "Estimate",
    "project_prospective",
    "project_adaptive",
    "estimate_goal",
]
