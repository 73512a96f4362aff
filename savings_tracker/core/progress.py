"""Money-side aggregates for a goal: saved, remaining, percent, days left."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Optional

from savings_tracker.core.projection import project_adaptive
from savings_tracker.core.savings import current_savings, remaining_amount
from savings_tracker.models import Goal, ProjectionResult


def progress_percent(goal: Goal) -> float:
    """Percent of the target saved, clamped to 100."""
    if goal.target_amount <= 0:
        return 0.0
    return min(100.0, current_savings(goal) / goal.target_amount * 100)


def days_remaining(goal: Goal, now: datetime) -> Optional[int]:
    """Whole days until the adaptive end date; None when there is no estimate."""
    estimate = project_adaptive(goal, now)
    if not isinstance(estimate, ProjectionResult) or estimate.end_date is None:
        return None
    days = math.ceil((estimate.end_date - now) / timedelta(days=1))
    return max(0, days)


__all__ = [
    "current_savings",
    "remaining_amount",
    "progress_percent",
    "days_remaining",
]
