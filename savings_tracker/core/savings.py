"""Deposit totals shared by the projection engine and the progress figures."""

from __future__ import annotations

import math

from savings_tracker.models import Goal


def current_savings(goal: Goal) -> float:
    # fsum: ten deposits of 0.10 add up to exactly 1.0
    return math.fsum(deposit.amount for deposit in goal.deposits)


def remaining_amount(goal: Goal) -> float:
    return max(0.0, goal.target_amount - current_savings(goal))
