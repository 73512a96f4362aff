"""
Goal and deposit workflows on top of the goal store.

The current goal is a value kept in the store and passed around explicitly;
nothing here holds module-level state.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from savings_tracker.core.cadence import day_names
from savings_tracker.core.duration import format_duration, format_target_period
from savings_tracker.core.progress import (
    current_savings,
    days_remaining,
    progress_percent,
    remaining_amount,
)
from savings_tracker.core.projection import estimate_goal
from savings_tracker.database import GoalStore
from savings_tracker.models import Deposit, Goal, GoalPlan, ProjectionResult
from savings_tracker.schemas.goal import GoalSummary

logger = logging.getLogger(__name__)


class GoalNotFound(LookupError):
    pass


class DepositNotFound(LookupError):
    pass


def get_goal(store: GoalStore, goal_id: str) -> Goal:
    goal = store.get(goal_id)
    if goal is None:
        raise GoalNotFound(f"goal {goal_id} not found")
    return goal


def create_goal(store: GoalStore, plan: GoalPlan, now: datetime) -> Goal:
    goal = Goal(**plan.model_dump(), start_date=now)
    store.put(goal)
    store.set_current_goal_id(goal.id)
    logger.info("goal created id=%s name=%r target=%.2f", goal.id, goal.name, goal.target_amount)
    return goal


def update_goal(store: GoalStore, goal_id: str, plan: GoalPlan, now: datetime) -> Goal:
    """Replace the plan fields; id and deposits survive, start date restarts."""
    existing = get_goal(store, goal_id)
    goal = Goal(**plan.model_dump(), id=existing.id, start_date=now, deposits=existing.deposits)
    store.put(goal)
    store.set_current_goal_id(goal.id)
    logger.info("goal updated id=%s", goal.id)
    return goal


def delete_goal(store: GoalStore, goal_id: str) -> None:
    if not store.delete(goal_id):
        raise GoalNotFound(f"goal {goal_id} not found")

    if store.get_current_goal_id() == goal_id:
        remaining = store.list_goals()
        store.set_current_goal_id(remaining[0].id if remaining else None)
    logger.info("goal deleted id=%s", goal_id)


def select_goal(store: GoalStore, goal_id: str) -> Goal:
    goal = get_goal(store, goal_id)
    store.set_current_goal_id(goal.id)
    return goal


def current_goal(store: GoalStore) -> Optional[Goal]:
    """The selected goal, falling back to the first one when the selection is stale."""
    goal_id = store.get_current_goal_id()
    if goal_id is not None:
        goal = store.get(goal_id)
        if goal is not None:
            return goal

    goals = store.list_goals()
    if not goals:
        if goal_id is not None:
            store.set_current_goal_id(None)
        return None
    store.set_current_goal_id(goals[0].id)
    return goals[0]


def add_deposit(store: GoalStore, goal_id: str, amount: float, now: datetime) -> Goal:
    goal = get_goal(store, goal_id)
    deposit = Deposit(amount=amount, timestamp=now)
    goal = goal.model_copy(update={"deposits": [*goal.deposits, deposit]})
    store.put(goal)
    logger.info("deposit added goal=%s deposit=%s amount=%.2f", goal.id, deposit.id, amount)
    return goal


def delete_deposit(store: GoalStore, goal_id: str, deposit_id: str) -> Goal:
    goal = get_goal(store, goal_id)
    kept = [deposit for deposit in goal.deposits if deposit.id != deposit_id]
    if len(kept) == len(goal.deposits):
        raise DepositNotFound(f"deposit {deposit_id} not found on goal {goal_id}")
    goal = goal.model_copy(update={"deposits": kept})
    store.put(goal)
    logger.info("deposit deleted goal=%s deposit=%s", goal.id, deposit_id)
    return goal


def summarize_goal(goal: Goal, now: datetime, current_goal_id: Optional[str] = None) -> GoalSummary:
    estimate = estimate_goal(goal, now)
    if isinstance(estimate, ProjectionResult):
        estimated_time_text = format_duration(
            estimate.total_days, estimate.total_weeks, estimate.deposits_per_week
        )
    else:
        estimated_time_text = "-"

    percent = progress_percent(goal)
    return GoalSummary(
        goal=goal,
        is_current=goal.id == current_goal_id,
        current_savings=current_savings(goal),
        remaining_amount=remaining_amount(goal),
        progress_percent=percent,
        goal_reached=percent >= 100,
        deposit_count=len(goal.deposits),
        days_remaining=days_remaining(goal, now),
        estimate=estimate,
        estimated_time_text=estimated_time_text,
        target_period_text=format_target_period(goal.time_value, goal.time_unit),
        selected_day_names=day_names(goal.selected_days),
    )


def summarize_goals(store: GoalStore, now: datetime) -> List[GoalSummary]:
    current = current_goal(store)
    current_id = current.id if current is not None else None
    return [summarize_goal(goal, now, current_id) for goal in store.list_goals()]
