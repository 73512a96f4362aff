"""HTTP routes for the Flask API."""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from savings_tracker.core.cadence import InvalidCadence
from savings_tracker.core.projection import estimate_goal, project_prospective
from savings_tracker.database import GoalStore
from savings_tracker.domain import goals as goal_service
from savings_tracker.domain.goals import DepositNotFound, GoalNotFound
from savings_tracker.models import GoalPlan
from savings_tracker.schemas.goal import (
    CurrentGoalResponse,
    DepositRequest,
    EstimateRequest,
    GoalListResponse,
    HealthResponse,
)

api_bp = Blueprint("api", __name__)


def _store() -> GoalStore:
    return current_app.extensions["goal_store"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _json_body() -> Any:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidCadence)
def _handle_invalid_cadence(exc: InvalidCadence):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(GoalNotFound)
@api_bp.errorhandler(DepositNotFound)
def _handle_not_found(exc: LookupError):
    return jsonify({"detail": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.post("/estimate")
def estimate() -> Any:
    """Prospective estimate for the goal form, before any deposit exists."""
    payload = EstimateRequest.model_validate(_json_body())
    result = project_prospective(
        payload.goal_amount,
        payload.periodic_amount,
        payload.selected_days,
        now=_now(),
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.get("/goals")
def list_goals() -> Any:
    store = _store()
    summaries = goal_service.summarize_goals(store, _now())
    current = store.get_current_goal_id()
    response = GoalListResponse(current_goal_id=current, goals=summaries)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/goals")
def create_goal() -> Any:
    plan = GoalPlan.model_validate(_json_body())
    now = _now()
    goal = goal_service.create_goal(_store(), plan, now)
    summary = goal_service.summarize_goal(goal, now, goal.id)
    return jsonify(summary.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.get("/goals/current")
def current_goal() -> Any:
    now = _now()
    goal = goal_service.current_goal(_store())
    summary = goal_service.summarize_goal(goal, now, goal.id) if goal is not None else None
    return jsonify(CurrentGoalResponse(goal=summary).model_dump(mode="json"))


@api_bp.get("/goals/<goal_id>")
def get_goal(goal_id: str) -> Any:
    store = _store()
    goal = goal_service.get_goal(store, goal_id)
    summary = goal_service.summarize_goal(goal, _now(), store.get_current_goal_id())
    return jsonify(summary.model_dump(mode="json"))


@api_bp.put("/goals/<goal_id>")
def update_goal(goal_id: str) -> Any:
    plan = GoalPlan.model_validate(_json_body())
    now = _now()
    goal = goal_service.update_goal(_store(), goal_id, plan, now)
    summary = goal_service.summarize_goal(goal, now, goal.id)
    return jsonify(summary.model_dump(mode="json"))


@api_bp.delete("/goals/<goal_id>")
def delete_goal(goal_id: str) -> Any:
    goal_service.delete_goal(_store(), goal_id)
    return "", HTTPStatus.NO_CONTENT


@api_bp.post("/goals/<goal_id>/select")
def select_goal(goal_id: str) -> Any:
    goal = goal_service.select_goal(_store(), goal_id)
    summary = goal_service.summarize_goal(goal, _now(), goal.id)
    return jsonify(summary.model_dump(mode="json"))


@api_bp.get("/goals/<goal_id>/projection")
def goal_projection(goal_id: str) -> Any:
    goal = goal_service.get_goal(_store(), goal_id)
    result = estimate_goal(goal, _now())
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/goals/<goal_id>/deposits")
def add_deposit(goal_id: str) -> Any:
    payload = DepositRequest.model_validate(_json_body())
    store = _store()
    now = _now()
    goal = goal_service.add_deposit(store, goal_id, payload.amount, now)
    summary = goal_service.summarize_goal(goal, now, store.get_current_goal_id())
    return jsonify(summary.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.delete("/goals/<goal_id>/deposits/<deposit_id>")
def delete_deposit(goal_id: str, deposit_id: str) -> Any:
    store = _store()
    goal = goal_service.delete_deposit(store, goal_id, deposit_id)
    summary = goal_service.summarize_goal(goal, _now(), store.get_current_goal_id())
    return jsonify(summary.model_dump(mode="json"))
