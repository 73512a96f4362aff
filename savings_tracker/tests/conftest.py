from __future__ import annotations

from datetime import datetime, timezone

import pytest
from flask.testing import FlaskClient

from savings_tracker.app import create_app
from savings_tracker.config import Settings
from savings_tracker.database import GoalStore

NOW = datetime(2024, 3, 4, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def store(tmp_path) -> GoalStore:
    goal_store = GoalStore(tmp_path / "goals.db")
    goal_store.init_db()
    return goal_store


@pytest.fixture()
def client(tmp_path) -> FlaskClient:
    app = create_app(Settings(db_path=str(tmp_path / "api.db"), log_level="WARNING"))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
