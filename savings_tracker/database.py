"""sqlite key-value store for goals, keyed by goal id."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from savings_tracker.models import Goal

CURRENT_GOAL_KEY = "current_goal_id"


class GoalStore:
    def __init__(self, db_path: Union[str, Path]):
        self.db_path = str(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                create table if not exists goals (
                    id text primary key,
                    payload text not null,
                    created_at text not null
                )
                """
            )
            conn.execute(
                """
                create table if not exists app_state (
                    key text primary key,
                    value text
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, goal_id: str) -> Optional[Goal]:
        conn = self._connect()
        try:
            row = conn.execute(
                "select payload from goals where id = ?",
                (goal_id,),
            ).fetchone()
            if row is None:
                return None
            return Goal.model_validate_json(row["payload"])
        finally:
            conn.close()

    def put(self, goal: Goal) -> None:
        """Insert or replace a goal; an update keeps its place in the list."""
        conn = self._connect()
        try:
            conn.execute(
                """
                insert into goals (id, payload, created_at)
                values (?, ?, ?)
                on conflict(id) do update set payload = excluded.payload
                """,
                (
                    goal.id,
                    goal.model_dump_json(),
                    datetime.now(timezone.utc).isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, goal_id: str) -> bool:
        conn = self._connect()
        try:
            cursor = conn.execute("delete from goals where id = ?", (goal_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def list_goals(self) -> List[Goal]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "select payload from goals order by created_at, rowid"
            ).fetchall()
            return [Goal.model_validate_json(row["payload"]) for row in rows]
        finally:
            conn.close()

    def get_current_goal_id(self) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute(
                "select value from app_state where key = ?",
                (CURRENT_GOAL_KEY,),
            ).fetchone()
            return row["value"] if row is not None else None
        finally:
            conn.close()

    def set_current_goal_id(self, goal_id: Optional[str]) -> None:
        conn = self._connect()
        try:
            if goal_id is None:
                conn.execute("delete from app_state where key = ?", (CURRENT_GOAL_KEY,))
            else:
                conn.execute(
                    """
                    insert into app_state (key, value) values (?, ?)
                    on conflict(key) do update set value = excluded.value
                    """,
                    (CURRENT_GOAL_KEY, goal_id),
                )
            conn.commit()
        finally:
            conn.close()
