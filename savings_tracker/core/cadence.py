"""Deposit cadence: which weekdays a goal is funded on."""

from __future__ import annotations

from typing import Iterable, List, Set

DAYS_PER_WEEK = 7

# 0 = Sunday, matching the day picker on the frontend
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


class InvalidCadence(ValueError):
    """A selected day is not an integer weekday in [0, 6]."""


def normalize_selected_days(raw_days: Iterable[int]) -> Set[int]:
    days: Set[int] = set()
    for day in raw_days:
        if isinstance(day, bool) or not isinstance(day, int):
            raise InvalidCadence(f"selected day {day!r} is not an integer weekday")
        if not 0 <= day < DAYS_PER_WEEK:
            raise InvalidCadence(f"selected day {day} is outside 0-6")
        days.add(day)
    return days


def deposits_per_week(selected_days: Iterable[int]) -> int:
    """Deposits made per week; an empty cadence means every day."""
    count = len(set(selected_days))
    return count if count > 0 else DAYS_PER_WEEK


def day_names(selected_days: Iterable[int]) -> List[str]:
    return [DAY_NAMES[day] for day in sorted(normalize_selected_days(selected_days))]
