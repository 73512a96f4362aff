"""Human-readable rendering of day counts."""

from __future__ import annotations

import math
from typing import Optional


def pluralize(count: int, unit: str) -> str:
    return f"{count} {unit if count == 1 else unit + 's'}"


def format_duration(
    total_days: int,
    total_weeks: Optional[int] = None,
    deposits_per_week: Optional[int] = None,
) -> str:
    """
    Bucket a day count into days, weeks, months or years (+ months).

      <7 days     -> "N days"
      <30 days    -> "N weeks"   (total_weeks when given, else ceil(days / 7))
      <365 days   -> "N months"  (ceil(days / 30))
      otherwise   -> "Y years M months", months dropped when zero

    deposits_per_week is accepted so callers can pass a projection through
    unchanged; it does not affect the output.
    """
    if total_days < 0:
        raise ValueError("total_days must be non-negative")

    if total_days < 7:
        return pluralize(total_days, "day")
    if total_days < 30:
        weeks = total_weeks if total_weeks else math.ceil(total_days / 7)
        return pluralize(weeks, "week")
    if total_days < 365:
        return pluralize(math.ceil(total_days / 30), "month")

    years = total_days // 365
    remaining_months = math.ceil((total_days % 365) / 30)
    if remaining_months > 0:
        return f"{pluralize(years, 'year')} {pluralize(remaining_months, 'month')}"
    return pluralize(years, "year")


def format_target_period(time_value: Optional[int], time_unit: Optional[str]) -> Optional[str]:
    """The user's declared plan, e.g. "3 months (Your Target)"."""
    if not time_value or not time_unit:
        return None
    return f"{time_value} {time_unit} (Your Target)"
