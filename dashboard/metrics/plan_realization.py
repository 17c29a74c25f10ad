"""Plan realization tracking.

Compares what was planned against what was done inside a date window.
Only plan-countable categories take part (see dashboard.activities.types).
"""

import math
from collections.abc import Iterable
from datetime import date
from typing import Literal

from loguru import logger

from dashboard.activities.types import is_plan_countable
from dashboard.calendar.weeks import as_date
from models.activity import ActivityRecord
from models.workload_state import PlanRealization


def compute_plan_realization(
    activities: Iterable[ActivityRecord],
    window_start: date | str,
    window_end: date | str,
) -> PlanRealization:
    """Compute the fraction of planned countable activities completed.

    Args:
        activities: Activity records
        window_start: First day of the window (inclusive)
        window_end: Last day of the window (inclusive)

    Returns:
        PlanRealization with:
        - planned_count: planned or done activities
        - done_count: done activities
        - total_count: all countable activities in the window, canceled included
        - percent: done_count / planned_count (0 when nothing planned), capped at 1.0
    """
    start = as_date(window_start)
    end = as_date(window_end)

    relevant = [
        activity
        for activity in activities
        if start <= activity.day <= end and is_plan_countable(activity.category)
    ]

    planned_count = sum(1 for activity in relevant if activity.status in {"planned", "done"})
    done_count = sum(1 for activity in relevant if activity.status == "done")

    percent = done_count / planned_count if planned_count > 0 else 0.0

    logger.debug(
        f"[METRICS] Plan realization {start.isoformat()}..{end.isoformat()}: "
        f"{done_count}/{planned_count} done ({len(relevant)} countable)"
    )

    return PlanRealization(
        percent=min(percent, 1.0),
        done_count=done_count,
        planned_count=planned_count,
        total_count=len(relevant),
    )


def plan_status(
    percent: float,
) -> tuple[Literal["excellent", "good", "fair", "poor"], Literal["green", "yellow", "orange", "red"], str]:
    """Map a realization fraction to (status, color, label)."""
    if percent >= 0.9:
        return "excellent", "green", "Excellent realization"
    if percent >= 0.7:
        return "good", "yellow", "Good realization"
    if percent >= 0.5:
        return "fair", "orange", "Fair realization"
    return "poor", "red", "Low realization"


def format_percent(percent: float) -> str:
    return f"{math.floor(percent * 100 + 0.5)}%"
