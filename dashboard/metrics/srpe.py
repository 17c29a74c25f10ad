"""Session-RPE load computation.

Turns activity records into a daily load series:
- Activity load (AU) = rating x duration_min, for done, rated, load-bearing activities
- Daily load = sum of activity loads per calendar date
- History merge: externally supplied daily points fill in older dates,
  freshly computed points win on collision

Dates are calendar dates (datetime.date), never timestamps. Sorting and
windowing compare dates directly, so there is no timezone shifting here.
"""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from loguru import logger

from dashboard.activities.types import canonical_status, is_load_bearing
from models.activity import ActivityRecord, DailyLoadPoint

RATING_MIN = 0.0
RATING_MAX = 10.0


def _coerce_rating(value: Any, activity_id: str) -> float | None:
    """Rating as a float in [0, 10], or None when it is missing or malformed."""
    if value is None:
        return None
    try:
        rating = float(value) if not isinstance(value, bool) else math.nan
    except (TypeError, ValueError):
        rating = math.nan
    if not math.isfinite(rating) or not RATING_MIN <= rating <= RATING_MAX:
        logger.warning(f"[METRICS] Activity {activity_id} has malformed rating {value!r}, treating it as unrated")
        return None
    return rating


def normalize_activity(raw: Mapping[str, Any]) -> ActivityRecord:
    """Build a canonical ActivityRecord from a raw session row.

    Accepts the calendar's field names (id, date, type, intensity) alongside
    the canonical ones, and folds extended lifecycle statuses (completed,
    cancelled, scheduled, ...) into planned/done/canceled. A malformed
    rating (non-numeric or outside 0-10) is dropped, which means zero load.

    Args:
        raw: Session row as supplied by the data layer

    Returns:
        Validated ActivityRecord
    """
    activity_id = str(raw.get("activity_id", raw.get("id", "")))
    return ActivityRecord(
        activity_id=activity_id,
        day=raw.get("day", raw.get("date")),
        category=raw.get("category", raw.get("type")),
        duration_min=raw.get("duration_min", raw.get("duration", 0)),
        rating=_coerce_rating(raw.get("rating", raw.get("intensity")), activity_id),
        status=canonical_status(raw.get("status", "planned")),
    )


def compute_activity_load(activity: ActivityRecord) -> float:
    """Compute the session-RPE load of a single activity.

    Returns:
        rating * duration_min for done, rated, load-bearing activities, else 0.0
    """
    if activity.status != "done":
        return 0.0
    if not activity.rating:
        logger.debug(f"[METRICS] Done activity {activity.activity_id} has no rating, counting zero load")
        return 0.0
    if not is_load_bearing(activity.category):
        return 0.0
    return float(activity.rating * activity.duration_min)


def aggregate_daily_load(activities: Iterable[ActivityRecord]) -> list[DailyLoadPoint]:
    """Sum activity loads per calendar date.

    Every date carrying at least one activity gets a point, even if its
    load is zero.

    Returns:
        Daily load points sorted ascending by date
    """
    daily: dict[date, float] = defaultdict(float)
    for activity in activities:
        daily[activity.day] += compute_activity_load(activity)

    return [DailyLoadPoint(day=day, load=load) for day, load in sorted(daily.items())]


def merge_daily_load(
    historical: Iterable[DailyLoadPoint],
    computed: Iterable[DailyLoadPoint],
) -> list[DailyLoadPoint]:
    """Merge historical and computed daily load, computed values winning.

    Historical points are inserted first and computed points second, so a
    computed point overwrites a historical point sharing its date.

    Returns:
        Daily load points with unique dates, sorted ascending
    """
    merged: dict[date, float] = {}
    for point in historical:
        merged[point.day] = point.load
    for point in computed:
        merged[point.day] = point.load

    return [DailyLoadPoint(day=day, load=load) for day, load in sorted(merged.items())]


def compute_daily_load(
    activities: Iterable[ActivityRecord],
    historical_series: Iterable[DailyLoadPoint] = (),
) -> list[DailyLoadPoint]:
    """Compute the full daily load series for the rolling calculations.

    Args:
        activities: Tracked activity records
        historical_series: Daily load points predating the tracked window

    Returns:
        Chronologically sorted daily load points, one per date.
        Empty when both inputs are empty.
    """
    activities = list(activities)
    historical_series = list(historical_series)

    computed = aggregate_daily_load(activities)
    daily_load = merge_daily_load(historical_series, computed)

    logger.debug(
        f"[METRICS] Daily load: {len(activities)} activities -> {len(computed)} computed days, "
        f"{len(historical_series)} historical days, {len(daily_load)} merged days"
    )
    return daily_load
