from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from loguru import logger

from dashboard.calendar.weeks import as_date, week_bounds
from dashboard.config.settings import settings
from dashboard.metrics.acwr import classify_ratio
from dashboard.metrics.plan_realization import compute_plan_realization
from dashboard.metrics.readiness import average_recent_readiness, summarize_readiness
from dashboard.metrics.recommendations import generate_recommendations
from dashboard.metrics.srpe import compute_daily_load
from dashboard.metrics.training_load import (
    ACUTE_WINDOW_DAYS,
    compute_acute_sum,
    compute_acwr_series,
    compute_chronic_baseline,
)
from models.activity import ActivityRecord, DailyLoadPoint, ReadinessSample
from models.recommendation import RecommendationInputs
from models.workload_state import WorkloadState


def build_workload_state(
    *,
    activities: Iterable[ActivityRecord],
    today: dt.date | str,
    history: Iterable[DailyLoadPoint] = (),
    readiness: Iterable[ReadinessSample] = (),
    week_start: dt.date | str | None = None,
    week_end: dt.date | str | None = None,
    method: str | None = None,
) -> WorkloadState:
    """Run one full dashboard metrics pass.

    Pure with respect to its inputs: "today" and the plan window come from the
    caller, already resolved in the user's timezone. When the plan window is
    omitted, the Monday-Sunday week containing today is used.

    NO persistence.
    NO wall-clock reads.
    """
    activities = list(activities)
    history = list(history)
    today = as_date(today)
    method = method or settings.chronic_method

    if week_start is None or week_end is None:
        default_start, default_end = week_bounds(today)
        week_start = week_start or default_start
        week_end = week_end or default_end
    week_start = as_date(week_start)
    week_end = as_date(week_end)

    # -----------------------------
    # Load
    # -----------------------------
    daily_load = compute_daily_load(activities, history)

    acute = compute_acute_sum(daily_load, today)
    chronic = compute_chronic_baseline(daily_load, today, method)
    previous_acute = compute_acute_sum(daily_load, today - dt.timedelta(days=ACUTE_WINDOW_DAYS))

    acwr = classify_ratio(acute, chronic)

    # -----------------------------
    # Plan & readiness
    # -----------------------------
    plan = compute_plan_realization(activities, week_start, week_end)
    readiness_value = average_recent_readiness(readiness, window=settings.readiness_window)

    # -----------------------------
    # Recommendations
    # -----------------------------
    recommendations = generate_recommendations(
        RecommendationInputs(
            ratio=acwr.ratio,
            chronic=chronic,
            acute=acute,
            readiness=readiness_value,
            plan_percent=plan.percent,
            has_data=bool(history),
            previous_acute=previous_acute,
        )
    )

    logger.info(
        f"[METRICS] Workload pass for {today.isoformat()} ({method}): acute={acute:.1f} chronic={chronic:.1f} "
        f"acwr={acwr.ratio:.2f} ({acwr.band}) plan={plan.done_count}/{plan.planned_count} "
        f"recommendations={len(recommendations)}"
    )

    return WorkloadState(
        today=today,
        week_start=week_start,
        week_end=week_end,
        chronic_method=method,
        daily_load=daily_load,
        acute_load_7d=acute,
        chronic_load_28d=chronic,
        previous_acute_load_7d=previous_acute,
        acwr=acwr,
        acwr_trend=compute_acwr_series(daily_load, chronic),
        plan=plan,
        readiness=summarize_readiness(readiness_value),
        recommendations=recommendations,
    )
