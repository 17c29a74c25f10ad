"""Rolling training load metrics (acute sum, chronic baseline, ACWR trend).

This module provides deterministic computation of windowed load aggregates
from a daily load series. Windows are anchored on a caller-supplied "today"
calendar date, never on wall-clock time.

Metrics:
- Acute load: sum of daily load over the inclusive 7-day window [today-6, today]
- Chronic load: 28-day baseline over [today-27, today], either
  - trailing_avg: mean of the daily points present in the window
  - ewma: exponentially weighted moving average, lambda = 2 / (28 + 1)

Properties:
- Deterministic: Same input always produces same output
- Missing data handling: Absent dates contribute nothing (acute) and are not
  counted in the trailing average divisor
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from dashboard.calendar.weeks import as_date
from dashboard.metrics.errors import MetricsInputError
from models.activity import DailyLoadPoint
from models.workload_state import TrendPoint

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28

# lambda = 2/(n+1) for n = 28
EWMA_LAMBDA = 2 / (CHRONIC_WINDOW_DAYS + 1)

CHRONIC_METHODS = ("trailing_avg", "ewma")


def _window(
    daily_load: Iterable[DailyLoadPoint],
    today: date,
    days: int,
) -> list[DailyLoadPoint]:
    """Points inside the inclusive window [today - (days-1), today], sorted ascending."""
    start = today - timedelta(days=days - 1)
    return sorted(
        (point for point in daily_load if start <= point.day <= today),
        key=lambda point: point.day,
    )


def compute_acute_sum(daily_load: Iterable[DailyLoadPoint], today: date | str) -> float:
    """Sum daily load over the 7 calendar days ending on today.

    Args:
        daily_load: Daily load points (any order)
        today: Anchor date (date or YYYY-MM-DD)

    Returns:
        Total load in [today-6, today]; 0.0 if no points fall in the window
    """
    return float(sum(point.load for point in _window(daily_load, as_date(today), ACUTE_WINDOW_DAYS)))


def compute_chronic_trailing_avg(daily_load: Iterable[DailyLoadPoint], today: date | str) -> float:
    """Mean daily load over the 28 calendar days ending on today.

    The divisor is the number of points present in the window, not 28.
    """
    relevant = _window(daily_load, as_date(today), CHRONIC_WINDOW_DAYS)
    if not relevant:
        return 0.0
    return sum(point.load for point in relevant) / len(relevant)


def compute_chronic_ewma(daily_load: Iterable[DailyLoadPoint], today: date | str) -> float:
    """Exponentially weighted moving average over the 28-day window.

    Formula:
        ewma[0] = load[0]
        ewma[i] = lambda * load[i] + (1 - lambda) * ewma[i-1]

    Notes:
        - Seeded with the first raw value in the window, not with zero
        - Only points present in the window are iterated; gaps are skipped
    """
    relevant = _window(daily_load, as_date(today), CHRONIC_WINDOW_DAYS)
    if not relevant:
        return 0.0

    ewma = relevant[0].load
    for point in relevant[1:]:
        ewma = EWMA_LAMBDA * point.load + (1 - EWMA_LAMBDA) * ewma
    return ewma


def compute_chronic_baseline(
    daily_load: Iterable[DailyLoadPoint],
    today: date | str,
    method: str = "trailing_avg",
) -> float:
    """Compute the chronic load baseline with the selected smoothing method.

    Args:
        daily_load: Daily load points (any order, unique dates)
        today: Anchor date (date or YYYY-MM-DD)
        method: "trailing_avg" or "ewma"

    Returns:
        Chronic baseline; 0.0 when the window holds no data

    Raises:
        MetricsInputError: If method is unknown
    """
    if method == "trailing_avg":
        chronic = compute_chronic_trailing_avg(daily_load, today)
    elif method == "ewma":
        chronic = compute_chronic_ewma(daily_load, today)
    else:
        raise MetricsInputError(
            "UNKNOWN_CHRONIC_METHOD",
            [f"Chronic method must be one of {', '.join(CHRONIC_METHODS)}, got {method!r}"],
        )

    logger.debug(f"[METRICS] Chronic baseline ({method}) as of {as_date(today).isoformat()}: {chronic:.2f}")
    return chronic


def compute_acwr_series(daily_load: Iterable[DailyLoadPoint], chronic: float) -> list[TrendPoint]:
    """Compute the ACWR trend line for charting.

    Each daily point gets the acute sum of the 7 calendar days ending on it,
    divided by max(chronic, 1). Points within the first 6 days of the series
    have no full acute window yet and report 0.0.

    Args:
        daily_load: Daily load points
        chronic: Current chronic baseline used as the common denominator

    Returns:
        One TrendPoint per daily point, sorted ascending
    """
    points = sorted(daily_load, key=lambda point: point.day)
    if not points:
        return []

    warmup_end = points[0].day + timedelta(days=ACUTE_WINDOW_DAYS - 1)
    denominator = max(chronic, 1.0)

    trend: list[TrendPoint] = []
    for point in points:
        if point.day < warmup_end:
            trend.append(TrendPoint(day=point.day, value=0.0))
            continue
        trend.append(TrendPoint(day=point.day, value=compute_acute_sum(points, point.day) / denominator))
    return trend
