"""Calendar date helpers.

Dashboard dates are plain calendar dates. Callers resolve "today" in the
user's timezone before handing it over; nothing here looks at the clock.
"""

from datetime import date, datetime, timedelta

from dashboard.metrics.errors import MetricsInputError


def as_date(value: date | str) -> date:
    """Coerce a date, datetime or canonical YYYY-MM-DD string to a date.

    Raises:
        MetricsInputError: If the string is not an ISO calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise MetricsInputError("INVALID_DATE", [f"Expected YYYY-MM-DD date, got {value!r}"]) from e


def week_bounds(day: date | str) -> tuple[date, date]:
    """Monday and Sunday of the week containing day."""
    day = as_date(day)
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def shift_week(week_start: date | str, weeks: int) -> tuple[date, date]:
    """Bounds of the week starting `weeks` weeks after week_start (negative goes back)."""
    start = as_date(week_start) + timedelta(weeks=weeks)
    return start, start + timedelta(days=6)
