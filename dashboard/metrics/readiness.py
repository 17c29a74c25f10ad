"""Readiness averaging.

Readiness samples are subjective 0-10 recovery scores. The dashboard shows
the mean of the most recent few samples.
"""

from collections.abc import Iterable

from models.activity import ReadinessSample
from models.workload_state import ReadinessSummary

HIGH_READINESS = 7.0
MEDIUM_READINESS = 4.0


def average_recent_readiness(samples: Iterable[ReadinessSample], window: int = 3) -> float | None:
    """Mean value of the `window` most recent samples by date.

    Returns:
        The average, or None when there are no samples
    """
    recent = sorted(samples, key=lambda sample: sample.day)[-window:]
    if not recent:
        return None
    return sum(sample.value for sample in recent) / len(recent)


def summarize_readiness(value: float | None) -> ReadinessSummary:
    if value is None:
        return ReadinessSummary(value=None, status=None, label=None)
    if value >= HIGH_READINESS:
        return ReadinessSummary(value=value, status="green", label="High readiness")
    if value >= MEDIUM_READINESS:
        return ReadinessSummary(value=value, status="yellow", label="Medium readiness")
    return ReadinessSummary(value=value, status="red", label="Low readiness")
