"""Acute:Chronic Workload Ratio classification.

ACWR = acute / max(chronic, 1). The floor of 1 keeps the ratio finite when
the chronic baseline is near zero; a zero baseline is reported separately
(see is_chronic_load_reliable and the recommendation rules).

Bands are checked in this order, first match wins:
- optimal:         0.8 <= ratio <= 1.3
- high_load:       ratio > 1.5
- elevated_risk:   1.3 < ratio <= 1.5
- low_stimulation: anything else (ratio < 0.8)

A ratio of exactly 1.3 is optimal, never elevated_risk.
"""

from models.workload_state import RatioClassification

OPTIMAL_LOW = 0.8
OPTIMAL_HIGH = 1.3
HIGH_LOAD_THRESHOLD = 1.5

# Minimum chronic denominator
CHRONIC_FLOOR = 1.0


def compute_ratio(acute: float, chronic: float) -> float:
    return acute / max(chronic, CHRONIC_FLOOR)


def classify_ratio(acute: float, chronic: float) -> RatioClassification:
    """Compute the ACWR and map it to a risk band.

    Args:
        acute: Acute (7-day) load sum
        chronic: Chronic (28-day) baseline

    Returns:
        RatioClassification with ratio, band, color tag and display label
    """
    ratio = compute_ratio(acute, chronic)

    if OPTIMAL_LOW <= ratio <= OPTIMAL_HIGH:
        band, color, label = "optimal", "green", "Optimal"
    elif ratio > HIGH_LOAD_THRESHOLD:
        band, color, label = "high_load", "red", "High load"
    elif OPTIMAL_HIGH < ratio <= HIGH_LOAD_THRESHOLD:
        band, color, label = "elevated_risk", "yellow", "Elevated risk"
    else:
        band, color, label = "low_stimulation", "blue", "Low stimulation"

    return RatioClassification(
        acute=acute,
        chronic=chronic,
        ratio=ratio,
        band=band,
        color=color,
        label=label,
    )


def is_chronic_load_reliable(chronic: float) -> bool:
    """Whether the chronic baseline is large enough to trust the ratio."""
    return chronic > 0


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}"


def format_chronic_load(chronic: float) -> str:
    if chronic == 0:
        return "No base"
    return f"{chronic:.1f}"
