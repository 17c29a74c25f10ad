"""Rule-based coaching recommendations.

Rules are an ordered table of predicate -> recommendation. They are not
mutually exclusive: every matching rule emits its recommendation, except
terminal rules, which emit and stop the evaluation. When no rule matches,
a single low-priority fallback is returned.

Output is sorted by priority (high, medium, low); rules of equal priority
keep their table order.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from dashboard.metrics.acwr import HIGH_LOAD_THRESHOLD, OPTIMAL_HIGH, OPTIMAL_LOW
from models.recommendation import (
    Recommendation,
    RecommendationCategory,
    RecommendationInputs,
    RecommendationPriority,
)

PRIORITY_WEIGHTS: dict[str, int] = {"high": 3, "medium": 2, "low": 1}

LOW_CHRONIC_THRESHOLD = 50.0
LOAD_GROWTH_WARNING_PCT = 30.0

FALLBACK_RECOMMENDATION = Recommendation(
    text="All metrics within range - continue the current training plan",
    priority="low",
    category="general",
)


@dataclass(frozen=True)
class RecommendationRule:
    """One entry of the recommendation table.

    Attributes:
        name: Stable rule identifier
        applies: Predicate over the metric inputs
        build: Builds the recommendation for matching inputs
        terminal: Stop evaluating further rules after this one fires
    """

    name: str
    applies: Callable[[RecommendationInputs], bool]
    build: Callable[[RecommendationInputs], Recommendation]
    terminal: bool = False


def _fixed(text: str, priority: RecommendationPriority, category: RecommendationCategory) -> Callable[[RecommendationInputs], Recommendation]:
    return lambda _inputs: Recommendation(text=text, priority=priority, category=category)


def _load_growth_pct(inputs: RecommendationInputs) -> float | None:
    if not inputs.previous_acute or inputs.previous_acute <= 0:
        return None
    return (inputs.acute - inputs.previous_acute) / inputs.previous_acute * 100


def _has_readiness(inputs: RecommendationInputs) -> bool:
    return inputs.readiness is not None and math.isfinite(inputs.readiness)


def _low_stimulation(inputs: RecommendationInputs) -> Recommendation:
    priority: RecommendationPriority = "medium" if inputs.chronic < LOW_CHRONIC_THRESHOLD else "low"
    return Recommendation(
        text="Low stimulation - increase training stimulus or volume",
        priority=priority,
        category="load",
    )


def _load_growth(inputs: RecommendationInputs) -> Recommendation:
    growth = _load_growth_pct(inputs) or 0.0
    return Recommendation(
        text=f"Warning: load increased by {math.floor(growth + 0.5)}% - consider reducing it",
        priority="medium",
        category="load",
    )


RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="no_data",
        applies=lambda i: not i.has_data,
        build=_fixed("No data in this period - start logging your activities", "low", "general"),
        terminal=True,
    ),
    RecommendationRule(
        name="no_training_base",
        applies=lambda i: i.chronic == 0,
        build=_fixed("No training base (C=0) - build load gradually", "high", "load"),
        terminal=True,
    ),
    RecommendationRule(
        name="high_load",
        applies=lambda i: i.ratio > HIGH_LOAD_THRESHOLD,
        build=_fixed("High load - consider 1-2 recovery days", "high", "load"),
    ),
    RecommendationRule(
        name="elevated_risk",
        applies=lambda i: OPTIMAL_HIGH <= i.ratio <= HIGH_LOAD_THRESHOLD,
        build=_fixed("Elevated risk - monitor symptoms and reduce intensity", "medium", "load"),
    ),
    RecommendationRule(
        name="low_stimulation",
        applies=lambda i: i.ratio < OPTIMAL_LOW,
        build=_low_stimulation,
    ),
    RecommendationRule(
        name="low_readiness",
        applies=lambda i: _has_readiness(i) and i.readiness < 4,
        build=_fixed("Low readiness - focus on recovery and light technique work", "high", "readiness"),
    ),
    RecommendationRule(
        name="medium_readiness",
        applies=lambda i: _has_readiness(i) and 4 <= i.readiness < 7,
        build=_fixed("Medium readiness - adjust intensity to how you feel", "medium", "readiness"),
    ),
    RecommendationRule(
        name="load_growth",
        applies=lambda i: (_load_growth_pct(i) or 0.0) > LOAD_GROWTH_WARNING_PCT,
        build=_load_growth,
    ),
    RecommendationRule(
        name="low_plan_realization",
        applies=lambda i: i.plan_percent < 0.5,
        build=_fixed("Low plan realization - review the causes and adjust your goals", "medium", "plan"),
    ),
    RecommendationRule(
        name="high_plan_realization",
        applies=lambda i: i.plan_percent > 0.9,
        build=_fixed("Excellent plan realization - keep up the current pace", "low", "plan"),
    ),
)


def generate_recommendations(
    inputs: RecommendationInputs,
    rules: tuple[RecommendationRule, ...] = RULES,
) -> list[Recommendation]:
    """Evaluate the rule table against the metric inputs.

    Args:
        inputs: Ratio, baseline, acute sum, readiness and plan values
        rules: Ordered rule table (defaults to RULES)

    Returns:
        Recommendations sorted by descending priority weight, stable within
        equal priority
    """
    recommendations: list[Recommendation] = []
    fired: list[str] = []

    for rule in rules:
        if not rule.applies(inputs):
            continue
        recommendations.append(rule.build(inputs))
        fired.append(rule.name)
        if rule.terminal:
            break

    if not recommendations:
        recommendations.append(FALLBACK_RECOMMENDATION.model_copy())
        fired.append("fallback")

    logger.debug(f"[METRICS] Recommendation rules fired: {', '.join(fired)}")

    return sorted(recommendations, key=lambda r: PRIORITY_WEIGHTS[r.priority], reverse=True)


def format_priority(priority: RecommendationPriority) -> tuple[str, str]:
    """Display label and color tag for a priority."""
    if priority == "high":
        return "High", "danger"
    if priority == "medium":
        return "Medium", "warning"
    return "Low", "success"


def format_category(category: RecommendationCategory) -> str:
    labels = {
        "load": "Load",
        "readiness": "Readiness",
        "plan": "Plan",
        "general": "General",
    }
    return labels[category]
