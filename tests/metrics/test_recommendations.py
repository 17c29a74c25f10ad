"""Tests for the recommendation rule table.

Tests cover:
- Short-circuit rules (no data, no training base)
- Each load, readiness, growth and plan rule in isolation
- Fallback when nothing fires
- Priority ordering with stable ties
"""

import pytest

from dashboard.metrics.recommendations import (
    RULES,
    format_category,
    format_priority,
    generate_recommendations,
)
from models.recommendation import RecommendationInputs


def make_inputs(**overrides) -> RecommendationInputs:
    """Inputs that fire no rule unless overridden."""
    values = {
        "ratio": 1.0,
        "chronic": 100.0,
        "acute": 700.0,
        "readiness": 8.0,
        "plan_percent": 0.7,
        "has_data": True,
        "previous_acute": None,
    }
    values.update(overrides)
    return RecommendationInputs(**values)


def categories(recommendations) -> list[tuple[str, str]]:
    return [(r.category, r.priority) for r in recommendations]


# ============================================================================
# SHORT-CIRCUIT RULES
# ============================================================================


def test_no_data_returns_single_general_recommendation():
    result = generate_recommendations(make_inputs(has_data=False, ratio=2.0, readiness=1.0, plan_percent=0.0, chronic=0))

    assert len(result) == 1
    assert categories(result) == [("general", "low")]


def test_zero_chronic_returns_single_high_load_recommendation():
    result = generate_recommendations(make_inputs(chronic=0, ratio=3.0, readiness=2.0, plan_percent=0.1))

    assert len(result) == 1
    assert categories(result) == [("load", "high")]
    assert "C=0" in result[0].text


# ============================================================================
# LOAD RULES
# ============================================================================


def test_high_load():
    result = generate_recommendations(make_inputs(ratio=1.6))

    assert categories(result) == [("load", "high")]


@pytest.mark.parametrize("ratio", [1.3, 1.4, 1.5])
def test_elevated_risk_inclusive_bounds(ratio):
    result = generate_recommendations(make_inputs(ratio=ratio))

    assert categories(result) == [("load", "medium")]


@pytest.mark.parametrize(("chronic", "priority"), [(40.0, "medium"), (50.0, "low"), (120.0, "low")])
def test_low_stimulation_priority_depends_on_chronic(chronic, priority):
    result = generate_recommendations(make_inputs(ratio=0.5, chronic=chronic))

    assert categories(result) == [("load", priority)]


def test_load_growth_warning_names_rounded_percentage():
    result = generate_recommendations(make_inputs(acute=1406, previous_acute=1000))

    assert categories(result) == [("load", "medium")]
    assert "41%" in result[0].text


@pytest.mark.parametrize("previous_acute", [None, 0.0, 1000.0])
def test_no_growth_warning(previous_acute):
    result = generate_recommendations(make_inputs(acute=1250, previous_acute=previous_acute))

    assert categories(result) == [("general", "low")]


# ============================================================================
# READINESS RULES
# ============================================================================


@pytest.mark.parametrize(
    ("readiness", "priority"),
    [(0.0, "high"), (3.9, "high"), (4.0, "medium"), (6.9, "medium")],
)
def test_readiness_rules(readiness, priority):
    result = generate_recommendations(make_inputs(readiness=readiness))

    assert categories(result) == [("readiness", priority)]


def test_unknown_readiness_fires_no_readiness_rule():
    result = generate_recommendations(make_inputs(readiness=None))

    assert categories(result) == [("general", "low")]


# ============================================================================
# PLAN RULES
# ============================================================================


def test_low_plan_realization():
    assert categories(generate_recommendations(make_inputs(plan_percent=0.49))) == [("plan", "medium")]


def test_high_plan_realization():
    assert categories(generate_recommendations(make_inputs(plan_percent=0.95))) == [("plan", "low")]


@pytest.mark.parametrize("plan_percent", [0.5, 0.9])
def test_plan_boundaries_fire_nothing(plan_percent):
    assert categories(generate_recommendations(make_inputs(plan_percent=plan_percent))) == [("general", "low")]


# ============================================================================
# FALLBACK & ORDERING
# ============================================================================


def test_fallback_when_all_metrics_in_range():
    result = generate_recommendations(make_inputs())

    assert len(result) == 1
    assert result[0].category == "general"
    assert result[0].priority == "low"


def test_multiple_rules_sorted_by_priority():
    result = generate_recommendations(make_inputs(ratio=1.6, readiness=3.0, plan_percent=0.3))

    assert categories(result) == [
        ("load", "high"),
        ("readiness", "high"),
        ("plan", "medium"),
    ]


def test_equal_priorities_keep_rule_order():
    result = generate_recommendations(make_inputs(ratio=0.5, chronic=60.0, readiness=5.0, plan_percent=0.95))

    assert categories(result) == [
        ("readiness", "medium"),
        ("load", "low"),
        ("plan", "low"),
    ]


def test_single_rule_table():
    high_load_rule = next(rule for rule in RULES if rule.name == "high_load")

    assert categories(generate_recommendations(make_inputs(ratio=2.0), rules=(high_load_rule,))) == [("load", "high")]
    assert categories(generate_recommendations(make_inputs(ratio=1.0), rules=(high_load_rule,))) == [("general", "low")]


def test_display_helpers():
    assert format_priority("high") == ("High", "danger")
    assert format_priority("medium") == ("Medium", "warning")
    assert format_priority("low") == ("Low", "success")
    assert format_category("readiness") == "Readiness"
