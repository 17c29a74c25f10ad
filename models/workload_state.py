from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

from models.activity import DailyLoadPoint
from models.recommendation import Recommendation

ChronicMethod = Literal["trailing_avg", "ewma"]
RatioBand = Literal["optimal", "low_stimulation", "elevated_risk", "high_load"]


class RatioClassification(BaseModel):
    acute: float = Field(..., ge=0)
    chronic: float = Field(..., ge=0)
    ratio: float = Field(..., ge=0)
    band: RatioBand
    color: Literal["green", "blue", "yellow", "red"]
    label: str


class PlanRealization(BaseModel):
    percent: float = Field(..., ge=0, le=1)
    done_count: int = Field(..., ge=0)
    planned_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)


class ReadinessSummary(BaseModel):
    value: float | None
    status: Literal["green", "yellow", "red"] | None
    label: str | None


class TrendPoint(BaseModel):
    day: dt.date
    value: float


class WorkloadState(BaseModel):
    """Result of one dashboard metrics pass.

    Recomputed from the inputs on every refresh, never persisted.
    """

    # --- Time context ---
    today: dt.date
    week_start: dt.date
    week_end: dt.date
    chronic_method: ChronicMethod

    # --- Load ---
    daily_load: list[DailyLoadPoint] = Field(default_factory=list)
    acute_load_7d: float = Field(..., ge=0)
    chronic_load_28d: float = Field(..., ge=0)
    previous_acute_load_7d: float = Field(..., ge=0)
    acwr: RatioClassification
    acwr_trend: list[TrendPoint] = Field(default_factory=list)

    # --- Plan & readiness ---
    plan: PlanRealization
    readiness: ReadinessSummary

    recommendations: list[Recommendation] = Field(default_factory=list)
