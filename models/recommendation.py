from typing import Literal

from pydantic import BaseModel, Field

RecommendationPriority = Literal["high", "medium", "low"]
RecommendationCategory = Literal["load", "readiness", "plan", "general"]


class Recommendation(BaseModel):
    text: str
    priority: RecommendationPriority
    category: RecommendationCategory


class RecommendationInputs(BaseModel):
    """Metric values the recommendation rules inspect.

    Attributes:
        ratio: Acute:chronic workload ratio
        chronic: Chronic (28-day) baseline
        acute: Acute (7-day) load sum
        readiness: Averaged recent readiness, None when no samples exist
        plan_percent: Plan realization fraction (0-1)
        has_data: Whether any daily load data exists at all
        previous_acute: Acute sum of the previous period, if known
    """

    ratio: float
    chronic: float
    acute: float
    readiness: float | None = None
    plan_percent: float = Field(default=0.0, ge=0, le=1)
    has_data: bool = True
    previous_acute: float | None = None
