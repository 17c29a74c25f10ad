from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from models.activity import DailyLoadPoint, ReadinessSample


class DashboardInputs(BaseModel):
    """Everything the data layer hands to one dashboard refresh.

    Activities stay raw session rows here; they are normalized (field aliases,
    extended statuses) before entering the metrics engine.
    """

    activities: list[dict[str, Any]] = Field(default_factory=list)
    history: list[DailyLoadPoint] = Field(default_factory=list)
    readiness: list[ReadinessSample] = Field(default_factory=list)
    today: date
    week_start: date | None = None
    week_end: date | None = None
    chronic_method: str | None = None
