from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

ActivityCategory = Literal[
    "training",
    "match",
    "sparring",
    "americano",
    "tournament",
    "gym",
    "individual_training",
    "group_training",
    "league_match",
    "recovery",
    "mobility",
    "watch_match",
    "machine_training",
]

ActivityStatus = Literal["planned", "done", "canceled"]


class ActivityRecord(BaseModel):
    """Single scheduled or completed activity.

    Load is rating x duration_min, counted only once the activity is done
    and rated.
    """

    activity_id: str
    day: date
    category: ActivityCategory
    duration_min: int = Field(..., ge=0)
    rating: float | None = Field(default=None, ge=0, le=10)
    status: ActivityStatus = "planned"


class DailyLoadPoint(BaseModel):
    day: date
    load: float = Field(..., ge=0)


class ReadinessSample(BaseModel):
    day: date
    value: float = Field(..., ge=0, le=10)
