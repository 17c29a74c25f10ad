"""Activity type catalog and lifecycle status helpers.

Every activity category carries a small config record telling the metrics
engine whether it bears training load and whether it counts toward plan
realization. The calendar works with a richer lifecycle than the metrics
engine, so extended statuses are folded into planned/done/canceled before
any metric is computed.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from models.activity import ActivityCategory, ActivityStatus

ExtendedStatus = Literal[
    "scheduled",
    "pending_approval",
    "confirmed",
    "in_progress",
    "completed",
    "cancelled",
]


@dataclass(frozen=True)
class ActivityTypeConfig:
    """Static configuration for one activity category.

    Attributes:
        category: Category identifier
        label: Display label
        group: Coarse grouping (training, competition, recovery, other)
        load_bearing: Whether completed activities contribute training load
        plan_countable: Whether the category enters plan realization
        default_duration_min: Default duration offered when scheduling
        requires_trainer_approval: Whether new activities await trainer approval
    """

    category: ActivityCategory
    label: str
    group: Literal["training", "competition", "recovery", "other"]
    load_bearing: bool
    plan_countable: bool
    default_duration_min: int
    requires_trainer_approval: bool = False


# Plan realization only counts scheduled training and match sessions. Gym,
# sparring, recovery, mobility, americano and tournament entries are logged
# ad hoc and stay out of the done/planned ratio even though they bear load.
ACTIVITY_TYPES: dict[str, ActivityTypeConfig] = {
    # Simplified model
    "training": ActivityTypeConfig("training", "Training", "training", True, True, 90),
    "match": ActivityTypeConfig("match", "Match", "competition", True, True, 120),
    "sparring": ActivityTypeConfig("sparring", "Sparring", "training", True, False, 120),
    "americano": ActivityTypeConfig("americano", "Americano", "competition", True, False, 180),
    "tournament": ActivityTypeConfig("tournament", "Tournament", "competition", True, False, 240),
    "gym": ActivityTypeConfig("gym", "Gym", "training", True, False, 60),
    # Extended model
    "individual_training": ActivityTypeConfig(
        "individual_training", "Individual training (coach)", "training", True, True, 90, requires_trainer_approval=True
    ),
    "group_training": ActivityTypeConfig(
        "group_training", "Group training (coach)", "training", True, True, 90, requires_trainer_approval=True
    ),
    "league_match": ActivityTypeConfig("league_match", "League match", "competition", True, True, 120),
    "machine_training": ActivityTypeConfig("machine_training", "Machine training", "training", True, True, 90),
    "recovery": ActivityTypeConfig("recovery", "Recovery", "recovery", True, False, 60),
    "mobility": ActivityTypeConfig("mobility", "Mobility", "recovery", True, False, 45),
    "watch_match": ActivityTypeConfig("watch_match", "Watching a match", "other", False, False, 120),
}


def get_activity_type_config(category: str) -> ActivityTypeConfig | None:
    """Get the catalog entry for a category, or None if unknown."""
    return ACTIVITY_TYPES.get(category)


def is_load_bearing(category: str) -> bool:
    config = get_activity_type_config(category)
    return config is not None and config.load_bearing


def is_plan_countable(category: str) -> bool:
    config = get_activity_type_config(category)
    return config is not None and config.plan_countable


def canonical_status(status: str) -> ActivityStatus:
    """Fold a calendar lifecycle status into the metrics status set.

    Args:
        status: Canonical (planned, done, canceled) or extended calendar status

    Returns:
        "done" for completed activities, "canceled" for cancelled ones,
        "planned" for everything still ahead or in progress
    """
    if status in {"done", "completed"}:
        return "done"
    if status in {"canceled", "cancelled"}:
        return "canceled"
    return "planned"


def initial_status(category: str) -> ExtendedStatus:
    """Status a newly scheduled activity starts in."""
    config = get_activity_type_config(category)
    if config is not None and config.requires_trainer_approval:
        return "pending_approval"
    return "scheduled"


def auto_status(status: ExtendedStatus, starts_at: datetime, now: datetime) -> ExtendedStatus:
    """Promote a same-day activity whose start time has passed to in_progress.

    Completed and cancelled activities are never overridden.
    """
    if status in {"completed", "cancelled"}:
        return status
    if starts_at < now and starts_at.date() == now.date():
        return "in_progress"
    return status