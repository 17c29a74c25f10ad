"""Session data-entry validation.

Validation runs at the boundary where sessions are created or edited, before
anything is written. It collects every problem into a list of human-readable
messages instead of stopping at the first one.
"""

from collections.abc import Mapping
from typing import Any

from dashboard.activities.types import get_activity_type_config

RATING_MIN = 1
RATING_MAX = 10


class SessionValidationError(ValueError):
    """Raised when session data fails validation.

    Attributes:
        details: List of validation messages
    """

    def __init__(self, details: list[str]):
        self.details = details
        super().__init__(", ".join(details))


def validate_session(session: Mapping[str, Any]) -> list[str]:
    """Validate required session fields.

    Enforces:
    - type is present and a known activity category
    - date is present
    - start_time is present
    - duration_min is present and greater than 0

    Args:
        session: Partial session fields

    Returns:
        List of validation messages (empty when valid)
    """
    errors: list[str] = []

    session_type = session.get("type")
    if not session_type:
        errors.append("Session type is required")
    elif not isinstance(session_type, str) or get_activity_type_config(session_type) is None:
        errors.append(f"Unknown session type: {session_type}")
    if not session.get("date"):
        errors.append("Date is required")
    if not session.get("start_time"):
        errors.append("Start time is required")

    duration = session.get("duration_min")
    if not isinstance(duration, (int, float)) or duration <= 0:
        errors.append("Duration must be greater than 0")

    return errors


def validate_rating(intensity: float, difficulty: float, satisfaction: float) -> list[str]:
    """Validate post-session ratings, each a number on the 1-10 scale."""
    errors: list[str] = []

    for name, value in (("Intensity", intensity), ("Difficulty", difficulty), ("Satisfaction", satisfaction)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{name} must be a number")
        elif not RATING_MIN <= value <= RATING_MAX:
            errors.append(f"{name} must be in range {RATING_MIN}-{RATING_MAX}")

    return errors


def ensure_valid_session(session: Mapping[str, Any]) -> None:
    """Validate session fields.

    Raises:
        SessionValidationError: If any field is invalid
    """
    errors = validate_session(session)
    if errors:
        raise SessionValidationError(errors)


def calculate_end_time(start_time: str, duration_min: int) -> str:
    """End time (HH:mm) of a session starting at start_time, wrapping past midnight."""
    hours, minutes = (int(part) for part in start_time.split(":")[:2])
    total_minutes = hours * 60 + minutes + duration_min
    return f"{(total_minutes // 60) % 24:02d}:{total_minutes % 60:02d}"
