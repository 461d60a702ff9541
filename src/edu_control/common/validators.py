from __future__ import annotations

from typing import Optional

from ..core.constants import COURSES, MAX_SCORE, MIN_SCORE
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_course(value) -> int:
    try:
        course = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Course must be a number from 1 to 4")
    if course not in COURSES:
        raise ValidationError("Course must be a number from 1 to 4")
    return course


def clamp_score(value) -> int:
    """Coerce raw input to an integer score inside [0, 100].

    Non-numeric input becomes 0, like an empty score field.
    """
    try:
        score = int(float(value))
    except (TypeError, ValueError, OverflowError):
        score = 0
    return max(MIN_SCORE, min(MAX_SCORE, score))
