from __future__ import annotations

from datetime import date, time
from typing import Any

from ..core.constants import MAX_RATING, MIN_RATING
from ..core.exceptions import BadRequestError
from .datetime_utils import parse_hhmm, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise BadRequestError(f"{field_name} must not be empty")
    return str(value).strip()


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise BadRequestError(f"{field_name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise BadRequestError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequestError(f"{field_name} must be an integer")


def require_rating(value: Any) -> int:
    rating = require_int(value, "rating")
    if rating < MIN_RATING or rating > MAX_RATING:
        raise BadRequestError(f"rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


def require_time(value: Any, field_name: str) -> time:
    try:
        return parse_hhmm(str(value))
    except (TypeError, ValueError):
        raise BadRequestError(f"{field_name} must be in HH:mm format")


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except (TypeError, ValueError):
        raise BadRequestError(f"{field_name} must be a YYYY-MM-DD date")


def require_enum(enum_cls, value: Any, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise BadRequestError(f"{field_name} is not valid")
