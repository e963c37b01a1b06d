from __future__ import annotations

from datetime import datetime, time, timedelta, tzinfo
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_range_bound(value: str, field_name: str, tz: tzinfo, *, end_of_day: bool = False) -> datetime:
    """Parse a `start_date`/`end_date` query value into an aware datetime.

    A bare `YYYY-MM-DD` maps to local midnight, or to the last microsecond of
    that day when `end_of_day` is set. Naive datetimes are read in `tz`.
    """
    text = require_non_empty(value, field_name)
    try:
        day = parse_iso_date(text)
    except ValueError:
        day = None

    if day is not None:
        if end_of_day:
            return datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz) - timedelta(microseconds=1)
        return datetime.combine(day, time.min, tzinfo=tz)

    candidate = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as e:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD or an ISO-8601 datetime") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def require_date_range(
    start_value: Optional[str],
    end_value: Optional[str],
    tz: tzinfo,
) -> tuple[datetime, datetime]:
    if not start_value or not end_value:
        raise ValidationError("Start date and end date are required")

    start = parse_range_bound(start_value, "start_date", tz)
    end = parse_range_bound(end_value, "end_date", tz, end_of_day=True)
    if start > end:
        raise ValidationError("start_date must not be after end_date")
    return start, end
