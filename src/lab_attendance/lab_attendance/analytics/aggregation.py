"""Grouped statistics over attendance event windows.

Both functions are pure: callers fetch the window, these only count.
"""
from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date, tzinfo
from typing import Iterable, List, Optional

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import local_date
from ..core.enums import EventKind
from .model import DailyOccupancySample, HourlyCheckInBucket


def daily_occupancy(events: Iterable[AttendanceEvent], tz: tzinfo) -> List[DailyOccupancySample]:
    """Distinct tags seen per local calendar date, any event kind.

    Dates without events are left out rather than zero-filled.
    """
    tags_by_date: dict[date, set[str]] = defaultdict(set)
    for event in events:
        tags_by_date[local_date(event.created_at, tz)].add(event.rfid_uid)

    return [
        DailyOccupancySample(date=day, occupancy_count=len(tags))
        for day, tags in sorted(tags_by_date.items())
    ]


def hourly_check_ins(
    events: Iterable[AttendanceEvent],
    tz: tzinfo,
    *,
    day: Optional[date] = None,
) -> List[HourlyCheckInBucket]:
    """Check-ins per local hour, busiest first; ties go to the earlier hour."""
    counts: Counter[int] = Counter()
    for event in events:
        if event.kind != EventKind.IN:
            continue
        local = event.created_at.astimezone(tz)
        if day is not None and local.date() != day:
            continue
        counts[local.hour] += 1

    buckets = [HourlyCheckInBucket(hour=h, check_ins=n) for h, n in counts.items()]
    buckets.sort(key=lambda b: (-b.check_ins, b.hour))
    return buckets
