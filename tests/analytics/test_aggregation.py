from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.lab_attendance.lab_attendance.analytics.aggregation import daily_occupancy, hourly_check_ins
from src.lab_attendance.lab_attendance.attendance.model import AttendanceEvent
from src.lab_attendance.lab_attendance.core.enums import EventKind

LAB_TZ = ZoneInfo("Asia/Kolkata")


def ev(tag: str, kind: EventKind, y: int, m: int, d: int, hour: int, minute: int = 0) -> AttendanceEvent:
    return AttendanceEvent(
        rfid_uid=tag,
        kind=kind,
        created_at=datetime(y, m, d, hour, minute, tzinfo=LAB_TZ),
    )


def test_weekly_counts_distinct_tags_per_date():
    events = [
        ev("A", EventKind.IN, 2026, 3, 3, 9),
        ev("A", EventKind.OUT, 2026, 3, 3, 12),
        ev("B", EventKind.IN, 2026, 3, 3, 10),
        ev("C", EventKind.OUT, 2026, 3, 5, 16),
        ev("A", EventKind.IN, 2026, 3, 7, 9),
        ev("B", EventKind.IN, 2026, 3, 7, 9),
        ev("C", EventKind.IN, 2026, 3, 7, 11),
        ev("C", EventKind.IN, 2026, 3, 7, 14),
    ]

    samples = daily_occupancy(list(reversed(events)), LAB_TZ)

    assert [(s.date, s.occupancy_count) for s in samples] == [
        (date(2026, 3, 3), 2),
        (date(2026, 3, 5), 1),
        (date(2026, 3, 7), 3),
    ]


def test_weekly_is_sparse():
    assert daily_occupancy([], LAB_TZ) == []
    samples = daily_occupancy([ev("A", EventKind.IN, 2026, 3, 3, 9)], LAB_TZ)
    assert [s.date for s in samples] == [date(2026, 3, 3)]


def test_weekly_groups_by_lab_date_not_utc_date():
    # 19:00 UTC on the 3rd is already the 4th in the lab.
    event = AttendanceEvent(
        rfid_uid="A",
        kind=EventKind.IN,
        created_at=datetime(2026, 3, 3, 19, 0, tzinfo=timezone.utc),
    )

    assert daily_occupancy([event], LAB_TZ)[0].date == date(2026, 3, 4)


def test_sample_serializes_like_api():
    sample = daily_occupancy([ev("A", EventKind.IN, 2026, 3, 3, 9)], LAB_TZ)[0]

    assert sample.to_dict() == {"date": "2026-03-03", "occupancy_count": 1}


def test_rush_hours_sorted_by_volume_with_hour_tiebreak():
    events = (
        [ev(f"n{i}", EventKind.IN, 2026, 3, 10, 14, i) for i in range(3)]
        + [ev("x", EventKind.IN, 2026, 3, 10, 10, 5)]
        + [ev(f"m{i}", EventKind.IN, 2026, 3, 10, 9, i) for i in range(3)]
    )

    buckets = hourly_check_ins(events, LAB_TZ)

    assert [(b.hour, b.check_ins) for b in buckets] == [(9, 3), (14, 3), (10, 1)]
    assert buckets[0].to_dict() == {"hour": "9:00", "check_ins": 3}


def test_rush_hours_count_only_check_ins():
    events = [
        ev("A", EventKind.IN, 2026, 3, 10, 9),
        ev("A", EventKind.OUT, 2026, 3, 10, 17),
        ev("B", EventKind.OUT, 2026, 3, 10, 17),
    ]

    buckets = hourly_check_ins(events, LAB_TZ)

    assert [(b.hour, b.check_ins) for b in buckets] == [(9, 1)]


def test_rush_hours_can_be_limited_to_one_day():
    events = [
        ev("A", EventKind.IN, 2026, 3, 9, 9),
        ev("B", EventKind.IN, 2026, 3, 10, 11),
    ]

    buckets = hourly_check_ins(events, LAB_TZ, day=date(2026, 3, 10))

    assert [(b.hour, b.check_ins) for b in buckets] == [(11, 1)]
