from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from src.lab_attendance.lab_attendance.common.validators import require_date_range
from src.lab_attendance.lab_attendance.core.exceptions import ValidationError

LAB_TZ = ZoneInfo("Asia/Kolkata")


def test_bare_dates_cover_whole_days():
    start, end = require_date_range("2026-03-01", "2026-03-02", LAB_TZ)

    assert start == datetime(2026, 3, 1, tzinfo=LAB_TZ)
    assert end == datetime(2026, 3, 2, 23, 59, 59, 999999, tzinfo=LAB_TZ)


def test_iso_datetimes_keep_their_offset():
    start, end = require_date_range("2026-03-01T03:00:00Z", "2026-03-01T10:00:00+05:30", LAB_TZ)

    assert start == datetime(2026, 3, 1, 3, 0, tzinfo=timezone.utc)
    assert end == datetime(2026, 3, 1, 4, 30, tzinfo=timezone.utc)


def test_naive_datetime_is_read_in_lab_timezone():
    start, _ = require_date_range("2026-03-01T09:00:00", "2026-03-01", LAB_TZ)

    assert start == datetime(2026, 3, 1, 9, 0, tzinfo=LAB_TZ)


@pytest.mark.parametrize(
    "start,end",
    [
        (None, "2026-03-01"),
        ("2026-03-01", None),
        ("", ""),
        ("2026-03-05", "2026-03-01"),
        ("yesterday", "2026-03-01"),
    ],
)
def test_invalid_ranges_are_rejected(start, end):
    with pytest.raises(ValidationError):
        require_date_range(start, end, LAB_TZ)
