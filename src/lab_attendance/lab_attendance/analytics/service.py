from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..attendance.repository import AttendanceEventRepository
from ..core.constants import DEFAULT_WEEKLY_WINDOW_DAYS
from ..core.exceptions import NotFoundError
from ..occupancy.service import OccupancyService
from .aggregation import daily_occupancy, hourly_check_ins
from .model import CurrentOccupancy, DailyOccupancySample, HourlyCheckInBucket


class AnalyticsService:
    def __init__(
        self,
        attendance: AttendanceEventRepository,
        occupancy: OccupancyService,
        *,
        weekly_window_days: int = DEFAULT_WEEKLY_WINDOW_DAYS,
    ):
        self._attendance = attendance
        self._occupancy = occupancy
        self._weekly_window = timedelta(days=int(weekly_window_days))

    def current_occupancy(self, *, now: Optional[datetime] = None) -> CurrentOccupancy:
        now = now or self._occupancy.now()
        return CurrentOccupancy(users=self._occupancy.present_now(now), as_of=now)

    def weekly_occupancy(self, *, now: Optional[datetime] = None) -> List[DailyOccupancySample]:
        now = now or self._occupancy.now()
        events = self._attendance.list_between(
            start=now - self._weekly_window,
            end=now,
            end_inclusive=True,
            fields=("created_at", "rfid_uid"),
        )
        return daily_occupancy(events, self._occupancy.tz)

    def rush_hours(self, *, now: Optional[datetime] = None) -> List[HourlyCheckInBucket]:
        day = self._occupancy.today(now)
        events = self._occupancy.events_for_day(day)
        return hourly_check_ins(events, self._occupancy.tz, day=day)

    def attendance_log(self, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        events = self._attendance.list_between(start=start, end=end, end_inclusive=True)
        if not events:
            raise NotFoundError("No data found")
        return events
