from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Callable, List, Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..attendance.repository import AttendanceEventRepository
from ..common.datetime_utils import day_bounds, local_date, now_utc
from .model import PresenceRecord
from .resolver import OccupancyResolver


class OccupancyService:
    """Reads one lab day from the store and resolves who is still inside."""

    def __init__(
        self,
        attendance: AttendanceEventRepository,
        *,
        tz: tzinfo,
        resolver: Optional[OccupancyResolver] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._attendance = attendance
        self._tz = tz
        self._resolver = resolver or OccupancyResolver(tz)
        self._clock = clock

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return self._clock()

    def today(self, now: Optional[datetime] = None) -> date:
        return local_date(now or self._clock(), self._tz)

    def events_for_day(self, day: date) -> Sequence[AttendanceEvent]:
        start, end = day_bounds(day, self._tz)
        return self._attendance.list_between(start=start, end=end)

    def present_on(self, day: date) -> List[PresenceRecord]:
        return self._resolver.present(self.events_for_day(day), day=day)

    def present_now(self, now: Optional[datetime] = None) -> List[PresenceRecord]:
        return self.present_on(self.today(now))
