from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import minutes_between, to_iso
from ..occupancy.model import PresenceRecord


@dataclass(frozen=True)
class DailyOccupancySample:
    """Số thẻ khác nhau có ít nhất một sự kiện trong ngày."""

    date: date
    occupancy_count: int

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "occupancy_count": self.occupancy_count}


@dataclass(frozen=True)
class HourlyCheckInBucket:
    """Số lượt check-in (IN) trong một giờ của ngày hôm nay."""

    hour: int
    check_ins: int

    def to_dict(self) -> dict:
        return {"hour": f"{self.hour}:00", "check_ins": self.check_ins}


@dataclass(frozen=True)
class CurrentOccupancy:
    users: list[PresenceRecord]
    as_of: datetime

    @property
    def count(self) -> int:
        return len(self.users)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "users": [
                {
                    "name": r.name,
                    "rfid_uid": r.rfid_uid,
                    "time_in": to_iso(r.time_in),
                    "minutes_in_lab": minutes_between(r.time_in, self.as_of),
                }
                for r in self.users
            ],
        }
