from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceEvent
from ...core.enums import PresenceStatus
from ..model import PresenceRecord
from .base import PresenceTransition


class CheckInTransition(PresenceTransition):
    """Check-in starts a new session; the latest IN wins over an unclosed one."""

    def apply(self, *, current: Optional[PresenceRecord], event: AttendanceEvent) -> Optional[PresenceRecord]:
        return PresenceRecord(
            rfid_uid=event.rfid_uid,
            status=PresenceStatus.PRESENT,
            time_in=event.created_at,
            name=event.name,
        )
