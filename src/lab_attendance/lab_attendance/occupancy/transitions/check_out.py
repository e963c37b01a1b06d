from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ...attendance.model import AttendanceEvent
from ...core.enums import PresenceStatus
from ..model import PresenceRecord
from .base import PresenceTransition


class CheckOutTransition(PresenceTransition):
    """Check-out closes an open session; a stray OUT leaves the state untouched."""

    def apply(self, *, current: Optional[PresenceRecord], event: AttendanceEvent) -> Optional[PresenceRecord]:
        if current is None or not current.is_present:
            return current
        return replace(current, status=PresenceStatus.DEPARTED)
