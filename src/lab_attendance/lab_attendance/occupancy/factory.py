from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceEvent
from ..core.enums import EventKind
from .transitions.base import PresenceTransition
from .transitions.check_in import CheckInTransition
from .transitions.check_out import CheckOutTransition


@dataclass
class PresenceTransitionFactory:
    """Factory Pattern: choose the transition for an event kind."""

    def for_event(self, event: AttendanceEvent) -> PresenceTransition:
        if event.kind == EventKind.IN:
            return CheckInTransition()
        return CheckOutTransition()
