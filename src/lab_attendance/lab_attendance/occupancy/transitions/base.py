from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceEvent
from ..model import PresenceRecord


class PresenceTransition(ABC):
    """Strategy Pattern: encapsulate how one event changes a tag's presence."""

    @abstractmethod
    def apply(self, *, current: Optional[PresenceRecord], event: AttendanceEvent) -> Optional[PresenceRecord]:
        raise NotImplementedError
