from __future__ import annotations

from datetime import date, tzinfo
from typing import Dict, Iterable, List, Optional

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import local_date
from .factory import PresenceTransitionFactory
from .model import PresenceRecord


class OccupancyResolver:
    """Rebuild who is in the lab from one calendar day of IN/OUT events.

    Events are filtered to `day` (in the lab timezone), sorted by timestamp
    and replayed per tag. Sorting is required for a deterministic result since
    the store does not guarantee order.
    """

    def __init__(self, tz: tzinfo, *, transition_factory: Optional[PresenceTransitionFactory] = None):
        self._tz = tz
        self._factory = transition_factory or PresenceTransitionFactory()

    def replay(self, events: Iterable[AttendanceEvent], *, day: date) -> Dict[str, PresenceRecord]:
        same_day = [e for e in events if local_date(e.created_at, self._tz) == day]
        same_day.sort(key=lambda e: e.created_at)

        states: Dict[str, PresenceRecord] = {}
        for event in same_day:
            transition = self._factory.for_event(event)
            updated = transition.apply(current=states.get(event.rfid_uid), event=event)
            if updated is not None:
                states[event.rfid_uid] = updated
        return states

    def present(self, events: Iterable[AttendanceEvent], *, day: date) -> List[PresenceRecord]:
        states = self.replay(events, day=day)
        present = [r for r in states.values() if r.is_present]
        present.sort(key=lambda r: (r.time_in, r.rfid_uid))
        return present
