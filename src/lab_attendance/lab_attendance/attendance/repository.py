from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EventKind
from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    def list_between(
        self,
        *,
        start: datetime,
        end: datetime,
        end_inclusive: bool = False,
        fields: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceEvent]:
        """Events with `start <= created_at < end` (or `<= end`), oldest first."""

        raise NotImplementedError

    def append_event(
        self,
        *,
        rfid_uid: str,
        kind: EventKind,
        created_at: Optional[datetime] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Append one event; the store assigns `created_at` when it is None."""

        raise NotImplementedError
