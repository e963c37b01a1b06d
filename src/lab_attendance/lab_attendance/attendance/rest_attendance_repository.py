from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.constants import ATTENDANCE_SELECT
from ..core.enums import EventKind
from ..store.connection import StoreConnection
from ..store.rest_base import json_rows, store_call
from .model import AttendanceEvent
from .repository import AttendanceEventRepository

logger = logging.getLogger(__name__)

# Columns AttendanceEvent.from_row cannot do without.
REQUIRED_FIELDS = ("rfid_uid", "Check", "created_at")


class RestAttendanceRepository(AttendanceEventRepository):
    def __init__(self, conn: StoreConnection):
        self._conn = conn

    def list_between(
        self,
        *,
        start: datetime,
        end: datetime,
        end_inclusive: bool = False,
        fields: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceEvent]:
        select = ATTENDANCE_SELECT
        if fields:
            columns = list(dict.fromkeys([*REQUIRED_FIELDS, *fields]))
            select = ",".join(columns)

        params = [
            ("select", select),
            ("created_at", f"gte.{to_iso(start)}"),
            ("created_at", f"{'lte' if end_inclusive else 'lt'}.{to_iso(end)}"),
            ("order", "created_at.asc"),
        ]
        logger.debug("fetching attendance %s -> %s (select=%s)", start, end, select)

        with store_call("fetch attendance"):
            response = self._conn.request("GET", params=params)
            rows = json_rows(response)
        return [AttendanceEvent.from_row(r) for r in rows]

    def append_event(
        self,
        *,
        rfid_uid: str,
        kind: EventKind,
        created_at: Optional[datetime] = None,
        timeout: Optional[float] = None,
    ) -> None:
        payload = {"rfid_uid": rfid_uid, "Check": kind.value}
        if created_at is not None:
            payload["created_at"] = to_iso(created_at)

        with store_call(f"write {kind.value} for {rfid_uid}"):
            response = self._conn.request(
                "POST",
                json=payload,
                extra_headers={"Prefer": "return=minimal"},
                timeout=timeout,
            )
            response.raise_for_status()
