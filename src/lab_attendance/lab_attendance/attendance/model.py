from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp, to_iso
from ..core.enums import EventKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần quẹt thẻ RFID vào/ra phòng lab."""

    rfid_uid: str
    kind: EventKind
    created_at: datetime
    name: Optional[str] = None
    event_id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceEvent":
        """Parse one store row (`attendance` joined with `users(name)`)."""

        rfid_uid = row.get("rfid_uid")
        if not isinstance(rfid_uid, str) or not rfid_uid.strip():
            raise ValidationError(f"attendance row without rfid_uid: {dict(row)!r}")

        check = row.get("Check")
        try:
            kind = EventKind(str(check).strip().upper())
        except ValueError as e:
            raise ValidationError(f"attendance row {rfid_uid!r} has invalid Check value {check!r}") from e

        created_raw = row.get("created_at")
        if not isinstance(created_raw, str):
            raise ValidationError(f"attendance row {rfid_uid!r} has no created_at")
        try:
            created_at = parse_timestamp(created_raw)
        except ValueError as e:
            raise ValidationError(f"attendance row {rfid_uid!r} has invalid created_at {created_raw!r}") from e

        user = row.get("users")
        name = user.get("name") if isinstance(user, Mapping) else None

        raw_id = row.get("id")
        return cls(
            rfid_uid=rfid_uid.strip(),
            kind=kind,
            created_at=created_at,
            name=str(name) if name is not None else None,
            event_id=int(raw_id) if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None,
        )

    def to_dict(self) -> dict:
        """Same shape as the store row, so clients of the raw table keep working."""

        return {
            "id": self.event_id,
            "rfid_uid": self.rfid_uid,
            "Check": self.kind.value,
            "created_at": to_iso(self.created_at),
            "users": {"name": self.name} if self.name is not None else None,
        }

    def to_csv_row(self) -> dict:
        return {
            "id": self.event_id,
            "rfid_uid": self.rfid_uid,
            "name": self.name or "",
            "check": self.kind.value,
            "created_at": to_iso(self.created_at),
        }
