from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PresenceStatus


@dataclass(frozen=True)
class PresenceRecord:
    """Read-model: trạng thái hiện diện của một thẻ trong ngày (không lưu DB)."""

    rfid_uid: str
    status: PresenceStatus
    time_in: datetime
    name: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return self.status == PresenceStatus.PRESENT
