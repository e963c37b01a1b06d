from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class CheckoutOutcome:
    """Kết quả ghi sự kiện OUT cho một thẻ."""

    rfid_uid: str
    name: Optional[str]
    succeeded: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "rfid_uid": self.rfid_uid,
            "name": self.name,
            "status": "checked_out" if self.succeeded else "failed",
            "error": self.error,
        }


@dataclass(frozen=True)
class CheckoutReport:
    checked_out_at: datetime
    outcomes: list[CheckoutOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    def to_dict(self) -> dict:
        return {
            "checked_out_at": to_iso(self.checked_out_at),
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "results": [o.to_dict() for o in self.outcomes],
        }
