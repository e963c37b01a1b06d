from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Loại sự kiện quẹt thẻ, lưu ở cột `Check` của bảng attendance."""

    IN = "IN"
    OUT = "OUT"


class PresenceStatus(str, Enum):
    """Trạng thái hiện diện suy ra từ nhật ký sự kiện trong ngày."""

    PRESENT = "PRESENT"
    DEPARTED = "DEPARTED"
