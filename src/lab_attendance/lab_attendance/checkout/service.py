from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Optional

from ..attendance.repository import AttendanceEventRepository
from ..core.constants import DEFAULT_CHECKOUT_MAX_WORKERS, DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS
from ..core.enums import EventKind
from ..core.exceptions import DomainError
from ..occupancy.model import PresenceRecord
from ..occupancy.service import OccupancyService
from .model import CheckoutOutcome, CheckoutReport

logger = logging.getLogger(__name__)


class CheckoutService:
    """Close every open session of the day with a synthetic OUT event.

    Writes are independent and fanned out over a bounded thread pool. One
    failed write is reported for its tag and never stops the others.
    """

    def __init__(
        self,
        attendance: AttendanceEventRepository,
        occupancy: OccupancyService,
        *,
        max_workers: int = DEFAULT_CHECKOUT_MAX_WORKERS,
        write_timeout: float = DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS,
    ):
        self._attendance = attendance
        self._occupancy = occupancy
        self._max_workers = max(1, int(max_workers))
        self._write_timeout = float(write_timeout)

    def close_open_sessions(self, *, now: Optional[datetime] = None) -> CheckoutReport:
        now = now or self._occupancy.now()
        present = self._occupancy.present_now(now)
        if not present:
            logger.info("checkout: nobody present at %s", now.isoformat())
            return CheckoutReport(checked_out_at=now)

        workers = min(self._max_workers, len(present))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="checkout") as pool:
            futures = [pool.submit(self._checkout_one, record, now) for record in present]
            outcomes = [f.result() for f in futures]

        report = CheckoutReport(checked_out_at=now, outcomes=outcomes)
        logger.info(
            "checkout: %d attempted, %d succeeded, %d failed",
            report.attempted,
            report.succeeded,
            report.failed,
        )
        return report

    def _checkout_one(self, record: PresenceRecord, now: datetime) -> CheckoutOutcome:
        try:
            self._attendance.append_event(
                rfid_uid=record.rfid_uid,
                kind=EventKind.OUT,
                created_at=now,
                timeout=self._write_timeout,
            )
        except DomainError as e:
            logger.warning("checkout failed for %s: %s", record.rfid_uid, e)
            return CheckoutOutcome(rfid_uid=record.rfid_uid, name=record.name, succeeded=False, error=str(e))
        except Exception as e:
            logger.exception("unexpected checkout failure for %s", record.rfid_uid)
            return CheckoutOutcome(rfid_uid=record.rfid_uid, name=record.name, succeeded=False, error=str(e))
        return CheckoutOutcome(rfid_uid=record.rfid_uid, name=record.name, succeeded=True)
