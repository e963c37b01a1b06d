from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional

from .analytics.service import AnalyticsService
from .attendance.repository import AttendanceEventRepository
from .attendance.rest_attendance_repository import RestAttendanceRepository
from .checkout.service import CheckoutService
from .common.datetime_utils import load_timezone, now_utc
from .core.constants import (
    DEFAULT_CHECKOUT_MAX_WORKERS,
    DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS,
    DEFAULT_LAB_TIMEZONE,
    DEFAULT_WEEKLY_WINDOW_DAYS,
)
from .occupancy.service import OccupancyService
from .store.connection import StoreConfig, StoreConnection


@dataclass(frozen=True)
class Container:
    lab_timezone: tzinfo
    cron_secret: Optional[str]

    attendance_repo: AttendanceEventRepository

    occupancy_service: OccupancyService
    analytics_service: AnalyticsService
    checkout_service: CheckoutService


def build_container(
    *,
    store_config: Optional[dict] = None,
    lab_timezone: str = DEFAULT_LAB_TIMEZONE,
    cron_secret: Optional[str] = None,
    checkout_max_workers: int = DEFAULT_CHECKOUT_MAX_WORKERS,
    checkout_write_timeout: float = DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS,
    weekly_window_days: int = DEFAULT_WEEKLY_WINDOW_DAYS,
    attendance_repo: Optional[AttendanceEventRepository] = None,
    clock: Callable[[], datetime] = now_utc,
) -> Container:
    if attendance_repo is None:
        if store_config is None:
            raise ValueError("store_config is required when no attendance_repo is given")
        attendance_repo = RestAttendanceRepository(StoreConnection(StoreConfig.from_mapping(store_config)))

    tz = load_timezone(lab_timezone)

    occupancy_service = OccupancyService(attendance_repo, tz=tz, clock=clock)
    analytics_service = AnalyticsService(
        attendance_repo,
        occupancy_service,
        weekly_window_days=weekly_window_days,
    )
    checkout_service = CheckoutService(
        attendance_repo,
        occupancy_service,
        max_workers=checkout_max_workers,
        write_timeout=checkout_write_timeout,
    )

    return Container(
        lab_timezone=tz,
        cron_secret=cron_secret or None,
        attendance_repo=attendance_repo,
        occupancy_service=occupancy_service,
        analytics_service=analytics_service,
        checkout_service=checkout_service,
    )


def build_container_from_settings(settings, **overrides) -> Container:
    """Wire the container from a `config.*` settings module."""

    kwargs = dict(
        store_config=dict(getattr(settings, "STORE_CONFIG")),
        lab_timezone=getattr(settings, "LAB_TIMEZONE", DEFAULT_LAB_TIMEZONE),
        cron_secret=getattr(settings, "CRON_SECRET", None),
        checkout_max_workers=int(getattr(settings, "CHECKOUT_MAX_WORKERS", DEFAULT_CHECKOUT_MAX_WORKERS)),
        checkout_write_timeout=float(
            getattr(settings, "CHECKOUT_WRITE_TIMEOUT_SECONDS", DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS)
        ),
        weekly_window_days=int(getattr(settings, "WEEKLY_WINDOW_DAYS", DEFAULT_WEEKLY_WINDOW_DAYS)),
    )
    kwargs.update(overrides)
    return build_container(**kwargs)
