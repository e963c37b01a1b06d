"""Close every open lab session once.

Meant for an external scheduler, e.g. crontab at 18:00 lab time:

    0 18 * * * cd /srv/lab-attendance && APP_ENV=production python scripts/auto_checkout.py
"""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.lab_attendance.lab_attendance.container import build_container_from_settings
from src.lab_attendance.lab_attendance.core.exceptions import DomainError
from src.lab_attendance.lab_attendance.main import configure_logging


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container_from_settings(settings)
    try:
        report = container.checkout_service.close_open_sessions()
    except DomainError as e:
        print(f"Auto-checkout failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
