"""Example: use the service layer directly (no Flask).

Controllers stay thin; the occupancy and aggregation logic lives in services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.lab_attendance.lab_attendance.container import build_container_from_settings


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    print(container.analytics_service.current_occupancy().to_dict())
    print([s.to_dict() for s in container.analytics_service.weekly_occupancy()])
    print([b.to_dict() for b in container.analytics_service.rush_hours()])


if __name__ == "__main__":
    main()
