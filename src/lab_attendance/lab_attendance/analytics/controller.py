from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.validators import require_date_range
from ..container import Container
from ..core.exceptions import NotFoundError, UpstreamStoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    def _load_log():
        """Validate the range first so a bad request never reaches the store."""

        start, end = require_date_range(
            request.args.get("start_date"),
            request.args.get("end_date"),
            container.lab_timezone,
        )
        return container.analytics_service.attendance_log(start=start, end=end)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify({"message": "Attendance Analytics API working"})

    @app.route("/analytics/current", methods=["GET"], endpoint="analytics_current")
    def analytics_current():
        try:
            data = container.analytics_service.current_occupancy()
        except (UpstreamStoreError, ValidationError) as e:
            return _error(str(e), 500)
        return jsonify(data.to_dict())

    @app.route("/analytics/weekly", methods=["GET"], endpoint="analytics_weekly")
    def analytics_weekly():
        try:
            samples = container.analytics_service.weekly_occupancy()
        except (UpstreamStoreError, ValidationError) as e:
            return _error(str(e), 500)
        return jsonify([s.to_dict() for s in samples])

    @app.route("/analytics/rush-hours", methods=["GET"], endpoint="analytics_rush_hours")
    def analytics_rush_hours():
        try:
            buckets = container.analytics_service.rush_hours()
        except (UpstreamStoreError, ValidationError) as e:
            return _error(str(e), 500)
        return jsonify([b.to_dict() for b in buckets])

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        try:
            events = _load_log()
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except UpstreamStoreError as e:
            logger.error("attendance log fetch failed: %s", e)
            return _error(str(e), 500)
        return jsonify([e.to_dict() for e in events]), 200

    @app.route("/api/attendance.csv", methods=["GET"], endpoint="api_attendance_csv")
    def api_attendance_csv():
        try:
            events = _load_log()
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except UpstreamStoreError as e:
            logger.error("attendance export failed: %s", e)
            return _error(str(e), 500)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["id", "rfid_uid", "name", "check", "created_at"])
        writer.writeheader()
        for event in events:
            writer.writerow(event.to_csv_row())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_{request.args['start_date'][:10]}_{request.args['end_date'][:10]}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
