from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_body, json_error
from ..core.enums import NotificationStatus
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/submit-attendance", methods=["POST"], endpoint="submit_attendance")
    def submit_attendance():
        try:
            result = service.submit(json_body())
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception("Error submitting attendance")
            return json_error("Failed to submit attendance records", 500, str(e))

        failed = [n for n in result.notifications if n.status == NotificationStatus.FAILED]
        for outcome in failed:
            logger.warning(f"Absence email failed: {outcome.to_dict()}")
        return jsonify([r.to_dict() for r in result.records]), 201

    @app.route("/attendance-today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        try:
            records = service.today()
        except Exception as e:
            logger.exception("Error fetching today's attendance")
            return json_error("Failed to fetch today's attendance records", 500, str(e))
        return jsonify([r.to_dict() for r in records])

    @app.route("/available-dates", methods=["GET"], endpoint="available_dates")
    def available_dates():
        try:
            dates = service.available_dates()
        except Exception as e:
            logger.exception("Error fetching available dates")
            return json_error("Failed to fetch available dates", 500, str(e))
        return jsonify(list(dates))

    @app.route("/attendance-records", methods=["GET"], endpoint="attendance_records")
    def attendance_records():
        try:
            records = service.records_for_date(request.args.get("date"))
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception("Error fetching attendance records")
            return json_error("Failed to fetch attendance records for the selected date", 500, str(e))
        return jsonify([r.to_dict(include_student=True) for r in records])
