from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_error
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        try:
            count = container.student_service.count()
        except Exception as e:
            logger.exception("Database health check failed")
            return json_error("Database unavailable", 500, str(e))
        return jsonify({"status": "success", "students": count})
