from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_body, json_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.result_service

    @app.route("/add-result", methods=["POST"], endpoint="add_result")
    def add_result():
        try:
            result = service.add_result(json_body())
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception("Error adding result")
            return json_error("Failed to add result", 500, str(e))
        return jsonify(result.to_dict()), 201

    @app.route("/results", methods=["GET"], endpoint="list_results")
    def list_results():
        try:
            summaries = service.list_summaries()
        except Exception as e:
            logger.exception("Error fetching results")
            return json_error("Failed to fetch results", 500, str(e))
        return jsonify([s.to_dict() for s in summaries])

    @app.route("/result-individual", methods=["GET"], endpoint="result_individual")
    def result_individual():
        try:
            result = service.get_by_rrn(request.args.get("rrn"))
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception as e:
            logger.exception("Error fetching result")
            return json_error("Failed to fetch result", 500, str(e))
        return jsonify(result.to_dict())
