from __future__ import annotations

from typing import Optional

from flask import jsonify, request


def json_error(message: str, status: int, error: Optional[str] = None):
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return jsonify(body), status


def json_body():
    """Request JSON body, or None when it is missing or not valid JSON."""
    return request.get_json(silent=True)
