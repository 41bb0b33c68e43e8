from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            students = service.list_students()
        except Exception as e:
            logger.exception("Error fetching students")
            return json_error("Failed to fetch students", 500, str(e))
        return jsonify([s.to_dict() for s in students])

    @app.route("/add-student", methods=["POST"], endpoint="add_student")
    def add_student():
        try:
            student = service.create_student(json_body())
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception("Error adding student")
            return json_error("Failed to add student", 500, str(e))
        return jsonify(student.to_dict()), 201

    @app.route("/update-student/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        try:
            student = service.update_student(student_id, json_body())
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception(f"Error updating student {student_id}")
            return json_error("Failed to update student", 500, str(e))
        return jsonify(student.to_dict())

    @app.route("/delete-student/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        try:
            student = service.delete_student(student_id)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception as e:
            logger.exception(f"Error deleting student {student_id}")
            return json_error("Failed to delete student", 500, str(e))
        return jsonify({"message": "Student successfully deleted", "deletedStudent": student.to_dict()})
