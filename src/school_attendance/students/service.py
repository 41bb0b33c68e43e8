from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_email, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

# Older clients send the guardian address under this key.
LEGACY_GUARDIAN_KEY = "GuardianGmail"


def _guardian_value(payload: Mapping[str, Any]) -> tuple[bool, Any]:
    if "guardianEmail" in payload:
        return True, payload["guardianEmail"]
    if LEGACY_GUARDIAN_KEY in payload:
        return True, payload[LEGACY_GUARDIAN_KEY]
    return False, None


def _parse_id(student_id: Any) -> int:
    try:
        value = int(str(student_id))
    except (TypeError, ValueError):
        raise NotFoundError("Student not found") from None
    if value <= 0:
        raise NotFoundError("Student not found")
    return value


class StudentService:
    """Use case: manage student records."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def find_by_rrn(self, rrn: str) -> Optional[Student]:
        return self._students.get_by_rrn(rrn)

    def create_student(self, payload: Mapping[str, Any]) -> Student:
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        name = require_non_empty(payload.get("name"), "name")
        rrn = require_non_empty(payload.get("rrn"), "rrn")
        _, raw_email = _guardian_value(payload)
        guardian_email = optional_email(raw_email, "guardianEmail")

        student_id = self._students.create(name=name, rrn=rrn, guardian_email=guardian_email)
        logger.info(f"Student {student_id} created (rrn={rrn})")
        return Student(student_id=student_id, name=name, rrn=rrn, guardian_email=guardian_email)

    def update_student(self, student_id: Any, payload: Mapping[str, Any]) -> Student:
        """Replace only the fields present in payload."""
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        existing = self._students.get_by_id(_parse_id(student_id))
        if not existing:
            raise NotFoundError("Student not found")

        changes: dict[str, Any] = {}
        if "name" in payload:
            changes["name"] = require_non_empty(payload["name"], "name")
        if "rrn" in payload:
            changes["rrn"] = require_non_empty(payload["rrn"], "rrn")
        has_email, raw_email = _guardian_value(payload)
        if has_email:
            changes["guardian_email"] = optional_email(raw_email, "guardianEmail")

        updated = replace(existing, **changes)
        if changes and not self._students.update(updated):
            # Deleted by a concurrent request in between.
            raise NotFoundError("Student not found")
        return updated

    def delete_student(self, student_id: Any) -> Student:
        existing = self._students.get_by_id(_parse_id(student_id))
        if not existing:
            raise NotFoundError("Student not found")
        if not self._students.delete_by_id(existing.student_id):
            # Deleted by a concurrent request in between.
            raise NotFoundError("Student not found")
        logger.info(f"Student {existing.student_id} deleted")
        return existing

    def count(self) -> int:
        return self._students.count()
