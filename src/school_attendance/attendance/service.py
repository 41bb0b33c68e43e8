from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import require_iso_date, today_iso
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus, NotificationStatus
from ..core.exceptions import ValidationError
from ..notifications.model import AbsenceNotice, NotificationOutcome
from ..notifications.notifier import Notifier
from ..students.service import StudentService
from .model import AttendanceEntry, AttendanceRecord, SubmissionResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _parse_status(value: Any, index: int) -> AttendanceStatus:
    if not isinstance(value, str):
        raise ValidationError(f"Entry {index}: status is required")
    try:
        return AttendanceStatus(value.strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Entry {index}: status must be one of {allowed}") from None


def _parse_student_id(value: Any, index: int) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Entry {index}: studentId must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Entry {index}: studentId must be an integer") from None


def parse_entries(payload: Any) -> list[AttendanceEntry]:
    """Validate a submitted batch. Dates are kept exactly as sent."""
    if not isinstance(payload, list):
        raise ValidationError("Request body must be a JSON array of attendance entries")

    entries: list[AttendanceEntry] = []
    for index, item in enumerate(payload):
        if not isinstance(item, Mapping):
            raise ValidationError(f"Entry {index}: must be a JSON object")
        entries.append(
            AttendanceEntry(
                rrn=require_non_empty(item.get("rrn"), f"Entry {index}: rrn"),
                name=require_non_empty(item.get("name"), f"Entry {index}: name"),
                status=_parse_status(item.get("status"), index),
                date=require_iso_date(item.get("date"), f"Entry {index}: date"),
                student_id=_parse_student_id(item.get("studentId"), index),
            )
        )
    return entries


class AttendanceService:
    """Use case: record attendance batches and notify guardians of absentees."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentService,
        notifier: Notifier,
    ):
        self._attendance = attendance
        self._students = students
        self._notifier = notifier

    def submit(self, payload: Any) -> SubmissionResult:
        entries = parse_entries(payload)
        logger.info(f"Attendance batch received: {len(entries)} entries")

        # Persistence errors propagate; nothing is notified for a failed batch.
        records = self._attendance.insert_many(entries)

        outcomes = [
            self._notify_guardian(entry)
            for entry in entries
            if entry.status == AttendanceStatus.ABSENT
        ]
        return SubmissionResult(records=records, notifications=outcomes)

    def _notify_guardian(self, entry: AttendanceEntry) -> NotificationOutcome:
        def outcome(status: NotificationStatus, recipient=None, error=None) -> NotificationOutcome:
            return NotificationOutcome(
                rrn=entry.rrn,
                name=entry.name,
                date=entry.date,
                status=status,
                recipient=recipient,
                error=error,
            )

        recipient = None
        try:
            student = self._students.find_by_rrn(entry.rrn)
            recipient = student.guardian_email if student else None
            if not recipient:
                logger.info(f"Guardian email not found for student with RRN: {entry.rrn}")
                return outcome(NotificationStatus.SKIPPED)

            self._notifier.send_absence(
                AbsenceNotice(recipient=recipient, student_name=entry.name, date=entry.date)
            )
        except Exception as e:
            # Lookup and send failures stay inside this entry.
            logger.exception(f"Error sending absence email for RRN {entry.rrn}")
            return outcome(NotificationStatus.FAILED, recipient, str(e))

        logger.info(f"Email sent successfully to {recipient}")
        return outcome(NotificationStatus.SENT, recipient)

    def today(self, *, now: datetime | None = None) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date(today_iso(now))

    def available_dates(self) -> Sequence[str]:
        return self._attendance.list_distinct_dates()

    def records_for_date(self, date: Optional[str]) -> Sequence[AttendanceRecord]:
        if not date:
            raise ValidationError("Date parameter is required.")
        return self._attendance.list_for_date_with_students(require_iso_date(date, "date"))
