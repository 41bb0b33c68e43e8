from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..notifications.model import NotificationOutcome


@dataclass(frozen=True)
class AttendanceEntry:
    """One validated line of a submitted attendance batch."""

    rrn: str
    name: str
    status: AttendanceStatus
    date: str
    student_id: Optional[int] = None


@dataclass(frozen=True)
class StudentRef:
    """Student fields joined into an attendance record by its weak student_id."""

    name: str
    rrn: str


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: a stored attendance record. Never updated after insert."""

    attendance_id: int
    student_id: Optional[int]
    name: str
    rrn: str
    status: AttendanceStatus
    date: str
    student: Optional[StudentRef] = None

    def to_dict(self, *, include_student: bool = False) -> dict:
        data = {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "name": self.name,
            "rrn": self.rrn,
            "status": self.status.value,
            "date": self.date,
        }
        if include_student:
            data["student"] = (
                {"name": self.student.name, "rrn": self.student.rrn} if self.student else None
            )
        return data


@dataclass(frozen=True)
class SubmissionResult:
    records: Sequence[AttendanceRecord]
    notifications: Sequence[NotificationOutcome] = field(default_factory=tuple)
