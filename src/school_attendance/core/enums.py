from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as submitted by the client and stored in the DB."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class NotificationStatus(str, Enum):
    """Outcome of one guardian notification attempt."""

    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"
