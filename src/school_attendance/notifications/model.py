from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import NotificationStatus


@dataclass(frozen=True)
class AbsenceNotice:
    """What a guardian is told about one absence."""

    recipient: str
    student_name: str
    date: str


@dataclass(frozen=True)
class NotificationOutcome:
    """Per-absentee result of the notification loop."""

    rrn: str
    name: str
    date: str
    status: NotificationStatus
    recipient: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "rrn": self.rrn,
            "name": self.name,
            "date": self.date,
            "status": self.status.value,
            "recipient": self.recipient,
            "error": self.error,
        }
