from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student and the guardian address used for absence emails."""

    student_id: int
    name: str
    rrn: str
    guardian_email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "rrn": self.rrn,
            "guardianEmail": self.guardian_email,
        }
