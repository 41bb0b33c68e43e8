from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class SubjectGrade:
    subject: str
    grade: Optional[str] = None
    credit: Optional[float] = None
    grade_point: Optional[float] = None
    result: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "grade": self.grade,
            "credit": self.credit,
            "gradePoint": self.grade_point,
            "result": self.result,
        }


@dataclass(frozen=True)
class Result:
    """Domain entity: a student's semester result. Read-only once stored."""

    result_id: int
    name: str
    rrn: str
    sgpa: float
    subjects: Sequence[SubjectGrade] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rrn": self.rrn,
            "sgpa": self.sgpa,
            "subjects": [s.to_dict() for s in self.subjects],
        }


@dataclass(frozen=True)
class ResultSummary:
    """Read-model for the results list (no subjects)."""

    name: str
    rrn: str
    sgpa: float

    def to_dict(self) -> dict:
        return {"name": self.name, "rrn": self.rrn, "sgpa": self.sgpa}
