from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Result, ResultSummary, SubjectGrade


class ResultRepository(Protocol):
    def create(self, *, name: str, rrn: str, sgpa: float, subjects: Sequence[SubjectGrade]) -> int:
        raise NotImplementedError

    def list_summaries(self) -> Sequence[ResultSummary]:
        raise NotImplementedError

    def get_by_rrn(self, rrn: str) -> Optional[Result]:
        raise NotImplementedError
