from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry, AttendanceRecord


class AttendanceRepository(Protocol):
    def insert_many(self, entries: Sequence[AttendanceEntry]) -> Sequence[AttendanceRecord]:
        """Insert the whole batch in one transaction, preserving order."""
        raise NotImplementedError

    def list_for_date(self, date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date_with_students(self, date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_distinct_dates(self) -> Sequence[str]:
        raise NotImplementedError
