from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, opt_int
from .model import AttendanceEntry, AttendanceRecord, StudentRef
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    student = None
    if r.get("student_name") is not None:
        student = StudentRef(name=r["student_name"], rrn=r["student_rrn"])
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=opt_int(r.get("student_id")),
        name=r["name"],
        rrn=r["rrn"],
        status=AttendanceStatus(r["status"]),
        date=r["work_date"],
        student=student,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_many(self, entries: Sequence[AttendanceEntry]) -> Sequence[AttendanceRecord]:
        records: list[AttendanceRecord] = []
        with db_cursor(self._conn_factory) as (_, cur):
            # One INSERT per row so each record gets its own lastrowid.
            for e in entries:
                cur.execute(
                    """
                    INSERT INTO attendance_records(student_id, name, rrn, status, work_date)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (e.student_id, e.name, e.rrn, e.status.value, e.date),
                )
                records.append(
                    AttendanceRecord(
                        attendance_id=int(cur.lastrowid),
                        student_id=e.student_id,
                        name=e.name,
                        rrn=e.rrn,
                        status=e.status,
                        date=e.date,
                    )
                )
        return records

    def list_for_date(self, date: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, name, rrn, status, work_date
                FROM attendance_records
                WHERE work_date=%s
                ORDER BY attendance_id ASC
                """,
                (date,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_for_date_with_students(self, date: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    ar.attendance_id, ar.student_id, ar.name, ar.rrn, ar.status, ar.work_date,
                    s.name AS student_name, s.rrn AS student_rrn
                FROM attendance_records ar
                LEFT JOIN students s ON s.student_id = ar.student_id
                WHERE ar.work_date=%s
                ORDER BY ar.attendance_id ASC
                """,
                (date,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_distinct_dates(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT work_date FROM attendance_records ORDER BY work_date ASC")
            return [r["work_date"] for r in fetchall(cur)]
