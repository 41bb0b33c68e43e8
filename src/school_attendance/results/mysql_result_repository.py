from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, opt_float
from .model import Result, ResultSummary, SubjectGrade
from .repository import ResultRepository


class MySQLResultRepository(ResultRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, rrn: str, sgpa: float, subjects: Sequence[SubjectGrade]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO results(name, rrn, sgpa) VALUES(%s,%s,%s)",
                (name, rrn, sgpa),
            )
            result_id = int(cur.lastrowid)
            if subjects:
                cur.executemany(
                    """
                    INSERT INTO result_subjects(result_id, position, subject, grade, credit, grade_point, result)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (result_id, position, s.subject, s.grade, s.credit, s.grade_point, s.result)
                        for position, s in enumerate(subjects)
                    ],
                )
            return result_id

    def list_summaries(self) -> Sequence[ResultSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, rrn, sgpa FROM results ORDER BY result_id ASC")
            return [
                ResultSummary(name=r["name"], rrn=r["rrn"], sgpa=float(r["sgpa"]))
                for r in fetchall(cur)
            ]

    def get_by_rrn(self, rrn: str) -> Optional[Result]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT result_id, name, rrn, sgpa FROM results WHERE rrn=%s ORDER BY result_id ASC LIMIT 1",
                (rrn,),
            )
            r = fetchone(cur)
            if not r:
                return None

            cur.execute(
                """
                SELECT subject, grade, credit, grade_point, result
                FROM result_subjects
                WHERE result_id=%s
                ORDER BY position ASC
                """,
                (int(r["result_id"]),),
            )
            subjects = tuple(
                SubjectGrade(
                    subject=s["subject"],
                    grade=s.get("grade"),
                    credit=opt_float(s.get("credit")),
                    grade_point=opt_float(s.get("grade_point")),
                    result=s.get("result"),
                )
                for s in fetchall(cur)
            )
            return Result(
                result_id=int(r["result_id"]),
                name=r["name"],
                rrn=r["rrn"],
                sgpa=float(r["sgpa"]),
                subjects=subjects,
            )
