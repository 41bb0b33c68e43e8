from __future__ import annotations

import pytest

from school_attendance.results.model import SubjectGrade
from school_attendance.results.mysql_result_repository import MySQLResultRepository

from fakes import FakeConnection, FakeConnectionFactory


def _subjects():
    return (
        SubjectGrade(subject="Physics", grade="B", credit=3.0, grade_point=8.0, result="PASS"),
        SubjectGrade(subject="Maths", grade="A", credit=4.0, grade_point=9.0, result="PASS"),
        SubjectGrade(subject="Art"),
    )


def test_create_stores_subject_positions_in_submitted_order():
    conn = FakeConnection()
    repo = MySQLResultRepository(FakeConnectionFactory(conn))

    result_id = repo.create(name="Asha", rrn="R1", sgpa=8.4, subjects=_subjects())

    assert result_id == 1
    assert conn.executed[0][1] == ("Asha", "R1", 8.4)
    sql, rows = conn.executed_many[0]
    assert sql.startswith("INSERT INTO result_subjects")
    assert [(r[0], r[1], r[2]) for r in rows] == [(1, 0, "Physics"), (1, 1, "Maths"), (1, 2, "Art")]
    assert conn.commits == 1


def test_create_without_subjects_skips_subject_insert():
    conn = FakeConnection()
    MySQLResultRepository(FakeConnectionFactory(conn)).create(name="Asha", rrn="R1", sgpa=7.0, subjects=())

    assert conn.executed_many == []


def test_create_rolls_back_when_result_insert_fails():
    conn = FakeConnection(fail_on_insert=1)
    repo = MySQLResultRepository(FakeConnectionFactory(conn))

    with pytest.raises(RuntimeError):
        repo.create(name="Asha", rrn="R1", sgpa=8.4, subjects=_subjects())

    assert conn.executed_many == []
    assert conn.rollbacks == 1
    assert conn.commits == 0


def test_get_by_rrn_reads_subjects_by_position():
    conn = FakeConnection(rows=[
        {"result_id": 7, "name": "Asha", "rrn": "R1", "sgpa": 8.4},
        {"subject": "Physics", "grade": "B", "credit": 3, "grade_point": 8, "result": "PASS"},
        {"subject": "Maths", "grade": "A", "credit": None, "grade_point": None, "result": None},
    ])
    repo = MySQLResultRepository(FakeConnectionFactory(conn))

    result = repo.get_by_rrn("R1")

    assert [s.subject for s in result.subjects] == ["Physics", "Maths"]
    assert result.subjects[0].credit == 3.0
    assert result.subjects[1].grade_point is None
    subject_sql, subject_params = conn.executed[1]
    assert subject_sql.endswith("ORDER BY position ASC")
    assert subject_params == (7,)


def test_get_by_rrn_unknown_returns_none():
    conn = FakeConnection()

    assert MySQLResultRepository(FakeConnectionFactory(conn)).get_by_rrn("R404") is None
    assert len(conn.executed) == 1
