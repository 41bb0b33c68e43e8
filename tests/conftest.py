from __future__ import annotations

import pytest

from school_attendance import create_app
from school_attendance.container import wire

from fakes import InMemoryAttendance, InMemoryResults, InMemoryStudents, RecordingNotifier


@pytest.fixture
def students():
    return InMemoryStudents()


@pytest.fixture
def attendance(students):
    return InMemoryAttendance(students)


@pytest.fixture
def results():
    return InMemoryResults()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def container(students, attendance, results, notifier):
    return wire(
        conn=None,
        students_repo=students,
        attendance_repo=attendance,
        results_repo=results,
        notifier=notifier,
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
