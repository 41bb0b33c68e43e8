from __future__ import annotations

import logging
from datetime import datetime

from school_attendance.common import datetime_utils


def test_add_student_then_list_includes_it(client):
    resp = client.post("/add-student", json={"name": "Asha", "rrn": "R1", "guardianEmail": "p@example.com"})

    assert resp.status_code == 201
    created = resp.get_json()
    assert created["name"] == "Asha"

    listed = client.get("/students").get_json()
    assert created in listed


def test_add_student_validation_error_is_400(client):
    resp = client.post("/add-student", json={"rrn": "R1"})

    assert resp.status_code == 400
    assert "name" in resp.get_json()["message"]


def test_update_student_partial(client):
    created = client.post("/add-student", json={"name": "Asha", "rrn": "R1"}).get_json()

    resp = client.put(f"/update-student/{created['id']}", json={"guardianEmail": "p@example.com"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["name"] == "Asha"
    assert body["guardianEmail"] == "p@example.com"


def test_update_unknown_student_is_404(client):
    resp = client.put("/update-student/999", json={"name": "x"})

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Student not found"}


def test_update_of_student_deleted_meanwhile_is_404(client, students, monkeypatch):
    created = client.post("/add-student", json={"name": "Asha", "rrn": "R1"}).get_json()
    monkeypatch.setattr(students, "update", lambda student: False)

    resp = client.put(f"/update-student/{created['id']}", json={"name": "Asha K"})

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Student not found"}


def test_delete_student(client):
    created = client.post("/add-student", json={"name": "Asha", "rrn": "R1"}).get_json()

    resp = client.delete(f"/delete-student/{created['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Student successfully deleted", "deletedStudent": created}
    assert client.get("/students").get_json() == []


def test_delete_nonexistent_student_is_404_not_500(client):
    assert client.delete("/delete-student/12345").status_code == 404
    assert client.delete("/delete-student/not-an-id").status_code == 404


def test_submit_attendance_returns_201_and_emails_absentee(client, notifier):
    client.post("/add-student", json={"name": "Asha", "rrn": "R1", "guardianEmail": "p@example.com"})

    resp = client.post(
        "/submit-attendance",
        json=[
            {"rrn": "R1", "name": "Asha", "status": "absent", "date": "2024-03-11"},
            {"rrn": "R2", "name": "Ben", "status": "present", "date": "2024-03-11"},
            {"rrn": "R3", "name": "Cara", "status": "absent", "date": "2024-03-11"},
        ],
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert [r["rrn"] for r in body] == ["R1", "R2", "R3"]
    assert {r["date"] for r in body} == {"2024-03-11"}
    assert [n.recipient for n in notifier.sent] == ["p@example.com"]


def test_submit_attendance_succeeds_when_email_fails(client, notifier):
    notifier.fail_for.add("p@example.com")
    client.post("/add-student", json={"name": "Asha", "rrn": "R1", "guardianEmail": "p@example.com"})

    resp = client.post(
        "/submit-attendance",
        json=[{"rrn": "R1", "name": "Asha", "status": "absent", "date": "2024-03-11"}],
    )

    assert resp.status_code == 201
    assert len(resp.get_json()) == 1


def test_failed_absence_email_is_logged_with_outcome(client, notifier, caplog):
    notifier.fail_for.add("p@example.com")
    client.post("/add-student", json={"name": "Asha", "rrn": "R1", "guardianEmail": "p@example.com"})

    with caplog.at_level(logging.WARNING, logger="school_attendance.attendance.controller"):
        client.post(
            "/submit-attendance",
            json=[{"rrn": "R1", "name": "Asha", "status": "absent", "date": "2024-03-11"}],
        )

    failures = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Absence email failed")]
    assert len(failures) == 1
    assert "'status': 'failed'" in failures[0]
    assert "'recipient': 'p@example.com'" in failures[0]


def test_submit_attendance_requires_array(client):
    resp = client.post("/submit-attendance", json={"rrn": "R1"})

    assert resp.status_code == 400


def test_submit_attendance_persistence_failure_is_500(client, attendance):
    attendance.fail_inserts = True

    resp = client.post(
        "/submit-attendance",
        json=[{"rrn": "R1", "name": "Asha", "status": "present", "date": "2024-03-11"}],
    )

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to submit attendance records", "error": "insert failed"}


def test_attendance_today(client, monkeypatch):
    monkeypatch.setattr(datetime_utils, "now_local", lambda: datetime(2024, 3, 12, 8, 0))
    client.post(
        "/submit-attendance",
        json=[
            {"rrn": "R1", "name": "Asha", "status": "present", "date": "2024-03-11"},
            {"rrn": "R2", "name": "Ben", "status": "late", "date": "2024-03-12"},
        ],
    )

    body = client.get("/attendance-today").get_json()

    assert [r["rrn"] for r in body] == ["R2"]


def test_available_dates_sorted_and_distinct(client):
    for day in ["2024-03-12", "2024-03-10", "2024-03-12", "2024-03-11"]:
        client.post("/submit-attendance", json=[{"rrn": "R1", "name": "A", "status": "present", "date": day}])

    assert client.get("/available-dates").get_json() == ["2024-03-10", "2024-03-11", "2024-03-12"]


def test_attendance_records_requires_date(client):
    resp = client.get("/attendance-records")

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Date parameter is required."}


def test_attendance_records_joins_student(client):
    created = client.post("/add-student", json={"name": "Asha", "rrn": "R1"}).get_json()
    client.post(
        "/submit-attendance",
        json=[{"rrn": "R1", "name": "Asha", "status": "present", "date": "2024-03-11", "studentId": created["id"]}],
    )

    body = client.get("/attendance-records?date=2024-03-11").get_json()

    assert body[0]["student"] == {"name": "Asha", "rrn": "R1"}
    assert client.get("/attendance-records?date=2024-03-12").get_json() == []


def test_results_flow(client):
    payload = {
        "name": "Asha",
        "rrn": "R1",
        "sgpa": 8.5,
        "subjects": [
            {"subject": "Maths", "grade": "A", "credit": 4, "gradePoint": 9, "result": "PASS"},
            {"subject": "English", "grade": "B", "credit": 2, "gradePoint": 8, "result": "PASS"},
        ],
    }

    assert client.post("/add-result", json=payload).status_code == 201
    assert client.get("/results").get_json() == [{"name": "Asha", "rrn": "R1", "sgpa": 8.5}]

    individual = client.get("/result-individual?rrn=R1").get_json()
    assert [s["subject"] for s in individual["subjects"]] == ["Maths", "English"]
    assert individual["subjects"][0]["gradePoint"] == 9.0


def test_result_individual_errors(client):
    assert client.get("/result-individual").status_code == 400
    resp = client.get("/result-individual?rrn=R404")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Result not found for the provided RRN."}


def test_add_result_validation_error(client):
    resp = client.post("/add-result", json={"name": "Asha", "rrn": "R1", "sgpa": "high"})

    assert resp.status_code == 400


def test_health_reports_student_count(client):
    client.post("/add-student", json={"name": "Asha", "rrn": "R1"})

    assert client.get("/health").get_json() == {"status": "success", "students": 1}
