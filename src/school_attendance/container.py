from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_MAIL_FROM
from .database.connection import DBConfig, DatabaseConnection
from .notifications.notifier import Notifier, build_notifier
from .results.mysql_result_repository import MySQLResultRepository
from .results.repository import ResultRepository
from .results.service import ResultService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    results_repo: ResultRepository
    notifier: Notifier

    student_service: StudentService
    attendance_service: AttendanceService
    result_service: ResultService


def wire(
    *,
    conn: Optional[DatabaseConnection],
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    results_repo: ResultRepository,
    notifier: Notifier,
) -> Container:
    """Assemble services on top of already-built repositories."""
    student_service = StudentService(students_repo)
    return Container(
        conn=conn,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        results_repo=results_repo,
        notifier=notifier,
        student_service=student_service,
        attendance_service=AttendanceService(attendance_repo, student_service, notifier),
        result_service=ResultService(results_repo),
    )


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_DB_POOL_SIZE,
    resend_api_key: Optional[str] = None,
    mail_from: str = DEFAULT_MAIL_FROM,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
    )
    conn = DatabaseConnection(config)

    return wire(
        conn=conn,
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        results_repo=MySQLResultRepository(conn),
        notifier=build_notifier(api_key=resend_api_key, sender=mail_from),
    )
