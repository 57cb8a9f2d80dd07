from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_utc, db_cursor, fetchall, fetchone, to_db_utc
from .model import AttendanceLog
from .repository import AttendanceLogRepository


class MySQLAttendanceLogRepository(AttendanceLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, student_name, student_id, status, task_accomplishment, logged_at
                FROM attendance_logs
                ORDER BY logged_at DESC, log_id DESC
                """
            )
            rows = fetchall(cur)
            return [
                AttendanceLog(
                    log_id=int(r["log_id"]),
                    student_name=r.get("student_name") or "",
                    student_id=r.get("student_id"),
                    status=r.get("status") or "",
                    task_accomplishment=r.get("task_accomplishment"),
                    logged_at=as_utc(r["logged_at"]),
                )
                for r in rows
            ]

    def insert_log(
        self,
        *,
        student_name: str,
        student_id: Optional[str],
        status: str,
        task_accomplishment: Optional[str],
        logged_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(student_name, student_id, status, task_accomplishment, logged_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (student_name, student_id, status, task_accomplishment, to_db_utc(logged_at)),
            )
            return int(cur.lastrowid)

    def latest_marker(self) -> tuple[int, Optional[datetime]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total, MAX(logged_at) AS latest FROM attendance_logs")
            r = fetchone(cur) or {}
            return int(r.get("total") or 0), as_utc(r.get("latest"))
