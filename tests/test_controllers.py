from __future__ import annotations

import io
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from openpyxl import load_workbook
from werkzeug.security import generate_password_hash

from ojt_attendance.attendance.model import AttendanceLog
from ojt_attendance.container import build_services
from ojt_attendance.main import create_app
from ojt_attendance.network.gate import NetworkPolicy
from ojt_attendance.qr.poster import qr_payload

CAMPUS_IP = "122.53.28.50"


class InMemoryLogs:
    def __init__(self):
        self._logs: list[AttendanceLog] = []

    def list_all(self):
        return sorted(self._logs, key=lambda l: (l.logged_at, l.log_id), reverse=True)

    def insert_log(self, *, student_name, student_id, status, task_accomplishment, logged_at) -> int:
        log_id = len(self._logs) + 1
        self._logs.append(
            AttendanceLog(
                log_id=log_id,
                student_name=student_name,
                student_id=student_id,
                status=status,
                task_accomplishment=task_accomplishment,
                logged_at=logged_at,
            )
        )
        return log_id

    def latest_marker(self):
        if not self._logs:
            return 0, None
        return len(self._logs), max(l.logged_at for l in self._logs)


class InMemorySettings:
    def __init__(self):
        self.values: dict[str, str] = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value


@pytest.fixture()
def logs():
    return InMemoryLogs()


@pytest.fixture()
def client(logs):
    container = build_services(
        logs_repo=logs,
        settings_repo=InMemorySettings(),
        network_policy=NetworkPolicy.from_settings(allowed_ips=[CAMPUS_IP], allow_local=False),
        admin_email="admin@example.com",
        admin_password_hash=generate_password_hash("secret123"),
        tz=ZoneInfo("Asia/Manila"),
        office_ssid="Test Office WiFi",
    )
    app = create_app(container=container, settings_module="config.testing")
    return app.test_client()


def on_campus(**kwargs):
    return {"headers": {"X-Forwarded-For": CAMPUS_IP}, **kwargs}


def login(client):
    return client.post("/api/admin/login", json={"email": "admin@example.com", "password": "secret123"})


def test_network_check(client):
    ok = client.get("/api/network-check", **on_campus())
    denied = client.get("/api/network-check", headers={"X-Forwarded-For": "8.8.8.8"})

    assert ok.status_code == 200 and ok.get_json() == {"authorized": True, "ip": CAMPUS_IP}
    assert denied.status_code == 403 and denied.get_json()["authorized"] is False


def test_student_config(client):
    body = client.get("/api/student/config").get_json()
    assert body == {"office_ssid": "Test Office WiFi", "device_timed_in_today": False}


def test_scan_time_in_then_device_is_blocked(client, logs):
    payload = {"student_name": "Juan", "type": "time-in", "qr_text": qr_payload()}

    first = client.post("/api/scan", json=payload, **on_campus())
    second = client.post("/api/scan", json=payload, **on_campus())

    assert first.status_code == 201
    assert first.get_json()["action"] == "TIME_IN"
    assert second.status_code == 400
    assert "already timed in" in second.get_json()["message"]
    assert len(logs.list_all()) == 1
    assert client.get("/api/student/config").get_json()["device_timed_in_today"] is True


def test_scan_off_campus_is_forbidden(client, logs):
    resp = client.post(
        "/api/scan",
        json={"student_name": "Juan", "type": "time-in", "qr_text": qr_payload()},
        headers={"X-Forwarded-For": "8.8.8.8"},
    )
    assert resp.status_code == 403
    assert logs.list_all() == []


def test_scan_time_out_requires_task(client):
    resp = client.post(
        "/api/scan",
        json={"student_name": "Juan", "type": "time-out", "qr_text": qr_payload()},
        **on_campus(),
    )
    assert resp.status_code == 400


def test_scan_image_requires_file(client):
    resp = client.post("/api/scan/image", data={"student_name": "Juan"}, **on_campus())
    assert resp.status_code == 400


def test_admin_routes_require_login(client):
    assert client.get("/api/admin/sessions").status_code == 401
    assert client.get("/api/admin/poster.png").status_code == 401


def test_admin_login_rejects_bad_password(client):
    resp = client.post("/api/admin/login", json={"email": "admin@example.com", "password": "nope"})
    assert resp.status_code == 401


def test_admin_sessions_and_export(client, logs):
    logs.insert_log(
        student_name="Juan",
        student_id="OJT-SYSTEM-FIXED-001",
        status="Time In",
        task_accomplishment="",
        logged_at=datetime(2026, 2, 2, 0, 0, tzinfo=timezone.utc),
    )
    logs.insert_log(
        student_name="juan ",
        student_id="OJT-SYSTEM-FIXED-001",
        status="Time Out",
        task_accomplishment="Network audit",
        logged_at=datetime(2026, 2, 2, 10, 0, tzinfo=timezone.utc),
    )
    assert login(client).status_code == 200

    body = client.get("/api/admin/sessions?student=JUAN&month=2026-02").get_json()
    assert body["success"] is True
    assert body["total_results"] == 1
    assert body["rows"][0]["total_hours"] == "8.00"
    assert body["rows"][0]["task_accomplishment"] == "Network audit"

    export = client.get("/api/admin/export.xlsx?student=JUAN&month=2026-02")
    assert export.status_code == 200
    assert "OJT_Report_2026-02_JUAN.xlsx" in export.headers["Content-Disposition"]
    sheet = load_workbook(io.BytesIO(export.data))["Attendance"]
    assert sheet["A2"].value == "JUAN"

    marker = client.get("/api/admin/latest").get_json()
    assert marker["total_logs"] == 2


def test_admin_sessions_bad_month(client):
    login(client)
    assert client.get("/api/admin/sessions?month=february").status_code == 400


def test_admin_export_empty(client):
    login(client)
    assert client.get("/api/admin/export.xlsx").status_code == 400


def test_admin_ssid_update_and_poster(client):
    login(client)

    resp = client.put("/api/admin/ssid", json={"office_ssid": "  Lab 2F  "})
    assert resp.get_json() == {"success": True, "office_ssid": "Lab 2F"}
    assert client.get("/api/student/config").get_json()["office_ssid"] == "Lab 2F"
    assert client.put("/api/admin/ssid", json={"office_ssid": ""}).status_code == 400

    poster = client.get("/api/admin/poster.png")
    assert poster.status_code == 200
    assert poster.mimetype == "image/png"
    assert client.get("/api/admin/qr.png").data.startswith(b"\x89PNG")


def test_logout_drops_admin(client):
    login(client)
    client.post("/api/admin/logout")
    assert client.get("/api/admin/sessions").status_code == 401
