from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request, session
from PIL import Image, UnidentifiedImageError

from ..common.http import domain_error_response, json_error, system_error_response
from ..container import Container
from ..core.enums import AttendanceAction
from ..core.exceptions import DomainError
from ..network.gate import resolve_client_ip

DEVICE_DATE_KEY = "device_attendance_date"


def register(app: Flask, container: Container) -> None:
    def _client_network():
        ip = resolve_client_ip(request.headers.get("X-Forwarded-For"), request.remote_addr)
        return container.network_policy.check(ip)

    def _device_time_in_date():
        raw = session.get(DEVICE_DATE_KEY)
        if not raw:
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            return None

    def _record(payload: dict, qr_text: str):
        network = _client_network()
        receipt = container.attendance_service.record_scan(
            student_name=payload.get("student_name", ""),
            action=payload.get("type", ""),
            qr_text=qr_text,
            task=payload.get("task_accomplishment") or payload.get("task"),
            network_authorized=network.authorized,
            device_time_in_date=_device_time_in_date(),
        )
        if receipt.action is AttendanceAction.TIME_IN:
            session[DEVICE_DATE_KEY] = container.attendance_service.local_date(receipt.logged_at).isoformat()

        label = receipt.action.label.upper()
        return jsonify(
            {
                "success": True,
                "log_id": receipt.log_id,
                "action": receipt.action.value,
                "message": f"ATTENDANCE RECORDED - {label} | {receipt.student_name}",
            }
        ), 201

    @app.route("/api/network-check", methods=["GET"], endpoint="network_check")
    def network_check():
        result = _client_network()
        return jsonify(result.as_dict()), 200 if result.authorized else 403

    @app.route("/api/student/config", methods=["GET"], endpoint="student_config")
    def student_config():
        return jsonify(
            {
                "office_ssid": container.settings_service.get_office_ssid(),
                "device_timed_in_today": container.attendance_service.has_timed_in_today(_device_time_in_date()),
            }
        )

    @app.route("/api/scan", methods=["POST"], endpoint="api_scan")
    def api_scan():
        """Record a time-in/time-out from a QR text decoded on the client."""
        data = request.get_json(silent=True) or {}
        try:
            return _record(data, data.get("qr_text", ""))
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return system_error_response(e, "recording attendance")

    @app.route("/api/scan/image", methods=["POST"], endpoint="api_scan_image")
    def api_scan_image():
        """Same as /api/scan, but the QR is decoded server-side from an uploaded photo."""
        if "image" not in request.files:
            return json_error("Missing image file", 400)

        try:
            img = Image.open(request.files["image"].stream).convert("RGB")
        except (UnidentifiedImageError, OSError):
            return json_error("Unreadable image", 400)

        # zbar is a system library; only this endpoint needs it.
        from pyzbar.pyzbar import decode as pyzbar_decode

        decoded = pyzbar_decode(img)
        if not decoded:
            return json_error("No QR code found in image", 400)

        try:
            return _record(request.form.to_dict(), decoded[0].data.decode("utf-8").strip())
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return system_error_response(e, "recording attendance")
