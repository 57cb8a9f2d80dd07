from __future__ import annotations

import io
from functools import wraps

from flask import Flask, jsonify, request, send_file, session

from ..common.http import domain_error_response, json_error, system_error_response
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..qr.poster import build_poster, make_qr_image, qr_payload, to_png_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "admin_email" not in session:
                return json_error("Login required", 401)
            if session.get("role") != Role.ADMIN.value:
                return json_error("Admin access required", 403)
            return view(*args, **kwargs)

        return wrapper

    def _png(data: bytes):
        return send_file(io.BytesIO(data), mimetype="image/png")

    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or request.form
        try:
            user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        except DomainError as e:
            return domain_error_response(e)

        session.clear()
        session["admin_email"] = user.email
        session["role"] = user.role.value
        return jsonify({"success": True, "email": user.email})

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop("admin_email", None)
        session.pop("role", None)
        return jsonify({"success": True})

    @app.route("/api/admin/sessions", methods=["GET"], endpoint="admin_sessions")
    @admin_required
    def admin_sessions():
        try:
            view = container.report_service.build_admin_view(
                student=request.args.get("student") or "all",
                month=request.args.get("month") or None,
                page=request.args.get("page", 1),
            )
            return jsonify({"success": True, **view.as_dict()})
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return system_error_response(e, "loading attendance records")

    @app.route("/api/admin/latest", methods=["GET"], endpoint="admin_latest")
    @admin_required
    def admin_latest():
        """Cheap change marker; clients re-fetch /api/admin/sessions when it moves."""
        try:
            return jsonify({"success": True, **container.report_service.latest_marker()})
        except Exception as e:
            return system_error_response(e, "checking for new logs")

    @app.route("/api/admin/export.xlsx", methods=["GET"], endpoint="admin_export")
    @admin_required
    def admin_export():
        try:
            export = container.report_service.export_xlsx(
                student=request.args.get("student") or "all",
                month=request.args.get("month") or None,
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return system_error_response(e, "exporting attendance")

        return send_file(
            io.BytesIO(export.content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/api/admin/qr.png", methods=["GET"], endpoint="admin_qr_image")
    @admin_required
    def admin_qr_image():
        return _png(to_png_bytes(make_qr_image(qr_payload())))

    @app.route("/api/admin/poster.png", methods=["GET"], endpoint="admin_poster")
    @admin_required
    def admin_poster():
        """Printable poster: QR, office WiFi name and the shift schedule."""
        try:
            poster = build_poster(container.settings_service.get_office_ssid())
            return _png(to_png_bytes(poster))
        except Exception as e:
            return system_error_response(e, "generating the poster")

    @app.route("/api/admin/ssid", methods=["GET", "PUT"], endpoint="admin_ssid")
    @admin_required
    def admin_ssid():
        try:
            if request.method == "PUT":
                data = request.get_json(silent=True) or {}
                ssid = container.settings_service.update_office_ssid(data.get("office_ssid", ""))
            else:
                ssid = container.settings_service.get_office_ssid()
            return jsonify({"success": True, "office_ssid": ssid})
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return system_error_response(e, "updating the office SSID")
