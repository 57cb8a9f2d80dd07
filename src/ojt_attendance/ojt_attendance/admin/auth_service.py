from __future__ import annotations

import hmac
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    email: str
    role: Role


class AdminAuthService:
    """Use case: authenticate the admin (single configured account)."""

    def __init__(self, *, admin_email: str, admin_password_hash: str):
        self._admin_email = (admin_email or "").strip().lower()
        self._admin_password_hash = admin_password_hash or ""

    def authenticate(self, email: str, password: str) -> SessionUser:
        given = (email or "").strip().lower()
        if not self._admin_email or not self._admin_password_hash:
            raise AuthenticationError("Admin login is not configured")

        email_ok = hmac.compare_digest(given, self._admin_email)
        try:
            password_ok = check_password_hash(self._admin_password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            password_ok = False

        if not (email_ok and password_ok):
            raise AuthenticationError("Invalid email or password")
        return SessionUser(email=self._admin_email, role=Role.ADMIN)
