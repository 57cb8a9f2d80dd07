from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session role used for route guards."""

    ADMIN = "admin"


class AttendanceAction(str, Enum):
    """Classified direction of one scan event."""

    TIME_IN = "TIME_IN"
    TIME_OUT = "TIME_OUT"
    UNKNOWN = "UNKNOWN"

    @property
    def label(self) -> str:
        """Status text stored in attendance_logs."""
        return {
            AttendanceAction.TIME_IN: "Time In",
            AttendanceAction.TIME_OUT: "Time Out",
        }.get(self, "Unknown")
