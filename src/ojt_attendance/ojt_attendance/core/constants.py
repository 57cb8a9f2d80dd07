"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

SHIFT_START = time(8, 0, 0)
SHIFT_END = time(17, 0, 0)
LUNCH_THRESHOLD_HOURS = 5
LUNCH_DEDUCTION_HOURS = 1

ITEMS_PER_PAGE = 5

ONGOING_NOTE = "Ongoing..."
NO_TASK_NOTE = "No task reported"
UNKNOWN_STUDENT = "UNKNOWN"
TIME_PLACEHOLDER = "--:--"

QR_SESSION_ID = "OJT-SYSTEM-FIXED-001"
QR_TYPE = "attendance_qr"

DEFAULT_OFFICE_SSID = "Steerhub First Floor"
