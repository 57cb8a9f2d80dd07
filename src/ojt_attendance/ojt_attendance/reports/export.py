from __future__ import annotations

import io
import re
from typing import Optional, Sequence

import pandas as pd

from ..sessions.model import DailySession
from .formatting import format_date, format_hours, format_time

SHEET_NAME = "Attendance"
COLUMNS = ["STUDENT NAME", "DATE", "TIME IN", "TIME OUT", "HOURS", "TASK"]
COLUMN_WIDTHS = {"A": 30, "B": 20, "C": 15, "D": 15, "E": 10, "F": 50}


def sessions_to_frame(sessions: Sequence[DailySession]) -> pd.DataFrame:
    rows = [
        {
            "STUDENT NAME": s.student_key,
            "DATE": format_date(s.work_date),
            "TIME IN": format_time(s.time_in),
            "TIME OUT": format_time(s.time_out),
            "HOURS": format_hours(s.effective_hours),
            "TASK": s.task_note,
        }
        for s in sessions
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_xlsx(sessions: Sequence[DailySession]) -> bytes:
    df = sessions_to_frame(sessions)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        sheet = writer.sheets[SHEET_NAME]
        for col, width in COLUMN_WIDTHS.items():
            sheet.column_dimensions[col].width = width
    return out.getvalue()


def export_filename(*, student: Optional[str], month: Optional[str]) -> str:
    month_label = month.strip() if month and month.strip() else "Full_History"
    parts = ["OJT_Report", month_label]
    if student and student != "all":
        parts.append(re.sub(r"\W+", "_", student.strip()).strip("_"))
    return "_".join(parts) + ".xlsx"
