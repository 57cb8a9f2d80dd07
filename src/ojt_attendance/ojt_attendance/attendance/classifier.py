"""Map loosely-typed status strings onto AttendanceAction.

Stored rows say "Time In" / "Time Out", older clients sent "time-in" /
"time-out" and hand-edited rows contain anything. One classifier decides, so a
single event can never count as both a time-in and a time-out.
"""

from __future__ import annotations

import re
from typing import Any

from ..core.enums import AttendanceAction

_IN_WORDS = frozenset({"in", "timein", "checkin", "clockin", "login", "signin"})
_OUT_WORDS = frozenset({"out", "timeout", "checkout", "clockout", "logout", "signout"})

_WORD_RE = re.compile(r"[a-z]+")


def classify_action(status: Any) -> AttendanceAction:
    if isinstance(status, AttendanceAction):
        return status
    if status is None:
        return AttendanceAction.UNKNOWN

    words = _WORD_RE.findall(str(status).lower())
    if not words:
        return AttendanceAction.UNKNOWN

    compact = "".join(words)
    if compact in _IN_WORDS:
        return AttendanceAction.TIME_IN
    if compact in _OUT_WORDS:
        return AttendanceAction.TIME_OUT

    word_set = set(words)
    decided = _one_side(bool(word_set & _IN_WORDS), bool(word_set & _OUT_WORDS))
    if decided is not None:
        return decided

    decided = _one_side("in" in compact, "out" in compact)
    return decided if decided is not None else AttendanceAction.UNKNOWN


def _one_side(has_in: bool, has_out: bool):
    if has_in and not has_out:
        return AttendanceAction.TIME_IN
    if has_out and not has_in:
        return AttendanceAction.TIME_OUT
    return None
