from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Display label for a single attendance entry."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def from_present(cls, present: bool) -> "AttendanceStatus":
        return cls.PRESENT if present else cls.ABSENT
