from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the roster."""

    student_id: int
    name: str


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one dated presence/absence mark.

    Note: `date` is kept as typed by the user ("YYYY-MM-DD" by convention, not validated).
    """

    date: str
    present: bool

    @property
    def status(self) -> AttendanceStatus:
        return AttendanceStatus.from_present(self.present)


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for displaying one entry."""

    date: str
    status: AttendanceStatus

    def __str__(self) -> str:
        return f"{self.date}: {self.status.value}"


class AttendanceListing:
    """A student's attendance in insertion order.

    Iterating builds rows on the fly; the listing can be iterated again.
    """

    def __init__(self, student: Student, entries: Sequence[AttendanceEntry]):
        self.student = student
        self._entries = entries

    def __iter__(self) -> Iterator[AttendanceRow]:
        for entry in self._entries:
            yield AttendanceRow(date=entry.date, status=entry.status)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def title(self) -> str:
        return f"Attendance for {self.student.name} (ID: {self.student.student_id}):"
