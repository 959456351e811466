from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Union

from ..core.exceptions import StudentNotFoundError
from ..storage.json_file_repository import JsonFileRepository
from ..storage.repository import StoreRepository
from . import codec
from .codec import RecordMap, StudentMap
from .model import AttendanceEntry, AttendanceListing, Student

logger = logging.getLogger(__name__)


@dataclass
class AttendanceStore:
    """Roster and per-student attendance, kept in memory until saved.

    `students` and `records` always share the same key set: every student has a
    (possibly empty) list of entries and every list belongs to a student.
    """

    students: StudentMap = field(default_factory=dict)
    records: RecordMap = field(default_factory=dict)

    def add_student(self, student_id: int, name: str) -> Student:
        """Insert or overwrite a student; an existing id loses its entries."""
        student = Student(student_id=student_id, name=name)
        if student_id in self.students:
            logger.debug("overwriting student %s", student_id)
        self.students[student_id] = student
        self.records[student_id] = []
        return student

    def mark_attendance(self, student_id: int, date: str, present: bool) -> AttendanceEntry:
        entries = self.records.get(student_id)
        if entries is None:
            raise StudentNotFoundError(student_id)
        entry = AttendanceEntry(date=date, present=present)
        entries.append(entry)
        logger.debug("marked %s on %s present=%s", student_id, date, present)
        return entry

    def list_attendance(self, student_id: int) -> AttendanceListing:
        student = self.students.get(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return AttendanceListing(student, tuple(self.records.get(student_id, ())))

    def dump(self, repository: StoreRepository) -> None:
        repository.write(codec.encode(self.students, self.records))

    @classmethod
    def restore(cls, repository: StoreRepository) -> "AttendanceStore":
        students, records = codec.decode(repository.read())
        return cls(students=students, records=records)

    def save(self, path: Union[str, os.PathLike]) -> None:
        self.dump(JsonFileRepository(path))
        logger.info("saved %d students to %s", len(self.students), path)

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "AttendanceStore":
        store = cls.restore(JsonFileRepository(path))
        logger.info("loaded %d students from %s", len(store.students), path)
        return store
