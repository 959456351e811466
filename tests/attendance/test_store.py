from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry, Student
from src.attendance_tracker.attendance_tracker.attendance.store import AttendanceStore
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import StudentNotFoundError


class InMemoryRepository:
    def __init__(self, document=None):
        self.document = document

    def read(self):
        return self.document

    def write(self, document: dict) -> None:
        self.document = document


def test_add_and_mark_keep_key_sets_equal():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.add_student(2, "Bob")
    store.mark_attendance(1, "2024-01-10", True)
    store.add_student(3, "Chloe")
    store.mark_attendance(3, "2024-01-10", False)

    assert store.students.keys() == store.records.keys() == {1, 2, 3}
    assert store.records[2] == []


def test_add_student_twice_overwrites_name_and_resets_records():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.mark_attendance(1, "2024-01-10", True)

    store.add_student(1, "Alicia")

    assert store.students[1] == Student(student_id=1, name="Alicia")
    assert store.records[1] == []


def test_mark_unknown_student_raises_and_leaves_store_unchanged():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    before = AttendanceStore(students=dict(store.students), records={k: list(v) for k, v in store.records.items()})

    with pytest.raises(StudentNotFoundError) as exc:
        store.mark_attendance(99, "2024-01-10", True)

    assert exc.value.student_id == 99
    assert 99 not in store.records
    assert store == before


def test_duplicate_dates_accumulate_in_insertion_order():
    store = AttendanceStore()
    store.add_student(5, "Eve")
    store.mark_attendance(5, "2024-02-01", True)
    store.mark_attendance(5, "2024-01-01", False)
    store.mark_attendance(5, "2024-02-01", False)

    assert store.records[5] == [
        AttendanceEntry(date="2024-02-01", present=True),
        AttendanceEntry(date="2024-01-01", present=False),
        AttendanceEntry(date="2024-02-01", present=False),
    ]


def test_list_attendance_scenario():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.mark_attendance(1, "2024-01-10", True)
    store.mark_attendance(1, "2024-01-11", False)

    listing = store.list_attendance(1)

    assert listing.title == "Attendance for Alice (ID: 1):"
    assert [str(row) for row in listing] == ["2024-01-10: Present", "2024-01-11: Absent"]
    assert [row.status for row in listing] == [AttendanceStatus.PRESENT, AttendanceStatus.ABSENT]


def test_listing_can_be_iterated_twice():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.mark_attendance(1, "2024-01-10", True)

    listing = store.list_attendance(1)

    assert list(map(str, listing)) == list(map(str, listing)) == ["2024-01-10: Present"]
    assert len(listing) == 1


def test_list_attendance_for_student_without_entries_is_empty():
    store = AttendanceStore()
    store.add_student(7, "Gus")

    assert list(store.list_attendance(7)) == []


def test_list_unknown_student_raises():
    with pytest.raises(StudentNotFoundError):
        AttendanceStore().list_attendance(42)


def test_dump_and_restore_round_trip_through_repository():
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.add_student(4294967295, "Max")
    store.mark_attendance(1, "2024-01-10", True)
    store.mark_attendance(1, "2024-01-11", False)

    repo = InMemoryRepository()
    store.dump(repo)

    assert repo.document["students"]["1"] == {"id": 1, "name": "Alice"}
    assert repo.document["records"]["4294967295"] == []
    assert AttendanceStore.restore(repo) == store


def test_save_then_load_from_same_path(tmp_path):
    path = tmp_path / "attendance.json"
    store = AttendanceStore()
    store.add_student(1, "Alice")
    store.add_student(2, "Zoë")
    store.mark_attendance(2, "2024-03-01", True)

    store.save(path)
    loaded = AttendanceStore.load(path)

    assert loaded.students == store.students
    assert loaded.records == store.records


def test_empty_store_round_trips(tmp_path):
    path = tmp_path / "empty.json"
    AttendanceStore().save(path)

    assert AttendanceStore.load(path) == AttendanceStore()
