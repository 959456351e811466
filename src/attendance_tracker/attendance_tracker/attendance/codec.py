"""Conversion between the in-memory store maps and the JSON document.

Document shape::

    {
        "students": {"1": {"id": 1, "name": "Alice"}},
        "records": {"1": [{"date": "2024-01-10", "status": true}]}
    }

Ids are written as string keys because JSON object keys are always strings.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from ..core.constants import MAX_STUDENT_ID
from ..core.exceptions import StoreFormatError
from .model import AttendanceEntry, Student

StudentMap = Dict[int, Student]
RecordMap = Dict[int, List[AttendanceEntry]]


def encode(students: Mapping[int, Student], records: Mapping[int, List[AttendanceEntry]]) -> dict:
    return {
        "students": {
            str(sid): {"id": s.student_id, "name": s.name} for sid, s in students.items()
        },
        "records": {
            str(sid): [{"date": e.date, "status": e.present} for e in entries]
            for sid, entries in records.items()
        },
    }


def decode(document: Any) -> Tuple[StudentMap, RecordMap]:
    if not isinstance(document, dict):
        raise StoreFormatError("top-level value must be an object")

    raw_students = _require_object(document, "students")
    raw_records = _require_object(document, "records")

    students: StudentMap = {}
    for key, value in raw_students.items():
        sid = _parse_key(key, "students")
        if not isinstance(value, dict):
            raise StoreFormatError(f"students[{key}] must be an object")
        if _strict_int(value.get("id")) != sid:
            raise StoreFormatError(f"students[{key}].id does not match its key")
        name = value.get("name")
        if not isinstance(name, str):
            raise StoreFormatError(f"students[{key}].name must be a string")
        students[sid] = Student(student_id=sid, name=name)

    records: RecordMap = {}
    for key, value in raw_records.items():
        sid = _parse_key(key, "records")
        if not isinstance(value, list):
            raise StoreFormatError(f"records[{key}] must be an array")
        records[sid] = [_decode_entry(key, i, item) for i, item in enumerate(value)]

    if students.keys() != records.keys():
        missing = sorted(students.keys() ^ records.keys())
        raise StoreFormatError(f"students and records disagree on ids: {missing}")

    return students, records


def _require_object(document: dict, field: str) -> dict:
    value = document.get(field)
    if not isinstance(value, dict):
        raise StoreFormatError(f"'{field}' must be an object")
    return value


def _parse_key(key: str, field: str) -> int:
    # keys must be canonical: "01" would collide with "1"
    canonical = (
        key.isascii()
        and key.isdigit()
        and len(key) <= len(str(MAX_STUDENT_ID))
        and key == str(int(key))
    )
    if not canonical or int(key) > MAX_STUDENT_ID:
        raise StoreFormatError(f"{field} key {key!r} is not a valid student id")
    return int(key)


def _strict_int(value: Any):
    # bool is an int subclass; `true` must not pass as id 1
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _decode_entry(key: str, index: int, item: Any) -> AttendanceEntry:
    if not isinstance(item, dict):
        raise StoreFormatError(f"records[{key}][{index}] must be an object")
    date = item.get("date")
    status = item.get("status")
    if not isinstance(date, str):
        raise StoreFormatError(f"records[{key}][{index}].date must be a string")
    if not isinstance(status, bool):
        raise StoreFormatError(f"records[{key}][{index}].status must be a boolean")
    return AttendanceEntry(date=date, present=status)
