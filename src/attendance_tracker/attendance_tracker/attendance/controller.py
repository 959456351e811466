from __future__ import annotations

import logging
import os
from typing import Callable, Union

from ..common.validators import parse_presence, parse_student_id
from ..core.exceptions import PersistenceError, StudentNotFoundError, ValidationError
from .store import AttendanceStore

logger = logging.getLogger(__name__)

MENU = (
    "\nAttendance System Menu:\n"
    "1. Add Student\n"
    "2. Mark Attendance\n"
    "3. View Student Attendance\n"
    "4. Save Data\n"
    "5. Exit"
)


def _read_stdin() -> str:
    return input()


class AttendanceMenu:
    """Text menu over an AttendanceStore.

    `read_line` returns one line of user input and raises EOFError when input is
    exhausted; `write` receives one line of output. Both default to the terminal.
    """

    def __init__(
        self,
        store: AttendanceStore,
        *,
        data_file: Union[str, os.PathLike],
        read_line: Callable[[], str] = _read_stdin,
        write: Callable[[str], None] = print,
    ):
        self.store = store
        self._data_file = data_file
        self._read_line = read_line
        self._write = write
        self._actions = {
            "1": self.add_student,
            "2": self.mark_attendance,
            "3": self.view_attendance,
            "4": self.save,
        }

    def run(self) -> None:
        while True:
            self._write(MENU)
            try:
                choice = self._read_line().strip()
                if choice == "5":
                    self._write("Exiting...")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self._write("Invalid choice!")
                    continue
                action()
            except ValidationError as e:
                self._write(str(e))
            except StudentNotFoundError as e:
                logger.debug("lookup failed: %s", e)
                self._write("Student not found!")
            except EOFError:
                logger.debug("input closed, leaving menu")
                self._write("Exiting...")
                return

    def add_student(self) -> None:
        student_id = self._ask_student_id()
        name = self._ask("Enter student name:").strip()
        self.store.add_student(student_id, name)
        self._write("Student added successfully!")

    def mark_attendance(self) -> None:
        student_id = self._ask_student_id()
        date = self._ask("Enter date (YYYY-MM-DD):").strip()
        present = parse_presence(self._ask("Is student present? (y/n):"))
        self.store.mark_attendance(student_id, date, present)
        self._write("Attendance marked successfully!")

    def view_attendance(self) -> None:
        listing = self.store.list_attendance(self._ask_student_id())
        self._write(listing.title)
        for row in listing:
            self._write(f"Date: {row.date}, Status: {row.status.value}")

    def save(self) -> None:
        try:
            self.store.save(self._data_file)
        except PersistenceError as e:
            logger.warning("save failed: %s", e)
            self._write(f"Error saving file: {e}")
            return
        self._write(f"Data saved to {self._data_file} successfully!")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line()

    def _ask_student_id(self) -> int:
        return parse_student_id(self._ask("Enter student ID:"))
