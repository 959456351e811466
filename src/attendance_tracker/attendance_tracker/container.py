from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .attendance.controller import AttendanceMenu
from .attendance.store import AttendanceStore
from .core.constants import DEFAULT_DATA_FILE
from .storage.bootstrap import open_store


@dataclass(frozen=True)
class Container:
    data_file: str

    store: AttendanceStore
    menu: AttendanceMenu


def build_container(
    *,
    data_file: str = DEFAULT_DATA_FILE,
    read_line: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
) -> Container:
    store = open_store(data_file, write=write)

    menu_kwargs = {"data_file": data_file, "write": write}
    if read_line is not None:
        menu_kwargs["read_line"] = read_line
    menu = AttendanceMenu(store, **menu_kwargs)

    return Container(data_file=data_file, store=store, menu=menu)
