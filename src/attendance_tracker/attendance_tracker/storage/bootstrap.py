from __future__ import annotations

import logging
import os
from typing import Callable, Union

from ..attendance.store import AttendanceStore
from ..core.exceptions import PersistenceError
from .json_file_repository import JsonFileRepository

logger = logging.getLogger(__name__)


def open_store(path: Union[str, os.PathLike], *, write: Callable[[str], None] = print) -> AttendanceStore:
    """Load the store at startup, falling back to an empty one.

    A missing file is a normal first run. An unreadable or malformed file is
    reported and replaced by an empty store; it is only overwritten on save.
    """
    repository = JsonFileRepository(path)
    if not repository.exists():
        logger.info("no data file at %s, starting empty", path)
        return AttendanceStore()

    try:
        store = AttendanceStore.restore(repository)
    except PersistenceError as e:
        logger.warning("could not load %s: %s", path, e)
        write("Error loading file, creating new system.")
        return AttendanceStore()

    write(f"Data loaded from {path} successfully!")
    return store
