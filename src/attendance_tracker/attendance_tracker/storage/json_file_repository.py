from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileRepository:
    """Reads and writes the store document as a single JSON file.

    Note: the file is rewritten in place; a crash mid-write may leave it truncated.
    Encoding happens before the file is opened, so a document that cannot be
    encoded leaves the previous file intact.
    """

    def __init__(self, path: Union[str, os.PathLike]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> Any:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            raise PersistenceError(f"cannot read {self._path}: {e}") from e
        logger.debug("read %s", self._path)
        return document

    def write(self, document: dict) -> None:
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=4).encode("utf-8")
            folder = self._path.parent
            if not folder.exists():
                folder.mkdir(parents=True)
            with self._path.open("wb") as f:
                f.write(payload)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"cannot write {self._path}: {e}") from e
        logger.debug("wrote %s", self._path)
