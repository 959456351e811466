from __future__ import annotations

from typing import Any, Protocol


class StoreRepository(Protocol):
    """Persistence interface for the attendance store document.

    Note: the store depends on this interface, not on a concrete file format.
    """

    def read(self) -> Any:
        raise NotImplementedError

    def write(self, document: dict) -> None:
        raise NotImplementedError
