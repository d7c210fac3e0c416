from __future__ import annotations

import os
from typing import MutableMapping, Protocol


class EnvironmentTable(Protocol):
    def contains(self, key: str) -> bool: ...

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self) -> None: ...


class MappingEnvironment:
    """Environment table over any mutable mapping; in-memory when none is given."""

    def __init__(self, store: MutableMapping[str, str] | None = None) -> None:
        self._store: MutableMapping[str, str] = {} if store is None else store

    def contains(self, key: str) -> bool:
        return key in self._store

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()

    def as_dict(self) -> dict[str, str]:
        return dict(self._store)


class ProcessEnvironment(MappingEnvironment):
    def __init__(self) -> None:
        super().__init__(os.environ)
