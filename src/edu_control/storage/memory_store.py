from __future__ import annotations

from typing import Dict, Optional, Sequence


class InMemoryKeyValueStore:
    """Process-local store used by tests and STORAGE_BACKEND=memory."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Sequence[str]:
        return sorted(self._data)
