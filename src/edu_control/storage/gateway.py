from __future__ import annotations

import copy
import json
from typing import Any, Optional, Protocol, Sequence

from ..common.log import get_logger

log = get_logger(__name__)


class KeyValueStore(Protocol):
    """Raw text storage keyed by collection name.

    A write replaces the whole value for its key; there are no transactions
    across keys.
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError


class PersistenceGateway:
    """JSON (de)serialisation of whole collections over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def load(self, key: str, default: Any) -> Any:
        raw = self._store.read(key)
        if not raw:
            # Fresh copy so callers can never mutate a shared default.
            return copy.deepcopy(default)
        return json.loads(raw)

    def save(self, key: str, data: Any) -> None:
        payload = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        self._store.write(key, payload)
        log.debug("collection saved", extra={"key": key, "bytes": len(payload)})

    def exists(self, key: str) -> bool:
        return self._store.read(key) is not None

    def clear(self, key: str) -> None:
        self._store.delete(key)
