from __future__ import annotations

from typing import Dict, Optional

from ..core.constants import StorageKeys
from ..storage.gateway import PersistenceGateway
from .model import ScoreEntry
from .repository import ScoreRepository


class KVScoreRepository(ScoreRepository):
    """Scores stored as one map studentId -> {current, previous}."""

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def _load_raw(self) -> dict:
        return self._gateway.load(StorageKeys.SCORES, {})

    def get_all(self) -> Dict[str, ScoreEntry]:
        return {sid: ScoreEntry.from_dict(d) for sid, d in self._load_raw().items()}

    def get(self, student_id: str) -> Optional[ScoreEntry]:
        raw = self._load_raw().get(student_id)
        return ScoreEntry.from_dict(raw) if raw else None

    def put(self, student_id: str, entry: ScoreEntry) -> None:
        raw = self._load_raw()
        raw[student_id] = entry.to_dict()
        self._gateway.save(StorageKeys.SCORES, raw)
