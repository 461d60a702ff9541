from __future__ import annotations

from typing import Dict, Optional, Protocol

from .model import ScoreEntry


class ScoreRepository(Protocol):
    def get_all(self) -> Dict[str, ScoreEntry]:
        raise NotImplementedError

    def get(self, student_id: str) -> Optional[ScoreEntry]:
        raise NotImplementedError

    def put(self, student_id: str, entry: ScoreEntry) -> None:
        raise NotImplementedError
