from __future__ import annotations

from typing import List, Protocol


class ChatHistoryRepository(Protocol):
    def get(self, user_id: str) -> List[dict]:
        """Turns ``{"role": "user" | "model", "text": str}`` oldest first."""

        raise NotImplementedError

    def put(self, user_id: str, turns: List[dict]) -> None:
        raise NotImplementedError
