from __future__ import annotations

from typing import List

from ..core.constants import StorageKeys
from ..storage.gateway import PersistenceGateway
from .repository import ChatHistoryRepository


class KVChatHistoryRepository(ChatHistoryRepository):
    """All users' AI chat histories in one map userId -> turns."""

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def get(self, user_id: str) -> List[dict]:
        return list(self._gateway.load(StorageKeys.AI_CHAT, {}).get(user_id) or [])

    def put(self, user_id: str, turns: List[dict]) -> None:
        histories = self._gateway.load(StorageKeys.AI_CHAT, {})
        histories[user_id] = list(turns)
        self._gateway.save(StorageKeys.AI_CHAT, histories)
