from __future__ import annotations

import dataclasses
from typing import List

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import ChatMessage
from .repository import MessageRepository


class KVMessageRepository(KVListRepository[ChatMessage], MessageRepository):
    key = StorageKeys.MESSAGES

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=ChatMessage.from_dict, to_dict=ChatMessage.to_dict)

    def list_between(self, uid1: str, uid2: str) -> List[ChatMessage]:
        return sorted((m for m in self._load() if m.between(uid1, uid2)), key=lambda m: m.timestamp)

    def mark_read(self, *, receiver_id: str, sender_id: str) -> int:
        messages = self._load()
        changed = 0
        out = []
        for m in messages:
            if not m.read and m.receiver_id == receiver_id and m.sender_id == sender_id:
                m = dataclasses.replace(m, read=True)
                changed += 1
            out.append(m)
        if changed:
            self._save(out)
        return changed
