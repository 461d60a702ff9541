from __future__ import annotations

from typing import Protocol, Sequence

from .model import ChatMessage


class MessageRepository(Protocol):
    def list_between(self, uid1: str, uid2: str) -> Sequence[ChatMessage]:
        """Conversation of two users, oldest first."""

        raise NotImplementedError

    def add(self, message: ChatMessage) -> None:
        raise NotImplementedError

    def mark_read(self, *, receiver_id: str, sender_id: str) -> int:
        raise NotImplementedError
