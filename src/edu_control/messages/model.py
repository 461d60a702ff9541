from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatMessage:
    """Direct message between two users."""

    id: str
    sender_id: str
    receiver_id: str
    text: str
    timestamp: int
    read: bool = False

    def between(self, uid1: str, uid2: str) -> bool:
        return (self.sender_id, self.receiver_id) in ((uid1, uid2), (uid2, uid1))

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        return cls(
            id=str(data["id"]),
            sender_id=str(data.get("senderId", "")),
            receiver_id=str(data.get("receiverId", "")),
            text=str(data.get("text", "")),
            timestamp=int(data.get("timestamp") or 0),
            read=bool(data.get("read", False)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "senderId": self.sender_id,
            "receiverId": self.receiver_id,
            "text": self.text,
            "timestamp": self.timestamp,
            "read": self.read,
        }
