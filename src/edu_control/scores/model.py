from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreEntry:
    """Academic score with one level of history."""

    current: int = 0
    previous: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreEntry":
        return cls(current=int(data.get("current") or 0), previous=int(data.get("previous") or 0))

    def to_dict(self) -> dict:
        return {"current": self.current, "previous": self.previous}

    def advanced(self, score: int) -> "ScoreEntry":
        return ScoreEntry(current=score, previous=self.current)
