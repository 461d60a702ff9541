from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewsItem:
    id: str
    title: str
    content: str
    date: int
    author_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "NewsItem":
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            content=str(data.get("content", "")),
            date=int(data.get("date") or 0),
            author_name=str(data.get("authorName", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
            "authorName": self.author_name,
        }
