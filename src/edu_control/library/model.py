from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LibraryBook:
    id: str
    title: str
    author: str
    category: str
    description: str
    url: str

    @classmethod
    def from_dict(cls, data: dict) -> "LibraryBook":
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            author=str(data.get("author", "")),
            category=str(data.get("category", "")),
            description=str(data.get("description", "")),
            url=str(data.get("url", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "category": self.category,
            "description": self.description,
            "url": self.url,
        }

    def matches(self, term: str) -> bool:
        term = term.lower()
        return term in self.title.lower() or term in self.author.lower() or term in self.category.lower()
