from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewsItem


class NewsRepository(Protocol):
    def list_all(self) -> Sequence[NewsItem]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, news_id: str) -> Optional[NewsItem]:
        raise NotImplementedError

    def add_first(self, item: NewsItem) -> None:
        raise NotImplementedError

    def delete_by_id(self, news_id: str) -> bool:
        raise NotImplementedError
