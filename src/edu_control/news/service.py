from __future__ import annotations

from typing import List, Optional

from ..common.datetime_utils import now_ms
from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.enums import MANAGEMENT_ROLES, STAFF_ROLES
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.model import User
from .model import NewsItem
from .repository import NewsRepository

log = get_logger(__name__)


class NewsService:
    def __init__(self, news: NewsRepository):
        self._news = news

    def latest(self, limit: Optional[int] = None) -> List[NewsItem]:
        if limit is not None and limit < 1:
            raise ValidationError("limit must be a positive number")
        items = list(self._news.list_all())
        return items if limit is None else items[:limit]

    def publish(self, *, author: User, title: str, content: str) -> NewsItem:
        if author.role not in STAFF_ROLES:
            raise AuthorizationError("Students cannot publish news")

        item = NewsItem(
            id=new_id(),
            title=require_non_empty(title, "Title"),
            content=require_non_empty(content, "Content"),
            date=now_ms(),
            author_name=author.full_name,
        )
        self._news.add_first(item)
        log.info("news published", extra={"news_id": item.id})
        return item

    def delete(self, *, current_user: User, news_id: str) -> None:
        """Administration may delete any item, authors their own."""
        item = self._news.get_by_id(news_id)
        if not item:
            raise NotFoundError("News item not found")
        if current_user.role not in MANAGEMENT_ROLES and item.author_name != current_user.full_name:
            raise AuthorizationError("You can only delete your own news")
        self._news.delete_by_id(news_id)
        log.info("news deleted", extra={"news_id": news_id})
