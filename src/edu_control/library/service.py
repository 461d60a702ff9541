from __future__ import annotations

from typing import List

from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.enums import MANAGEMENT_ROLES, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import LibraryBook
from .repository import LibraryRepository

log = get_logger(__name__)


class LibraryService:
    def __init__(self, books: LibraryRepository):
        self._books = books

    def search(self, term: str = "") -> List[LibraryBook]:
        books = list(self._books.list_all())
        term = (term or "").strip()
        return [b for b in books if b.matches(term)] if term else books

    def save(self, *, current_role: Role, book_id: str = "", **fields) -> LibraryBook:
        """Create a book, or replace the one with ``book_id``."""
        if current_role not in MANAGEMENT_ROLES:
            raise AuthorizationError("Only administration can edit the library")

        book = LibraryBook(
            id=book_id or new_id(),
            title=require_non_empty(fields.get("title"), "Title"),
            author=require_non_empty(fields.get("author"), "Author"),
            category=(fields.get("category") or "").strip(),
            description=(fields.get("description") or "").strip(),
            url=(fields.get("url") or "").strip(),
        )
        if book_id:
            if not self._books.get_by_id(book_id):
                raise NotFoundError("Book not found")
            self._books.update(book)
            log.info("book updated", extra={"book_id": book.id})
        else:
            self._books.add(book)
            log.info("book added", extra={"book_id": book.id})
        return book

    def delete(self, *, current_role: Role, book_id: str) -> None:
        if current_role not in MANAGEMENT_ROLES:
            raise AuthorizationError("Only administration can edit the library")
        if not self._books.delete_by_id(book_id):
            raise NotFoundError("Book not found")
        log.info("book deleted", extra={"book_id": book_id})
