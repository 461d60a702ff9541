from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LibraryBook


class LibraryRepository(Protocol):
    def list_all(self) -> Sequence[LibraryBook]:
        raise NotImplementedError

    def get_by_id(self, book_id: str) -> Optional[LibraryBook]:
        raise NotImplementedError

    def add(self, book: LibraryBook) -> None:
        raise NotImplementedError

    def update(self, book: LibraryBook) -> bool:
        raise NotImplementedError

    def delete_by_id(self, book_id: str) -> bool:
        raise NotImplementedError
