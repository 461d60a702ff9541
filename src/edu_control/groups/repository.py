from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Group


class GroupRepository(Protocol):
    def list_all(self) -> Sequence[Group]:
        raise NotImplementedError

    def get_by_id(self, group_id: str) -> Optional[Group]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Group]:
        """First group with this name; names are unique by convention only."""

        raise NotImplementedError

    def add(self, group: Group) -> None:
        raise NotImplementedError

    def delete_by_id(self, group_id: str) -> bool:
        raise NotImplementedError
