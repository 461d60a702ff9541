from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from .gateway import PersistenceGateway

T = TypeVar("T")


class KVListRepository(Generic[T]):
    """Whole-collection CRUD over one gateway key holding a JSON list.

    Every mutation reads the full list, changes it and writes it back;
    entities are matched by their ``id`` attribute.
    """

    key: str = ""
    default: Sequence[dict] = ()

    def __init__(
        self,
        gateway: PersistenceGateway,
        *,
        from_dict: Callable[[dict], T],
        to_dict: Callable[[T], dict],
    ):
        self._gateway = gateway
        self._from_dict = from_dict
        self._to_dict = to_dict

    def _load(self) -> List[T]:
        return [self._from_dict(d) for d in self._gateway.load(self.key, list(self.default))]

    def _save(self, items: Sequence[T]) -> None:
        self._gateway.save(self.key, [self._to_dict(i) for i in items])

    def list_all(self) -> List[T]:
        return self._load()

    def get_by_id(self, item_id: str) -> Optional[T]:
        return next((i for i in self._load() if _id_of(i) == item_id), None)

    def add(self, item: T) -> None:
        self._save([*self._load(), item])

    def add_first(self, item: T) -> None:
        self._save([item, *self._load()])

    def update(self, item: T) -> bool:
        items = self._load()
        found = any(_id_of(i) == _id_of(item) for i in items)
        self._save([item if _id_of(i) == _id_of(item) else i for i in items])
        return found

    def delete_by_id(self, item_id: str) -> bool:
        items = self._load()
        kept = [i for i in items if _id_of(i) != item_id]
        self._save(kept)
        return len(kept) != len(items)


def _id_of(item: Any) -> str:
    return item.id
