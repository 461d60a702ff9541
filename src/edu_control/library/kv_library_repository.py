from __future__ import annotations

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import LibraryBook
from .repository import LibraryRepository


class KVLibraryRepository(KVListRepository[LibraryBook], LibraryRepository):
    key = StorageKeys.LIBRARY

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=LibraryBook.from_dict, to_dict=LibraryBook.to_dict)
