from __future__ import annotations

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import NewsItem
from .repository import NewsRepository


class KVNewsRepository(KVListRepository[NewsItem], NewsRepository):
    key = StorageKeys.NEWS

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=NewsItem.from_dict, to_dict=NewsItem.to_dict)
