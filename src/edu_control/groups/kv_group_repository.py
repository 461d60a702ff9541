from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_GROUPS, StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import Group
from .repository import GroupRepository


class KVGroupRepository(KVListRepository[Group], GroupRepository):
    key = StorageKeys.GROUPS
    default = DEFAULT_GROUPS

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=Group.from_dict, to_dict=Group.to_dict)

    def get_by_name(self, name: str) -> Optional[Group]:
        return next((g for g in self._load() if g.name == name), None)
