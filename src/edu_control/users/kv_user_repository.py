from __future__ import annotations

from typing import List, Optional

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import Student, User, user_from_dict, user_to_dict
from .repository import UserRepository


class KVUserRepository(KVListRepository[User], UserRepository):
    key = StorageKeys.USERS

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=user_from_dict, to_dict=user_to_dict)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._load() if u.email == email), None)

    def list_students(self) -> List[Student]:
        return [u for u in self._load() if isinstance(u, Student)]
