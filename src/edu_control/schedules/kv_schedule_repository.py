from __future__ import annotations

from typing import List

from ..core.constants import DEFAULT_SCHEDULE, StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import ScheduleEntry
from .repository import ScheduleRepository


class KVScheduleRepository(KVListRepository[ScheduleEntry], ScheduleRepository):
    key = StorageKeys.SCHEDULE
    default = DEFAULT_SCHEDULE

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=ScheduleEntry.from_dict, to_dict=ScheduleEntry.to_dict)

    def list_for_group_and_day(self, *, group: str, day: int) -> List[ScheduleEntry]:
        return [e for e in self._load() if e.group == group and e.day == day]
