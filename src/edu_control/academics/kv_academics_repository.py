from __future__ import annotations

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import DisciplineRecord, GradeRecord
from .repository import DisciplineRepository, GradeRepository


class KVGradeRepository(KVListRepository[GradeRecord], GradeRepository):
    key = StorageKeys.GRADES

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=GradeRecord.from_dict, to_dict=GradeRecord.to_dict)


class KVDisciplineRepository(KVListRepository[DisciplineRecord], DisciplineRepository):
    key = StorageKeys.DISCIPLINE

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=DisciplineRecord.from_dict, to_dict=DisciplineRecord.to_dict)
