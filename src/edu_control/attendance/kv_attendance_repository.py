from __future__ import annotations

from typing import List, Sequence

from ..core.constants import StorageKeys
from ..storage.collection import KVListRepository
from ..storage.gateway import PersistenceGateway
from .model import AttendanceRecord
from .repository import AttendanceRepository


class KVAttendanceRepository(KVListRepository[AttendanceRecord], AttendanceRepository):
    key = StorageKeys.ATTENDANCE

    def __init__(self, gateway: PersistenceGateway):
        super().__init__(gateway, from_dict=AttendanceRecord.from_dict, to_dict=AttendanceRecord.to_dict)

    def list_for_student(self, student_id: str) -> List[AttendanceRecord]:
        return [r for r in self._load() if r.student_id == student_id]

    def list_for_lesson(self, *, date: str, subject: str) -> List[AttendanceRecord]:
        return [r for r in self._load() if r.date == date and r.subject == subject]

    def save_batch(self, records: Sequence[AttendanceRecord]) -> None:
        replaced = {r.lesson_key for r in records}
        kept = [r for r in self._load() if r.lesson_key not in replaced]
        self._save([*kept, *records])
