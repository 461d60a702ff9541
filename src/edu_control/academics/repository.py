from __future__ import annotations

from typing import Protocol, Sequence

from .model import DisciplineRecord, GradeRecord


class GradeRepository(Protocol):
    def list_all(self) -> Sequence[GradeRecord]:
        raise NotImplementedError

    def add(self, record: GradeRecord) -> None:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError


class DisciplineRepository(Protocol):
    def list_all(self) -> Sequence[DisciplineRecord]:
        raise NotImplementedError

    def add(self, record: DisciplineRecord) -> None:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
