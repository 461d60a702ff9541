from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    def list_all(self) -> Sequence[ScheduleEntry]:
        """All entries in insertion order."""

        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[ScheduleEntry]:
        raise NotImplementedError

    def list_for_group_and_day(self, *, group: str, day: int) -> Sequence[ScheduleEntry]:
        raise NotImplementedError

    def add(self, entry: ScheduleEntry) -> None:
        raise NotImplementedError

    def update(self, entry: ScheduleEntry) -> bool:
        raise NotImplementedError

    def delete_by_id(self, entry_id: str) -> bool:
        raise NotImplementedError
