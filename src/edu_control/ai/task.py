from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Optional

from ..common.log import get_logger
from ..core.enums import AiTaskState
from ..core.exceptions import AiTaskInProgressError

log = get_logger(__name__)


@dataclass
class AiTask:
    """One AI request and its observable outcome."""

    key: Hashable
    state: AiTaskState = AiTaskState.PENDING
    result: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {"state": self.state.value, "text": self.result, "error": self.error}


class AiTaskRunner:
    """Runs AI calls with at most one pending task per key.

    ``start`` reserves a key and ``finish`` releases it, so a caller can
    guard its own writes around the call. A failed call never raises; the
    task ends FAILED with the fallback text as its result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Dict[Hashable, AiTask] = {}

    def is_pending(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._pending

    def start(self, key: Hashable) -> AiTask:
        with self._lock:
            if key in self._pending:
                raise AiTaskInProgressError("A request is already in progress")
            task = AiTask(key=key)
            self._pending[key] = task
        return task

    def finish(self, task: AiTask) -> None:
        with self._lock:
            if self._pending.get(task.key) is task:
                del self._pending[task.key]

    def execute(self, task: AiTask, call: Callable[[], str], *, fallback: str) -> AiTask:
        try:
            task.result = call()
            task.state = AiTaskState.SUCCEEDED
        except Exception as e:
            log.exception("ai request failed", extra={"task": str(task.key)})
            task.state = AiTaskState.FAILED
            task.error = str(e)
            task.result = fallback
        return task

    def run(self, key: Hashable, call: Callable[[], str], *, fallback: str) -> AiTask:
        task = self.start(key)
        try:
            return self.execute(task, call, fallback=fallback)
        finally:
            self.finish(task)
