"""In-process ``TasksRepository`` used for demos, local runs and tests."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from todoapp.domain.entities import Task
from todoapp.domain.errors import TaskNotFoundError
from todoapp.domain.ports import TaskId, TasksRepository
from todoapp.domain.result import Error, Result, Success

LOGGER = logging.getLogger(__name__)


class InMemoryTasksRepository(TasksRepository):
    """Insertion-ordered task store guarded by a lock.

    Safe to share between view models running repository calls on different
    worker threads. ``latency_s`` delays every call to mimic a remote source.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None, *, latency_s: float = 0.0) -> None:
        self._lock = threading.Lock()
        self._tasks: Dict[TaskId, Task] = {}
        self.latency_s = max(0.0, float(latency_s))
        for task in tasks or ():
            self._tasks[task.id] = task

    def get_tasks(self, force_update: bool = False) -> Result[List[Task]]:
        self._simulate_latency()
        with self._lock:
            return Success(list(self._tasks.values()))

    def get_task(self, task_id: TaskId, force_update: bool = False) -> Result[Task]:
        self._simulate_latency()
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            return Error(TaskNotFoundError(task_id))
        return Success(task)

    def save_task(self, task: Task) -> Result[None]:
        self._simulate_latency()
        with self._lock:
            self._tasks[task.id] = task
        LOGGER.debug("Saved task %s", task.id)
        return Success(None)

    def complete_task(self, task: Task) -> Result[None]:
        return self.save_task(replace(task, completed=True))

    def activate_task(self, task: Task) -> Result[None]:
        return self.save_task(replace(task, completed=False))

    def delete_task(self, task_id: TaskId) -> Result[None]:
        self._simulate_latency()
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return Error(TaskNotFoundError(task_id))
        return Success(None)

    def clear_completed_tasks(self) -> Result[None]:
        self._simulate_latency()
        with self._lock:
            self._tasks = {task_id: task for task_id, task in self._tasks.items() if not task.completed}
        return Success(None)

    def _simulate_latency(self) -> None:
        if self.latency_s:
            time.sleep(self.latency_s)


def demo_tasks() -> List[Task]:
    """Return a small seed list for the demo runtime."""
    return [
        Task(title="Build tower in Pisa", description="Ground looks good, no foundation work required."),
        Task(title="Finish bridge in Tacoma", description="Found awesome girders at half the cost!"),
        Task(title="Water the plants", description="Balcony and kitchen", completed=True),
    ]


__all__ = ["InMemoryTasksRepository", "demo_tasks"]
