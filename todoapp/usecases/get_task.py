from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import Task
from ..domain.ports import TaskId, TasksRepository
from ..domain.result import Result
from .repository_call import call_repository


@dataclass
class GetTask:
    repository: TasksRepository

    def __call__(self, task_id: TaskId, force_update: bool = False) -> Result[Task]:
        return call_repository(
            "GetTask", lambda: self.repository.get_task(task_id, force_update)
        )
