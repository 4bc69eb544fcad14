from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import TaskId, TasksRepository
from ..domain.result import Result
from .repository_call import call_repository


@dataclass
class DeleteTask:
    repository: TasksRepository

    def __call__(self, task_id: TaskId) -> Result[None]:
        return call_repository(
            "DeleteTask", lambda: self.repository.delete_task(task_id)
        )
