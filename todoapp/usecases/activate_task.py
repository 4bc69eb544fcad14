from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import Task
from ..domain.ports import TasksRepository
from ..domain.result import Result
from .repository_call import call_repository


@dataclass
class ActivateTask:
    repository: TasksRepository

    def __call__(self, task: Task) -> Result[None]:
        return call_repository(
            "ActivateTask", lambda: self.repository.activate_task(task)
        )
