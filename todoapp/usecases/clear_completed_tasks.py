from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import TasksRepository
from ..domain.result import Result
from .repository_call import call_repository


@dataclass
class ClearCompletedTasks:
    repository: TasksRepository

    def __call__(self) -> Result[None]:
        return call_repository(
            "ClearCompletedTasks", self.repository.clear_completed_tasks
        )
