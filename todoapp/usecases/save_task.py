from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import Task
from ..domain.errors import TaskValidationError
from ..domain.ports import TasksRepository
from ..domain.result import Error, Result
from .repository_call import call_repository


@dataclass
class SaveTask:
    """Persist a new or edited task.

    Tasks missing a title or a description are rejected with
    ``TaskValidationError`` before the repository is called.
    """

    repository: TasksRepository

    def __call__(self, task: Task) -> Result[None]:
        if task.is_empty:
            return Error(TaskValidationError("Task title and description are required"))
        return call_repository("SaveTask", lambda: self.repository.save_task(task))
