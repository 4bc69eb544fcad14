from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..domain.entities import FilterKind, Task
from ..domain.ports import TasksRepository
from ..domain.result import Result, Success
from .repository_call import call_repository


@dataclass
class GetTasks:
    """Fetch all tasks and keep those matching the requested filter.

    Repository order is preserved; filtering is a pure predicate over the
    completion flag.
    """

    repository: TasksRepository

    def __call__(
        self, force_update: bool = False, filtering: FilterKind = FilterKind.ALL
    ) -> Result[List[Task]]:
        result = call_repository(
            "GetTasks", lambda: self.repository.get_tasks(force_update)
        )
        if isinstance(result, Success):
            return Success([task for task in result.data if filtering.matches(task)])
        return result
