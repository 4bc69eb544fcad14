"""Domain package exports for the task entity, results and ports."""

from .entities import FilterKind, Task, TaskStats, new_task_id
from .errors import RepositoryError, TaskError, TaskNotFoundError, TaskValidationError
from .ports import TaskId, TasksRepository, UseCaseError
from .result import Error, Result, Success, data_or_none
from .statistics import get_active_and_completed_stats

__all__ = [
    "Error",
    "FilterKind",
    "RepositoryError",
    "Result",
    "Success",
    "Task",
    "TaskError",
    "TaskId",
    "TaskNotFoundError",
    "TaskStats",
    "TaskValidationError",
    "TasksRepository",
    "UseCaseError",
    "data_or_none",
    "get_active_and_completed_stats",
    "new_task_id",
]
