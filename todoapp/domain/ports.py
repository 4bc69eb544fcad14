from __future__ import annotations
from typing import List, Protocol

from .entities import Task
from .result import Result

TaskId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class TasksRepository(Protocol):
    """Task storage as seen by the use-cases.

    Every operation may block on I/O and is therefore invoked off the UI
    thread. Implementations must tolerate concurrent calls from several
    view models and report failures through ``Error`` results, never by
    raising.
    """

    def get_tasks(self, force_update: bool = False) -> Result[List[Task]]: ...
    def get_task(self, task_id: TaskId, force_update: bool = False) -> Result[Task]: ...
    def save_task(self, task: Task) -> Result[None]: ...
    def complete_task(self, task: Task) -> Result[None]: ...
    def activate_task(self, task: Task) -> Result[None]: ...
    def delete_task(self, task_id: TaskId) -> Result[None]: ...
    def clear_completed_tasks(self) -> Result[None]: ...
