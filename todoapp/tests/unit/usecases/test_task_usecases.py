from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Tuple

from todoapp.adapters.tasks_memory import InMemoryTasksRepository
from todoapp.domain.entities import FilterKind, Task
from todoapp.domain.errors import RepositoryError, TaskNotFoundError, TaskValidationError
from todoapp.domain.result import Error, Success
from todoapp.usecases.activate_task import ActivateTask
from todoapp.usecases.clear_completed_tasks import ClearCompletedTasks
from todoapp.usecases.complete_task import CompleteTask
from todoapp.usecases.delete_task import DeleteTask
from todoapp.usecases.get_task import GetTask
from todoapp.usecases.get_tasks import GetTasks
from todoapp.usecases.instrumentation import IDLING_RESOURCE
from todoapp.usecases.save_task import SaveTask


class _RaisingRepository:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def get_tasks(self, force_update: bool = False):
        self.calls.append(("get_tasks", force_update))
        raise ConnectionError("socket closed")

    def save_task(self, task: Task):
        self.calls.append(("save_task", task))
        raise RuntimeError("boom")


def _repo() -> InMemoryTasksRepository:
    return InMemoryTasksRepository(
        [
            Task(title="a", description="1", id="a"),
            Task(title="b", description="2", id="b", completed=True),
            Task(title="c", description="3", id="c"),
        ]
    )


def test_get_tasks_filters_and_keeps_order() -> None:
    result = GetTasks(_repo())(False, FilterKind.ACTIVE)

    assert isinstance(result, Success)
    assert [task.id for task in result.data] == ["a", "c"]


def test_get_tasks_defaults_to_all() -> None:
    result = GetTasks(_repo())()

    assert [task.id for task in result.data] == ["a", "b", "c"]


def test_get_task_not_found() -> None:
    result = GetTask(_repo())("zzz")

    assert isinstance(result, Error)
    assert isinstance(result.exception, TaskNotFoundError)
    assert result.exception.task_id == "zzz"


def test_raised_exception_becomes_repository_error() -> None:
    repo = _RaisingRepository()

    result = GetTasks(repo)(True)

    assert isinstance(result, Error)
    assert isinstance(result.exception, RepositoryError)
    assert isinstance(result.exception.cause, ConnectionError)
    assert repo.calls == [("get_tasks", True)]
    assert IDLING_RESOURCE.is_idle


def test_save_rejects_empty_task_without_repository_call() -> None:
    repo = _RaisingRepository()

    result = SaveTask(repo)(Task(title="", description="body"))

    assert isinstance(result, Error)
    assert isinstance(result.exception, TaskValidationError)
    assert repo.calls == []


def test_mutations_reach_repository() -> None:
    repo = _repo()
    task_a = GetTask(repo)("a").data

    assert isinstance(CompleteTask(repo)(task_a), Success)
    assert GetTask(repo)("a").data.completed is True

    assert isinstance(ActivateTask(repo)(replace(task_a, completed=True)), Success)
    assert GetTask(repo)("a").data.completed is False

    assert isinstance(ClearCompletedTasks(repo)(), Success)
    assert [task.id for task in GetTasks(repo)().data] == ["a", "c"]

    assert isinstance(DeleteTask(repo)("c"), Success)
    assert isinstance(DeleteTask(repo)("c"), Error)

    assert isinstance(SaveTask(repo)(Task(title="new", description="d", id="n")), Success)
    assert [task.id for task in GetTasks(repo)().data] == ["a", "n"]
