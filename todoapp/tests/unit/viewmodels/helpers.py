from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any, Callable, Dict, List, Optional, Tuple

from todoapp.adapters.tasks_memory import InMemoryTasksRepository
from todoapp.app.dispatch import QueueDispatcher
from todoapp.app.factory import ViewModelFactory
from todoapp.domain.entities import Task
from todoapp.domain.result import Error, Result, Success


class SynchronousExecutor(Executor):
    """Runs submitted work inline and hands back an already finished future."""

    def __init__(self) -> None:
        self.submitted = 0

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        self.submitted += 1
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:
            future.set_exception(exc)
        return future


class DeferredExecutor(Executor):
    """Holds submitted work until a test finishes it with :meth:`run`."""

    def __init__(self) -> None:
        self.jobs: List[Tuple[Callable[[], Any], Future]] = []
        self.shut_down = False

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        if self.shut_down:
            raise RuntimeError("cannot schedule new futures after shutdown")
        future: Future = Future()
        self.jobs.append((lambda: fn(*args, **kwargs), future))
        return future

    def run(self, index: int) -> None:
        fn, future = self.jobs[index]
        if future.cancelled():
            return
        try:
            future.set_result(fn())
        except BaseException as exc:
            future.set_exception(exc)

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        self.shut_down = True


class RecordingRepository(InMemoryTasksRepository):
    """In-memory repository that records calls and can be told to fail."""

    def __init__(self, tasks: Optional[List[Task]] = None) -> None:
        super().__init__(tasks or [])
        self.calls: List[Tuple[str, Any]] = []
        self.failures: Dict[str, Exception] = {}
        self.raises: Dict[str, Exception] = {}

    def fail(self, operation: str, exc: Exception) -> None:
        self.failures[operation] = exc

    def raise_on(self, operation: str, exc: Exception) -> None:
        self.raises[operation] = exc

    def _check(self, operation: str, arg: Any) -> Optional[Error]:
        self.calls.append((operation, arg))
        if operation in self.raises:
            raise self.raises[operation]
        if operation in self.failures:
            return Error(self.failures[operation])
        return None

    def get_tasks(self, force_update: bool = False) -> Result[List[Task]]:
        return self._check("get_tasks", force_update) or super().get_tasks(force_update)

    def get_task(self, task_id: str, force_update: bool = False) -> Result[Task]:
        return self._check("get_task", (task_id, force_update)) or super().get_task(task_id, force_update)

    def save_task(self, task: Task) -> Result[None]:
        return self._check("save_task", task) or super().save_task(task)

    def complete_task(self, task: Task) -> Result[None]:
        return self._check("complete_task", task) or super().complete_task(task)

    def activate_task(self, task: Task) -> Result[None]:
        return self._check("activate_task", task) or super().activate_task(task)

    def delete_task(self, task_id: str) -> Result[None]:
        return self._check("delete_task", task_id) or super().delete_task(task_id)

    def clear_completed_tasks(self) -> Result[None]:
        return self._check("clear_completed_tasks", None) or super().clear_completed_tasks()

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


def make_factory(repository: InMemoryTasksRepository) -> ViewModelFactory:
    return ViewModelFactory(repository, executor=SynchronousExecutor())


def make_dispatcher() -> QueueDispatcher:
    return QueueDispatcher()


def is_success(result: Result[Any]) -> bool:
    return isinstance(result, Success)


__all__ = [
    "DeferredExecutor",
    "RecordingRepository",
    "SynchronousExecutor",
    "is_success",
    "make_dispatcher",
    "make_factory",
]
