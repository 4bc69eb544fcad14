"""Repository, use-case and view-model wiring for the runtimes.

This module owns construction of the concrete ``TasksRepository`` selected by
:class:`todoapp.app.settings.AppSettings` and of the shared worker pool.
Runtimes ask it for view models through one typed method per screen.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

from ..adapters.tasks_memory import InMemoryTasksRepository, demo_tasks
from ..adapters.tasks_rest import TasksRestAdapter
from ..domain.ports import TasksRepository, UseCaseError
from ..usecases.activate_task import ActivateTask
from ..usecases.clear_completed_tasks import ClearCompletedTasks
from ..usecases.complete_task import CompleteTask
from ..usecases.delete_task import DeleteTask
from ..usecases.get_task import GetTask
from ..usecases.get_tasks import GetTasks
from ..usecases.save_task import SaveTask
from ..viewmodels.add_edit_task_vm import AddEditTaskViewModel
from ..viewmodels.scope import UiDispatcher, ViewModelScope
from ..viewmodels.statistics_vm import StatisticsViewModel
from ..viewmodels.task_detail_vm import TaskDetailViewModel
from ..viewmodels.tasks_vm import TasksViewModel
from .settings import AppSettings

LOGGER = logging.getLogger(__name__)


def build_repository(settings: AppSettings) -> TasksRepository:
    """Create the repository adapter described by ``settings``.

    Raises:
        UseCaseError: ``REPOSITORY_CONFIG`` when the settings cannot produce
            a usable repository.
    """
    if not settings.is_valid():
        raise UseCaseError("REPOSITORY_CONFIG", "Settings invalid: check repository and API URL.")
    if settings.uses_rest:
        LOGGER.info("Using REST task repository at %s", settings.api_base_url)
        return TasksRestAdapter(
            settings.api_base_url,
            api_key=settings.api_key or None,
            request_timeout_s=settings.request_timeout_s,
            retries=settings.retries,
        )
    LOGGER.info("Using in-memory task repository")
    return InMemoryTasksRepository(
        demo_tasks() if settings.seed_demo_tasks else (),
        latency_s=settings.memory_latency_ms / 1000.0,
    )


class ViewModelFactory:
    """Create view models sharing one repository and one worker pool.

    Call chain:
        Runtime start-up creates one instance; each screen calls the matching
        ``*_view_model`` method with the dispatcher of its UI thread and calls
        ``clear()`` on the view model when the screen goes away.
    """

    def __init__(
        self,
        repository: TasksRepository,
        *,
        executor: Optional[Executor] = None,
        max_workers: int = 4,
    ) -> None:
        self.repository = repository
        self._owns_executor = executor is None
        self.executor: Executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="todoapp-repo"
        )

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "ViewModelFactory":
        return cls(build_repository(settings), max_workers=settings.max_workers)

    def tasks_view_model(self, dispatcher: UiDispatcher) -> TasksViewModel:
        return TasksViewModel(
            self._scope(dispatcher, "tasks"),
            get_tasks=GetTasks(self.repository),
            clear_completed_tasks=ClearCompletedTasks(self.repository),
            complete_task=CompleteTask(self.repository),
            activate_task=ActivateTask(self.repository),
        )

    def task_detail_view_model(self, dispatcher: UiDispatcher) -> TaskDetailViewModel:
        return TaskDetailViewModel(
            self._scope(dispatcher, "task_detail"),
            get_task=GetTask(self.repository),
            delete_task=DeleteTask(self.repository),
            complete_task=CompleteTask(self.repository),
            activate_task=ActivateTask(self.repository),
        )

    def add_edit_task_view_model(self, dispatcher: UiDispatcher) -> AddEditTaskViewModel:
        return AddEditTaskViewModel(
            self._scope(dispatcher, "add_edit_task"),
            get_task=GetTask(self.repository),
            save_task=SaveTask(self.repository),
        )

    def statistics_view_model(self, dispatcher: UiDispatcher) -> StatisticsViewModel:
        return StatisticsViewModel(
            self._scope(dispatcher, "statistics"),
            get_tasks=GetTasks(self.repository),
        )

    def shutdown(self) -> None:
        """Stop the worker pool if this factory created it."""
        if self._owns_executor:
            self.executor.shutdown(wait=False, cancel_futures=True)

    def _scope(self, dispatcher: UiDispatcher, name: str) -> ViewModelScope:
        return ViewModelScope(self.executor, dispatcher, name=name)


__all__ = ["ViewModelFactory", "build_repository"]
