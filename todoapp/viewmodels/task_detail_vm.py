"""View model for the task detail screen."""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import partial
from typing import Optional

from ..domain.entities import Task
from ..domain.errors import TaskNotFoundError
from ..domain.result import Error, Result, Success
from ..usecases.activate_task import ActivateTask
from ..usecases.complete_task import CompleteTask
from ..usecases.delete_task import DeleteTask
from ..usecases.get_task import GetTask
from .event import Event
from .live_data import LiveData, MutableLiveData
from .messages import LOADING_TASKS_ERROR, TASK_MARKED_ACTIVE, TASK_MARKED_COMPLETE, TASK_UPDATE_ERROR
from .presenter import PresenterTask, to_entity, to_view
from .scope import ViewModel, ViewModelScope

LOGGER = logging.getLogger(__name__)


class TaskDetailViewModel(ViewModel):
    """Holds one task and exposes complete/delete/edit commands for it.

    ``start`` is guarded: it does nothing while a load is in flight, or when
    a task is already available and no refresh was requested. This keeps
    repeated view attachments from issuing duplicate fetches.
    """

    def __init__(
        self,
        scope: ViewModelScope,
        *,
        get_task: GetTask,
        delete_task: DeleteTask,
        complete_task: CompleteTask,
        activate_task: ActivateTask,
    ) -> None:
        super().__init__(scope)
        self._get_task = get_task
        self._delete_task = delete_task
        self._complete_task = complete_task
        self._activate_task = activate_task

        self._task: MutableLiveData[Optional[PresenterTask]] = MutableLiveData()
        self.task: LiveData[Optional[PresenterTask]] = self._task

        self._is_data_available: MutableLiveData[bool] = MutableLiveData()
        self.is_data_available: LiveData[bool] = self._is_data_available

        self._data_loading: MutableLiveData[bool] = MutableLiveData()
        self.data_loading: LiveData[bool] = self._data_loading

        self._edit_task_event: MutableLiveData[Event[None]] = MutableLiveData()
        self.edit_task_event: LiveData[Event[None]] = self._edit_task_event

        self._delete_task_event: MutableLiveData[Event[None]] = MutableLiveData()
        self.delete_task_event: LiveData[Event[None]] = self._delete_task_event

        self._snackbar_text: MutableLiveData[Event[str]] = MutableLiveData()
        self.snackbar_text: LiveData[Event[str]] = self._snackbar_text

        self.completed: LiveData[bool] = self.derive(
            self._task, lambda task: task.completed if task is not None else False
        )

    @property
    def task_id(self) -> Optional[str]:
        task = self._task.get()
        return task.entry_id if task is not None else None

    def start(self, task_id: Optional[str], force_refresh: bool = False) -> None:
        """Load ``task_id`` unless the guard says the data is current."""
        if (self._is_data_available.get(False) and not force_refresh) or self._data_loading.get(False):
            return

        self._data_loading.set_value(True)
        if task_id is None:
            self._data_loading.set_value(False)
            return
        launched = self.scope.launch(
            partial(self._get_task, task_id, force_refresh),
            lambda result: self._on_task_result(task_id, result),
        )
        if launched is None:
            self._data_loading.set_value(False)

    def refresh(self) -> None:
        task_id = self.task_id
        if task_id is not None:
            self.start(task_id, True)

    def set_completed(self, completed: bool) -> None:
        current = self._task.get()
        if current is None:
            return
        task = replace(to_entity(current), completed=completed)
        if completed:
            work = partial(self._complete_task, task)
            message = TASK_MARKED_COMPLETE
        else:
            work = partial(self._activate_task, task)
            message = TASK_MARKED_ACTIVE
        self.scope.launch(work, lambda result: self._on_completion_result(task, result, message))

    def delete_task(self) -> None:
        task_id = self.task_id
        if task_id is None:
            return
        self.scope.launch(partial(self._delete_task, task_id), self._on_deleted)

    def edit_task(self) -> None:
        self._edit_task_event.set_value(Event(None))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_task_result(self, task_id: str, result: Result[Task]) -> None:
        try:
            if isinstance(result, Success):
                self._set_task(to_view(result.data))
            else:
                self._on_data_not_available(task_id, result)
        finally:
            self._data_loading.set_value(False)

    def _set_task(self, task: Optional[PresenterTask]) -> None:
        self._task.set_value(task)
        self._is_data_available.set_value(task is not None)

    def _on_data_not_available(self, task_id: str, error: Error) -> None:
        if isinstance(error.exception, TaskNotFoundError):
            LOGGER.info("Task %s is not available", task_id)
        else:
            LOGGER.warning("Loading task %s failed: %s", task_id, error.message)
            self._show_snackbar_message(LOADING_TASKS_ERROR)
        self._set_task(None)

    def _on_completion_result(self, task: Task, result: Result[None], message: str) -> None:
        if isinstance(result, Success):
            self._task.set_value(to_view(task))
            self._show_snackbar_message(message)
        else:
            LOGGER.warning("Updating task %s failed: %s", task.id, result.message)
            self._show_snackbar_message(TASK_UPDATE_ERROR)

    def _on_deleted(self, result: Result[None]) -> None:
        if isinstance(result, Success):
            self._delete_task_event.set_value(Event(None))
        else:
            LOGGER.warning("Deleting task %s failed: %s", self.task_id, result.message)
            self._show_snackbar_message(TASK_UPDATE_ERROR)

    def _show_snackbar_message(self, message: str) -> None:
        self._snackbar_text.set_value(Event(message))


__all__ = ["TaskDetailViewModel"]
