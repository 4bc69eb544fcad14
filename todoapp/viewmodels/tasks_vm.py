"""View model for the task list screen.

Call context:
    Views observe the ``LiveData`` attributes and call the command methods.
    Every mutation is followed by a full reload instead of a local update, so
    the list always reflects repository state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import partial
from typing import List, Optional

from ..domain.entities import FilterKind, Task
from ..domain.result import Result, Success
from ..usecases.activate_task import ActivateTask
from ..usecases.clear_completed_tasks import ClearCompletedTasks
from ..usecases.complete_task import CompleteTask
from ..usecases.get_tasks import GetTasks
from .event import Event
from .live_data import LiveData, MutableLiveData
from .messages import (
    ADD_EDIT_RESULT_OK,
    COMPLETED_TASKS_CLEARED,
    DELETE_RESULT_OK,
    EDIT_RESULT_OK,
    FILTER_PRESENTATION,
    LOADING_TASKS_ERROR,
    SUCCESSFULLY_ADDED_TASK,
    SUCCESSFULLY_DELETED_TASK,
    SUCCESSFULLY_SAVED_TASK,
    TASK_MARKED_ACTIVE,
    TASK_MARKED_COMPLETE,
    TASK_UPDATE_ERROR,
)
from .presenter import PresenterTask, to_entity, to_view_list
from .scope import ViewModel, ViewModelScope

LOGGER = logging.getLogger(__name__)

_EDIT_RESULT_MESSAGES = {
    EDIT_RESULT_OK: SUCCESSFULLY_SAVED_TASK,
    ADD_EDIT_RESULT_OK: SUCCESSFULLY_ADDED_TASK,
    DELETE_RESULT_OK: SUCCESSFULLY_DELETED_TASK,
}


class TasksViewModel(ViewModel):
    """List state, filter selection and list-level commands."""

    def __init__(
        self,
        scope: ViewModelScope,
        *,
        get_tasks: GetTasks,
        clear_completed_tasks: ClearCompletedTasks,
        complete_task: CompleteTask,
        activate_task: ActivateTask,
    ) -> None:
        super().__init__(scope)
        self._get_tasks = get_tasks
        self._clear_completed_tasks = clear_completed_tasks
        self._complete_task = complete_task
        self._activate_task = activate_task

        self._items: MutableLiveData[List[PresenterTask]] = MutableLiveData([])
        self.items: LiveData[List[PresenterTask]] = self._items

        self._data_loading: MutableLiveData[bool] = MutableLiveData()
        self.data_loading: LiveData[bool] = self._data_loading

        self._current_filtering_label: MutableLiveData[str] = MutableLiveData()
        self.current_filtering_label: LiveData[str] = self._current_filtering_label

        self._no_tasks_label: MutableLiveData[str] = MutableLiveData()
        self.no_tasks_label: LiveData[str] = self._no_tasks_label

        self._no_task_icon: MutableLiveData[str] = MutableLiveData()
        self.no_task_icon: LiveData[str] = self._no_task_icon

        self._tasks_add_view_visible: MutableLiveData[bool] = MutableLiveData()
        self.tasks_add_view_visible: LiveData[bool] = self._tasks_add_view_visible

        self._is_data_available: MutableLiveData[bool] = MutableLiveData(False)
        self.is_data_available: LiveData[bool] = self._is_data_available

        self._is_data_loading_error: MutableLiveData[bool] = MutableLiveData(False)
        self.is_data_loading_error: LiveData[bool] = self._is_data_loading_error

        self._snackbar_text: MutableLiveData[Event[str]] = MutableLiveData()
        self.snackbar_text: LiveData[Event[str]] = self._snackbar_text

        self._open_task_event: MutableLiveData[Event[str]] = MutableLiveData()
        self.open_task_event: LiveData[Event[str]] = self._open_task_event

        self._new_task_event: MutableLiveData[Event[None]] = MutableLiveData()
        self.new_task_event: LiveData[Event[None]] = self._new_task_event

        self.empty: LiveData[bool] = self.derive(self._items, lambda items: not items)

        self._current_filtering = FilterKind.ALL
        self._load_generation = 0

        self.set_filtering(FilterKind.ALL)
        self.load_tasks(True)

    @property
    def current_filtering(self) -> FilterKind:
        return self._current_filtering

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------
    def set_filtering(self, request_type: FilterKind) -> None:
        """Select the filter used by the next :meth:`load_tasks`.

        Only the label/icon fields change here; the visible list keeps its
        current contents until the next load.
        """
        self._current_filtering = request_type
        presentation = FILTER_PRESENTATION[request_type]
        self._current_filtering_label.set_value(presentation.label)
        self._no_tasks_label.set_value(presentation.no_tasks_label)
        self._no_task_icon.set_value(presentation.no_tasks_icon)
        self._tasks_add_view_visible.set_value(presentation.add_view_visible)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def load_tasks(self, force_update: bool) -> None:
        """Fetch, filter and publish the task list.

        Only the most recent load publishes; results of loads it superseded
        are dropped, and loading stays true until the latest one finishes.

        Args:
            force_update: Ask the repository to bypass its cache.
        """
        self._load_generation += 1
        generation = self._load_generation
        self._data_loading.set_value(True)
        filtering = self._current_filtering
        launched = self.scope.launch(
            lambda: self._get_tasks(force_update, filtering),
            lambda result: self._on_tasks_loaded(result, force_update, generation),
        )
        if launched is None:
            self._data_loading.set_value(False)

    def refresh(self) -> None:
        self.load_tasks(True)

    def clear_completed_tasks(self) -> None:
        self.scope.launch(
            self._clear_completed_tasks,
            lambda result: self._after_mutation(result, COMPLETED_TASKS_CLEARED),
        )

    def complete_task(self, item: PresenterTask, completed: bool) -> None:
        """Mark ``item`` completed or active, confirm, then reload."""
        task = replace(to_entity(item), completed=completed)
        if completed:
            work = partial(self._complete_task, task)
            message = TASK_MARKED_COMPLETE
        else:
            work = partial(self._activate_task, task)
            message = TASK_MARKED_ACTIVE
        self.scope.launch(work, lambda result: self._after_mutation(result, message))

    def add_new_task(self) -> None:
        self._new_task_event.set_value(Event(None))

    def open_task(self, task_id: str) -> None:
        self._open_task_event.set_value(Event(task_id))

    def show_edit_result_message(self, result: Optional[int]) -> None:
        """Confirm the outcome reported by the add/edit or detail screen."""
        message = _EDIT_RESULT_MESSAGES.get(result) if result is not None else None
        if message:
            self._show_snackbar_message(message)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_tasks_loaded(
        self, result: Result[List[Task]], force_update: bool, generation: int
    ) -> None:
        if generation != self._load_generation:
            LOGGER.debug("Dropping superseded task load %d", generation)
            return
        try:
            if isinstance(result, Success):
                self._is_data_loading_error.set_value(False)
                self._items.set_value(to_view_list(result.data))
                self._is_data_available.set_value(True)
            else:
                LOGGER.warning(
                    "Loading tasks failed (force_update=%s): %s", force_update, result.message
                )
                self._is_data_loading_error.set_value(True)
                self._items.set_value([])
                self._is_data_available.set_value(False)
                self._show_snackbar_message(LOADING_TASKS_ERROR)
        finally:
            self._data_loading.set_value(False)

    def _after_mutation(self, result: Result[None], message: str) -> None:
        if isinstance(result, Success):
            self._show_snackbar_message(message)
        else:
            LOGGER.warning("Task update failed: %s", result.message)
            self._show_snackbar_message(TASK_UPDATE_ERROR)
        # Launched from the mutation's continuation, so the reload observes it.
        self.load_tasks(False)

    def _show_snackbar_message(self, message: str) -> None:
        self._snackbar_text.set_value(Event(message))


__all__ = ["TasksViewModel"]
