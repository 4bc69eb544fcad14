"""View model for the add/edit task screen.

The view writes ``title`` and ``description`` directly (two-way binding);
``save_task`` turns them into a domain task and reports back through
``task_updated_event`` or a snackbar message.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

from ..domain.entities import Task
from ..domain.errors import TaskValidationError
from ..domain.result import Result, Success
from ..usecases.get_task import GetTask
from ..usecases.save_task import SaveTask
from .event import Event
from .live_data import LiveData, MutableLiveData
from .messages import EMPTY_TASK, NO_TASK_FOUND, SAVING_TASK_ERROR
from .scope import ViewModel, ViewModelScope

LOGGER = logging.getLogger(__name__)


class AddEditTaskViewModel(ViewModel):
    def __init__(self, scope: ViewModelScope, *, get_task: GetTask, save_task: SaveTask) -> None:
        super().__init__(scope)
        self._get_task = get_task
        self._save_task = save_task

        # Written by the view.
        self.title: MutableLiveData[str] = MutableLiveData("")
        self.description: MutableLiveData[str] = MutableLiveData("")

        self._data_loading: MutableLiveData[bool] = MutableLiveData(False)
        self.data_loading: LiveData[bool] = self._data_loading

        self._snackbar_text: MutableLiveData[Event[str]] = MutableLiveData()
        self.snackbar_text: LiveData[Event[str]] = self._snackbar_text

        self._task_updated_event: MutableLiveData[Event[None]] = MutableLiveData()
        self.task_updated_event: LiveData[Event[None]] = self._task_updated_event

        self._task_id: Optional[str] = None
        self._is_new_task = False
        self._is_data_loaded = False
        self._task_completed = False

    @property
    def task_id(self) -> Optional[str]:
        return self._task_id

    @property
    def is_new_task(self) -> bool:
        return self._is_new_task

    def start(self, task_id: Optional[str] = None) -> None:
        """Enter new-task mode (``None``) or load ``task_id`` for editing."""
        if self._data_loading.get(False):
            return

        self._task_id = task_id
        if task_id is None:
            self._is_new_task = True
            return
        if self._is_data_loaded:
            return

        self._is_new_task = False
        self._data_loading.set_value(True)
        if self.scope.launch(partial(self._get_task, task_id), self._on_task_result) is None:
            self._data_loading.set_value(False)

    def save_task(self) -> None:
        title = self.title.get("") or ""
        description = self.description.get("") or ""
        if self._is_new_task or self._task_id is None:
            task = Task(title=title, description=description)
        else:
            task = Task(
                title=title,
                description=description,
                completed=self._task_completed,
                id=self._task_id,
            )
        self.scope.launch(partial(self._save_task, task), self._on_saved)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_task_result(self, result: Result[Task]) -> None:
        try:
            if isinstance(result, Success):
                task = result.data
                self.title.set_value(task.title)
                self.description.set_value(task.description)
                self._task_completed = task.completed
                self._is_data_loaded = True
            else:
                LOGGER.warning("Loading task %s for edit failed: %s", self._task_id, result.message)
                self._show_snackbar_message(NO_TASK_FOUND)
        finally:
            self._data_loading.set_value(False)

    def _on_saved(self, result: Result[None]) -> None:
        if isinstance(result, Success):
            self._task_updated_event.set_value(Event(None))
        elif isinstance(result.exception, TaskValidationError):
            self._show_snackbar_message(EMPTY_TASK)
        else:
            LOGGER.warning("Saving task failed: %s", result.message)
            self._show_snackbar_message(SAVING_TASK_ERROR)

    def _show_snackbar_message(self, message: str) -> None:
        self._snackbar_text.set_value(Event(message))


__all__ = ["AddEditTaskViewModel"]
