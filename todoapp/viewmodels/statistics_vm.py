"""View model for the statistics screen."""

from __future__ import annotations

import logging
from typing import List

from ..domain.entities import FilterKind, Task, TaskStats
from ..domain.result import Result, Success
from ..domain.statistics import get_active_and_completed_stats
from ..usecases.get_tasks import GetTasks
from .live_data import LiveData, MutableLiveData
from .scope import ViewModel, ViewModelScope

LOGGER = logging.getLogger(__name__)


class StatisticsViewModel(ViewModel):
    """Active/completed percentages over the full task list."""

    def __init__(self, scope: ViewModelScope, *, get_tasks: GetTasks) -> None:
        super().__init__(scope)
        self._get_tasks = get_tasks

        self._data_loading: MutableLiveData[bool] = MutableLiveData(False)
        self.data_loading: LiveData[bool] = self._data_loading

        self._error: MutableLiveData[bool] = MutableLiveData(False)
        self.error: LiveData[bool] = self._error

        self._stats: MutableLiveData[TaskStats] = MutableLiveData()
        self._task_count: MutableLiveData[int] = MutableLiveData()

        self.active_tasks_percent: LiveData[float] = self.derive(
            self._stats, lambda stats: stats.active_percent
        )
        self.completed_tasks_percent: LiveData[float] = self.derive(
            self._stats, lambda stats: stats.completed_percent
        )
        self.empty: LiveData[bool] = self.derive(self._task_count, lambda count: count == 0)

    def start(self) -> None:
        self._load(force_update=False)

    def refresh(self) -> None:
        self._load(force_update=True)

    def _load(self, *, force_update: bool) -> None:
        if self._data_loading.get(False):
            return
        self._data_loading.set_value(True)
        launched = self.scope.launch(
            lambda: self._get_tasks(force_update, FilterKind.ALL),
            self._on_tasks_loaded,
        )
        if launched is None:
            self._data_loading.set_value(False)

    def _on_tasks_loaded(self, result: Result[List[Task]]) -> None:
        try:
            if isinstance(result, Success):
                self._error.set_value(False)
                self._compute_result(result.data)
            else:
                LOGGER.warning("Loading statistics failed: %s", result.message)
                self._error.set_value(True)
                self._compute_result([])
        finally:
            self._data_loading.set_value(False)

    def _compute_result(self, tasks: List[Task]) -> None:
        self._stats.set_value(get_active_and_completed_stats(tasks))
        self._task_count.set_value(len(tasks))


__all__ = ["StatisticsViewModel"]
