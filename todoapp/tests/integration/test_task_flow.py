from __future__ import annotations

import time
from typing import Callable, List

from todoapp.adapters.tasks_memory import InMemoryTasksRepository, demo_tasks
from todoapp.app.dispatch import QueueDispatcher
from todoapp.app.factory import ViewModelFactory
from todoapp.domain.entities import FilterKind
from todoapp.viewmodels.event import EventObserver
from todoapp.viewmodels.messages import (
    ADD_EDIT_RESULT_OK,
    COMPLETED_TASKS_CLEARED,
    SUCCESSFULLY_ADDED_TASK,
    TASK_MARKED_COMPLETE,
)


def _pump_until(dispatcher: QueueDispatcher, condition: Callable[[], bool], timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        dispatcher.drain()
        if condition():
            return
        time.sleep(0.005)
    raise AssertionError("condition not reached before timeout")


def test_add_complete_and_clear_with_worker_pool() -> None:
    repo = InMemoryTasksRepository(demo_tasks(), latency_s=0.002)
    factory = ViewModelFactory(repo, max_workers=2)
    dispatcher = QueueDispatcher()
    try:
        tasks_vm = factory.tasks_view_model(dispatcher)
        messages: List[str] = []
        tasks_vm.snackbar_text.observe(EventObserver(messages.append))
        _pump_until(dispatcher, lambda: tasks_vm.data_loading.get() is False)
        assert len(tasks_vm.items.get()) == 3

        edit_vm = factory.add_edit_task_view_model(dispatcher)
        updated: List[None] = []
        edit_vm.task_updated_event.observe(EventObserver(updated.append))
        edit_vm.start(None)
        edit_vm.title.set_value("Write report")
        edit_vm.description.set_value("Quarterly numbers")
        edit_vm.save_task()
        _pump_until(dispatcher, lambda: bool(updated))
        edit_vm.clear()

        tasks_vm.show_edit_result_message(ADD_EDIT_RESULT_OK)
        tasks_vm.load_tasks(False)
        _pump_until(dispatcher, lambda: len(tasks_vm.items.get()) == 4)
        new_item = tasks_vm.items.get()[-1]
        assert new_item.title == "Write report"

        tasks_vm.complete_task(new_item, True)
        _pump_until(dispatcher, lambda: tasks_vm.items.get()[-1].completed)

        tasks_vm.set_filtering(FilterKind.COMPLETED)
        tasks_vm.load_tasks(False)
        _pump_until(dispatcher, lambda: len(tasks_vm.items.get()) == 2)

        stats_vm = factory.statistics_view_model(dispatcher)
        stats_vm.start()
        _pump_until(dispatcher, lambda: stats_vm.completed_tasks_percent.is_set)
        assert stats_vm.completed_tasks_percent.get() == 50.0

        tasks_vm.clear_completed_tasks()
        _pump_until(dispatcher, lambda: COMPLETED_TASKS_CLEARED in messages and not tasks_vm.items.get())

        assert messages[:2] == [SUCCESSFULLY_ADDED_TASK, TASK_MARKED_COMPLETE]
        assert len(repo.get_tasks().data) == 2
    finally:
        factory.shutdown()


def test_detail_delete_is_dropped_after_screen_is_cleared() -> None:
    repo = InMemoryTasksRepository(demo_tasks(), latency_s=0.01)
    factory = ViewModelFactory(repo, max_workers=1)
    dispatcher = QueueDispatcher()
    try:
        task_id = repo.get_tasks().data[0].id
        detail_vm = factory.task_detail_view_model(dispatcher)
        detail_vm.start(task_id)
        detail_vm.clear()

        time.sleep(0.05)
        dispatcher.drain()

        assert not detail_vm.task.is_set
        assert detail_vm.data_loading.get() is True
    finally:
        factory.shutdown()
