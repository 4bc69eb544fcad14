from __future__ import annotations

import pytest

from todoapp.adapters.tasks_memory import InMemoryTasksRepository
from todoapp.adapters.tasks_rest import TasksRestAdapter
from todoapp.app.dispatch import QueueDispatcher
from todoapp.app.factory import ViewModelFactory, build_repository
from todoapp.app.settings import AppSettings
from todoapp.domain.ports import UseCaseError
from todoapp.viewmodels.add_edit_task_vm import AddEditTaskViewModel
from todoapp.viewmodels.statistics_vm import StatisticsViewModel
from todoapp.viewmodels.task_detail_vm import TaskDetailViewModel
from todoapp.viewmodels.tasks_vm import TasksViewModel

from todoapp.tests.unit.viewmodels.helpers import SynchronousExecutor


def test_memory_repository_is_seeded_with_demo_tasks() -> None:
    repo = build_repository(AppSettings())

    assert isinstance(repo, InMemoryTasksRepository)
    assert len(repo.get_tasks().data) == 3


def test_memory_repository_without_seed_is_empty() -> None:
    repo = build_repository(AppSettings(seed_demo_tasks=False, memory_latency_ms=5))

    assert repo.get_tasks().data == []
    assert repo.latency_s == pytest.approx(0.005)


def test_rest_repository_uses_settings() -> None:
    repo = build_repository(
        AppSettings(repository="rest", api_base_url="http://tasks.local", api_key="k", retries=4)
    )

    assert isinstance(repo, TasksRestAdapter)
    assert repo.base_url == "http://tasks.local"
    assert repo.cfg.retries == 4


def test_invalid_settings_raise_use_case_error() -> None:
    with pytest.raises(UseCaseError) as excinfo:
        build_repository(AppSettings(repository="rest"))

    assert excinfo.value.code == "REPOSITORY_CONFIG"


def test_factory_builds_each_screen_view_model() -> None:
    factory = ViewModelFactory(InMemoryTasksRepository(), executor=SynchronousExecutor())
    dispatcher = QueueDispatcher()

    assert isinstance(factory.tasks_view_model(dispatcher), TasksViewModel)
    assert isinstance(factory.task_detail_view_model(dispatcher), TaskDetailViewModel)
    assert isinstance(factory.add_edit_task_view_model(dispatcher), AddEditTaskViewModel)
    assert isinstance(factory.statistics_view_model(dispatcher), StatisticsViewModel)


def test_factory_owns_default_executor() -> None:
    factory = ViewModelFactory.from_settings(AppSettings(max_workers=2))

    factory.shutdown()

    with pytest.raises(RuntimeError):
        factory.executor.submit(lambda: None)
