from __future__ import annotations

import pytest

from todoapp.domain.entities import Task, TaskStats
from todoapp.domain.statistics import get_active_and_completed_stats


@pytest.mark.parametrize("tasks", [None, []])
def test_no_tasks_give_zero_percentages(tasks) -> None:
    assert get_active_and_completed_stats(tasks) == TaskStats(0.0, 0.0)


def test_mixed_tasks() -> None:
    tasks = [Task(completed=False), Task(completed=True)]

    stats = get_active_and_completed_stats(tasks)

    assert stats.active_percent == 50.0
    assert stats.completed_percent == 50.0


def test_all_completed() -> None:
    stats = get_active_and_completed_stats([Task(completed=True)] * 3)

    assert stats == TaskStats(active_percent=0.0, completed_percent=100.0)
